"""Pydantic models for withdrawal requests and quotes."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from wallet.config.business_constants import (
    DEFAULT_WITHDRAWAL_DESCRIPTION,
    DELAYED_TIER_PROCESSING_HOURS,
)
from wallet.models.types import WithdrawalTier
from wallet.utils.security import mask_pin


class WithdrawalQuote(BaseModel):
    """Fee and tier computed for a requested amount.

    Derived on every amount change; never stored.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(..., ge=0, description="Requested amount")
    fee: Decimal = Field(..., ge=0, description="Processing fee")
    net_amount: Decimal = Field(..., description="Amount the user receives")
    tier: WithdrawalTier | None = Field(
        default=None, description="Risk tier (None for a zero amount)"
    )

    @property
    def requires_admin_approval(self) -> bool:
        """Whether an administrator must approve before funds move."""
        return self.tier == WithdrawalTier.MANUAL_REVIEW

    @property
    def processing_delay_hours(self) -> int:
        """Automated verification delay before processing."""
        if self.tier == WithdrawalTier.DELAYED_12H:
            return DELAYED_TIER_PROCESSING_HOURS
        return 0


class WithdrawalRequest(BaseModel):
    """A single withdrawal action.

    Built fresh per user action and discarded once the remote call
    resolves. The PIN is excluded from dumps and masked in repr.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(..., description="Requested amount")
    payout_method_id: str | None = Field(
        default=None, description="Selected payout method reference"
    )
    pin: str = Field(..., exclude=True, repr=False)
    description: str = DEFAULT_WITHDRAWAL_DESCRIPTION

    def __repr__(self) -> str:
        return (
            f"WithdrawalRequest(amount={self.amount}, "
            f"payout_method_id={self.payout_method_id!r}, "
            f"pin={mask_pin(self.pin)!r})"
        )


class SubmissionResult(BaseModel):
    """Successful withdrawal submission."""

    reference: str
    transaction: dict[str, Any] = Field(default_factory=dict)
