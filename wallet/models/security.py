"""Pydantic models for wallet security state and payout data."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from wallet.config.business_constants import WALLET_CURRENCY
from wallet.utils.datetime_utils import parse_timestamp, utc_now
from wallet.utils.security import mask_account_number


class SecurityState(BaseModel):
    """Security flags owned by the remote service.

    This core only reads them: locks are set server-side after a
    sensitive account change and expire on their own.
    """

    model_config = ConfigDict(frozen=True)

    has_pin: bool = False
    is_locked: bool = False
    lock_expires_at: datetime | None = None

    @field_validator("lock_expires_at", mode="before")
    @classmethod
    def normalize_lock_expiry(cls, v: Any) -> datetime | None:
        """Accept ISO strings and treat naive timestamps as UTC."""
        return parse_timestamp(v)

    @model_validator(mode="after")
    def validate_lock_consistency(self) -> "SecurityState":
        """A future expiry implies an active lock."""
        if (
            self.lock_expires_at is not None
            and self.lock_expires_at > utc_now()
            and not self.is_locked
        ):
            raise ValueError(
                "is_locked must be true while lock_expires_at is in the future"
            )
        return self

    @classmethod
    def from_profile(
        cls, profile: dict[str, Any], now: datetime | None = None
    ) -> "SecurityState":
        """
        Derive security state from a remote profile record.

        Args:
            profile: Profile dict with transaction_pin_hash and
                payout_lock_until
            now: Reference time (defaults to current UTC time)

        Returns:
            SecurityState with the lock active only while
            payout_lock_until lies in the future
        """
        now = now or utc_now()
        lock_until = parse_timestamp(profile.get("payout_lock_until"))
        active = lock_until is not None and lock_until > now
        return cls(
            has_pin=bool(profile.get("transaction_pin_hash")),
            is_locked=active,
            lock_expires_at=lock_until if active else None,
        )


class PayoutMethod(BaseModel):
    """Externally owned payout destination (bank account)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    bank_name: str
    account_number: str
    account_name: str | None = None
    is_primary: bool = False
    is_verified: bool = False

    @property
    def masked_account_number(self) -> str:
        """Account number safe for logs and labels."""
        return mask_account_number(self.account_number)

    @property
    def label(self) -> str:
        """Display label: bank name and masked account number."""
        return f"{self.bank_name} - {self.masked_account_number}"


class WalletBalance(BaseModel):
    """Wallet balances reported by the remote service."""

    available_balance: Decimal = Field(default=Decimal("0"))
    pending_balance: Decimal = Field(default=Decimal("0"))
    currency: str = WALLET_CURRENCY
