"""
Withdrawal security gate module.

Contains the gate that decides whether a withdrawal may proceed to the
PIN challenge, and the GateResult class.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from wallet.models.security import SecurityState
from wallet.models.types import ErrorKind
from wallet.services.withdrawal.withdrawal_basic_checks import (
    BasicChecksMixin,
)
from wallet.services.withdrawal.withdrawal_security_checks import (
    SecurityChecksMixin,
)
from wallet.utils.exceptions import (
    ERRORS_BY_KIND,
    SecurityLockActiveError,
)


@dataclass(frozen=True)
class GateResult:
    """Result of the security gate."""

    allowed: bool
    reason: ErrorKind | None = None
    lock_expires_at: datetime | None = None

    @classmethod
    def success(cls) -> "GateResult":
        """Create an allowing gate result."""
        return cls(allowed=True)

    @classmethod
    def denied(
        cls, reason: ErrorKind, lock_expires_at: datetime | None = None
    ) -> "GateResult":
        """Create a denying gate result."""
        return cls(
            allowed=False, reason=reason, lock_expires_at=lock_expires_at
        )

    @property
    def message(self) -> str | None:
        """User-facing message for the denial reason."""
        if self.reason is None:
            return None
        return ERRORS_BY_KIND[self.reason].default_message

    def raise_for_reason(self) -> None:
        """
        Raise the exception matching the denial reason.

        Raises:
            WalletError: Subclass matching reason, if denied
        """
        if self.allowed or self.reason is None:
            return
        if self.reason == ErrorKind.SECURITY_LOCK_ACTIVE:
            raise SecurityLockActiveError(
                lock_expires_at=self.lock_expires_at
            )
        raise ERRORS_BY_KIND[self.reason]()


class SecurityGate(BasicChecksMixin, SecurityChecksMixin):
    """Gate for withdrawal requests.

    The lock check runs first so a locked account does not reveal
    whether a PIN exists or the balance suffices. The remote service
    re-validates everything independently.
    """

    def can_withdraw(
        self,
        state: SecurityState,
        amount: Decimal,
        available_balance: Decimal,
        payout_method_id: str | None,
    ) -> GateResult:
        """
        Run all checks in order and return the first denial.

        Args:
            state: Current security state
            amount: Withdrawal amount
            available_balance: User's available balance
            payout_method_id: Selected payout method reference

        Returns:
            GateResult with allowed flag and optional reason
        """
        # 1. Security lock
        is_valid, reason = self.check_security_lock(state)
        if not is_valid:
            return GateResult.denied(reason, state.lock_expires_at)

        # 2. Transaction PIN configured
        is_valid, reason = self.check_pin_configured(state)
        if not is_valid:
            return GateResult.denied(reason)

        # 3. Positive amount
        is_valid, reason = self.check_amount(amount)
        if not is_valid:
            return GateResult.denied(reason)

        # 4. Balance
        is_valid, reason = self.check_balance(amount, available_balance)
        if not is_valid:
            return GateResult.denied(reason)

        # 5. Payout method selected
        is_valid, reason = self.check_payout_method(payout_method_id)
        if not is_valid:
            return GateResult.denied(reason)

        return GateResult.success()
