"""
Exception handling utilities.

Defines categorized exception types for the withdrawal flow.
Every concrete error carries an ErrorKind and a user-facing message.
"""

from datetime import datetime

from wallet.models.types import ErrorKind


class WalletError(Exception):
    """Base class for all withdrawal flow errors."""

    # Set by each concrete subclass
    kind: ErrorKind | None = None
    default_message = "Failed to process withdrawal"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidAmountError(WalletError):
    """Raised when the requested amount is not a positive number."""

    kind = ErrorKind.INVALID_AMOUNT
    default_message = "Please enter a valid amount"


class InsufficientBalanceError(WalletError):
    """Raised when the amount exceeds the available balance."""

    kind = ErrorKind.INSUFFICIENT_BALANCE
    default_message = "Insufficient balance"


class NoPayoutMethodError(WalletError):
    """Raised when no payout method was selected."""

    kind = ErrorKind.NO_PAYOUT_METHOD
    default_message = "Please select a payout method"


class SecurityLockActiveError(WalletError):
    """Raised while a security lock blocks withdrawals."""

    kind = ErrorKind.SECURITY_LOCK_ACTIVE
    default_message = (
        "Withdrawals are temporarily locked after a recent "
        "change to your account security details"
    )

    def __init__(
        self,
        message: str | None = None,
        lock_expires_at: datetime | None = None,
    ) -> None:
        super().__init__(message)
        self.lock_expires_at = lock_expires_at


class PinNotConfiguredError(WalletError):
    """Raised when the user has not set a transaction PIN yet."""

    kind = ErrorKind.PIN_NOT_CONFIGURED
    default_message = "Set up a transaction PIN before withdrawing"


class IncorrectPinError(WalletError):
    """Raised when the remote verifier rejects the PIN."""

    kind = ErrorKind.INCORRECT_PIN
    default_message = "Incorrect transaction PIN"


class RemoteRejectionError(WalletError):
    """Raised when the edge function answers success=false."""

    kind = ErrorKind.REMOTE_REJECTION
    default_message = "Failed to initiate withdrawal"


class NetworkError(WalletError):
    """Raised on transport failures and non-2xx responses."""

    kind = ErrorKind.NETWORK_ERROR
    default_message = "Network request failed"

    def __init__(
        self, message: str | None = None, status: int | None = None
    ) -> None:
        super().__init__(message)
        self.status = status


class WithdrawalInProgressError(WalletError):
    """Raised when a second submission starts before the first resolves."""

    kind = ErrorKind.WITHDRAWAL_IN_PROGRESS
    default_message = "A withdrawal is already being processed"


ERRORS_BY_KIND: dict[ErrorKind, type[WalletError]] = {
    error_cls.kind: error_cls
    for error_cls in (
        InvalidAmountError,
        InsufficientBalanceError,
        NoPayoutMethodError,
        SecurityLockActiveError,
        PinNotConfiguredError,
        IncorrectPinError,
        RemoteRejectionError,
        NetworkError,
        WithdrawalInProgressError,
    )
}
