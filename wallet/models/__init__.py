"""
Wallet models.

Data shapes exchanged across the withdrawal flow boundary.
"""

from wallet.models.security import PayoutMethod, SecurityState, WalletBalance
from wallet.models.types import ErrorKind, WithdrawalTier
from wallet.models.withdrawal import (
    SubmissionResult,
    WithdrawalQuote,
    WithdrawalRequest,
)


__all__ = [
    "ErrorKind",
    "PayoutMethod",
    "SecurityState",
    "SubmissionResult",
    "WalletBalance",
    "WithdrawalQuote",
    "WithdrawalRequest",
    "WithdrawalTier",
]
