"""
Standard type definitions for wallet models.

Provides the enumerations shared by the withdrawal flow.
"""

from enum import StrEnum


class WithdrawalTier(StrEnum):
    """Risk/processing classification of a withdrawal."""

    INSTANT = "instant"
    DELAYED_12H = "delayed_12h"
    MANUAL_REVIEW = "manual_review"


class ErrorKind(StrEnum):
    """Error kinds surfaced by the withdrawal flow."""

    INVALID_AMOUNT = "InvalidAmount"
    INSUFFICIENT_BALANCE = "InsufficientBalance"
    NO_PAYOUT_METHOD = "NoPayoutMethod"
    SECURITY_LOCK_ACTIVE = "SecurityLockActive"
    PIN_NOT_CONFIGURED = "PinNotConfigured"
    INCORRECT_PIN = "IncorrectPin"
    REMOTE_REJECTION = "RemoteRejection"
    NETWORK_ERROR = "NetworkError"
    WITHDRAWAL_IN_PROGRESS = "WithdrawalInProgress"
