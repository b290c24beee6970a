"""
Services.

Business logic layer.
"""

from wallet.services.pin_challenge import (
    KEYPAD_LAYOUT,
    PinChallenge,
    PinChallengeState,
)
from wallet.services.wallet_functions_client import WalletFunctionsClient
from wallet.services.wallet_security_service import WalletSecurityService


__all__ = [
    "KEYPAD_LAYOUT",
    "PinChallenge",
    "PinChallengeState",
    "WalletFunctionsClient",
    "WalletSecurityService",
]
