"""
Business logic constants for the Murranno wallet.

Central location for withdrawal rules used by the tiering evaluator,
the security gate and the PIN challenge. Importable from anywhere in
the package without circular dependencies.
"""

from decimal import Decimal


# Wallet currency (Paystack settles in Naira)
WALLET_CURRENCY = "NGN"

# Withdrawal risk tiers
# Amounts at or above this value are processed after a 12-hour delay
DELAYED_TIER_THRESHOLD = Decimal("5000")
# Amounts at or above this value wait for administrator approval
MANUAL_REVIEW_THRESHOLD = Decimal("50000")

# Processing fees per band
STANDARD_WITHDRAWAL_FEE = Decimal("25")
HIGH_VALUE_WITHDRAWAL_FEE = Decimal("50")

# Automated verification delay for the delayed tier
DELAYED_TIER_PROCESSING_HOURS = 12

# Transaction PIN
PIN_LENGTH = 4

# Default description sent with every withdrawal initiation
DEFAULT_WITHDRAWAL_DESCRIPTION = "Withdrawal from wallet"


class EdgeFunction:
    """Remote Supabase Edge Function names."""
    GET_PROFILE = "get-profile"
    SETUP_PIN = "setup-transaction-pin"
    VERIFY_PIN = "verify-transaction-pin"
    INITIATE_WITHDRAWAL = "paystack-initiate-withdrawal"
    GET_PAYOUT_METHODS = "get-payout-methods"
    GET_WALLET_BALANCE = "get-wallet-balance"
    GET_WITHDRAWAL_STATUS = "get-withdrawal-status"
