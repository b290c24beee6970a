"""
Withdrawal risk tiering.

Pure business logic mapping a requested amount to a processing tier
and fee. No I/O, no dependency on the remote client.
"""

from decimal import Decimal, InvalidOperation

from wallet.config.business_constants import (
    DELAYED_TIER_THRESHOLD,
    HIGH_VALUE_WITHDRAWAL_FEE,
    MANUAL_REVIEW_THRESHOLD,
    STANDARD_WITHDRAWAL_FEE,
)
from wallet.models.types import WithdrawalTier
from wallet.models.withdrawal import WithdrawalQuote
from wallet.utils.exceptions import InvalidAmountError


def classify_tier(amount: Decimal) -> WithdrawalTier | None:
    """
    Classify amount into a risk tier.

    Args:
        amount: Requested amount (>= 0)

    Returns:
        Tier, or None for a zero amount
    """
    if amount >= MANUAL_REVIEW_THRESHOLD:
        return WithdrawalTier.MANUAL_REVIEW
    if amount >= DELAYED_TIER_THRESHOLD:
        return WithdrawalTier.DELAYED_12H
    if amount > 0:
        return WithdrawalTier.INSTANT
    return None


def calculate_fee(amount: Decimal) -> Decimal:
    """
    Calculate processing fee for amount.

    Args:
        amount: Requested amount (>= 0)

    Returns:
        Fee: 50 from the delayed threshold up, 25 below it, 0 for zero
    """
    if amount >= DELAYED_TIER_THRESHOLD:
        return HIGH_VALUE_WITHDRAWAL_FEE
    if amount > 0:
        return STANDARD_WITHDRAWAL_FEE
    return Decimal("0")


def quote_withdrawal(amount: Decimal | int | str) -> WithdrawalQuote:
    """
    Compute fee, net amount and tier for a requested withdrawal.

    Args:
        amount: Requested amount

    Returns:
        WithdrawalQuote where net_amount + fee == amount

    Raises:
        InvalidAmountError: If amount is negative, non-finite or not a number

    Example:
        >>> quote_withdrawal(Decimal("4999")).tier
        <WithdrawalTier.INSTANT: 'instant'>
        >>> quote_withdrawal(Decimal("5000")).fee
        Decimal('50')
    """
    try:
        amount = Decimal(amount)
    except InvalidOperation as e:
        raise InvalidAmountError(f"Amount is not a number: {amount!r}") from e
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {amount}")
    if amount < 0:
        raise InvalidAmountError(f"Amount must not be negative: {amount}")

    fee = calculate_fee(amount)
    return WithdrawalQuote(
        amount=amount,
        fee=fee,
        net_amount=amount - fee,
        tier=classify_tier(amount),
    )


class RiskTieringEvaluator:
    """Injectable wrapper around quote_withdrawal."""

    def evaluate(self, amount: Decimal | int | str) -> WithdrawalQuote:
        """Compute the withdrawal quote for amount."""
        return quote_withdrawal(amount)
