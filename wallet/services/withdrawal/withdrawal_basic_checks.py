"""
Withdrawal basic checks module.

Contains local validation checks that need no remote round trip:
- Positive amount check
- Balance check
- Payout method selection check
"""

from decimal import Decimal

from loguru import logger

from wallet.models.types import ErrorKind


class BasicChecksMixin:
    """Mixin providing basic gate checks."""

    def check_amount(
        self, amount: Decimal
    ) -> tuple[bool, ErrorKind | None]:
        """
        Check that amount is a positive finite number.

        Args:
            amount: Withdrawal amount

        Returns:
            Tuple of (is_valid, error_kind)
        """
        # NaN/Infinity cannot be compared safely
        if not amount.is_finite() or amount <= 0:
            return False, ErrorKind.INVALID_AMOUNT

        return True, None

    def check_balance(
        self, amount: Decimal, available_balance: Decimal
    ) -> tuple[bool, ErrorKind | None]:
        """
        Check if user has sufficient balance.

        Args:
            amount: Withdrawal amount
            available_balance: User's available balance

        Returns:
            Tuple of (is_valid, error_kind)
        """
        if amount > available_balance:
            logger.warning(
                f"Insufficient balance: "
                f"requested={amount}, available={available_balance}"
            )
            return False, ErrorKind.INSUFFICIENT_BALANCE

        return True, None

    def check_payout_method(
        self, payout_method_id: str | None
    ) -> tuple[bool, ErrorKind | None]:
        """
        Check that a payout method was selected.

        Args:
            payout_method_id: Selected payout method reference

        Returns:
            Tuple of (is_valid, error_kind)
        """
        if not payout_method_id:
            return False, ErrorKind.NO_PAYOUT_METHOD

        return True, None
