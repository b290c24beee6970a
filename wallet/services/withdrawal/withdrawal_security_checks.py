"""
Withdrawal security checks module.

Contains security-related gate checks:
- Security lock check
- Transaction PIN presence check
"""

from loguru import logger

from wallet.models.security import SecurityState
from wallet.models.types import ErrorKind


class SecurityChecksMixin:
    """Mixin providing security-related gate checks."""

    def check_security_lock(
        self, state: SecurityState
    ) -> tuple[bool, ErrorKind | None]:
        """
        Check if a security lock blocks withdrawals.

        Args:
            state: Current security state

        Returns:
            Tuple of (is_valid, error_kind)
        """
        if state.is_locked:
            logger.warning(
                f"Withdrawal blocked: security lock active "
                f"until {state.lock_expires_at}"
            )
            return False, ErrorKind.SECURITY_LOCK_ACTIVE

        return True, None

    def check_pin_configured(
        self, state: SecurityState
    ) -> tuple[bool, ErrorKind | None]:
        """
        Check if user has set a transaction PIN.

        Args:
            state: Current security state

        Returns:
            Tuple of (is_valid, error_kind)
        """
        if not state.has_pin:
            logger.info("Withdrawal blocked: transaction PIN not configured")
            return False, ErrorKind.PIN_NOT_CONFIGURED

        return True, None
