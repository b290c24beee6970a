"""
Wallet security service.

Keeps the latest SecurityState and wraps PIN setup/verification.
"""

from loguru import logger

from wallet.models.security import SecurityState
from wallet.services.wallet_functions_client import WalletFunctionsClient
from wallet.utils.exceptions import WalletError
from wallet.utils.validation import is_valid_pin


class WalletSecurityService:
    """Reads security state and manages the transaction PIN."""

    def __init__(self, client: WalletFunctionsClient) -> None:
        """
        Initialize wallet security service.

        Args:
            client: Edge functions client
        """
        self.client = client
        self._state: SecurityState | None = None

    @property
    def state(self) -> SecurityState | None:
        """Last fetched security state (None before first refresh)."""
        return self._state

    async def refresh(self) -> SecurityState:
        """
        Fetch security state from the remote profile.

        Returns:
            Fresh SecurityState
        """
        self._state = await self.client.get_security_state()
        logger.info(
            f"Security state refreshed: has_pin={self._state.has_pin}, "
            f"is_locked={self._state.is_locked}"
        )
        return self._state

    async def setup_pin(self, pin: str) -> bool:
        """
        Set the transaction PIN.

        Args:
            pin: New 4-digit PIN

        Returns:
            True if the PIN was stored

        Raises:
            ValueError: If pin is not 4 digits
        """
        if not is_valid_pin(pin):
            raise ValueError("Transaction PIN must be exactly 4 digits")

        try:
            success = await self.client.setup_pin(pin)
        except WalletError as e:
            logger.error(f"Error setting up PIN: {e.message}")
            return False

        if success:
            logger.info("Transaction PIN set successfully")
            if self._state is not None:
                self._state = self._state.model_copy(update={"has_pin": True})
            else:
                self._state = SecurityState(has_pin=True)
        return success

    async def verify_pin(self, pin: str) -> bool:
        """
        Verify the transaction PIN remotely.

        Remote failures count as a failed verification.

        Args:
            pin: 4-digit PIN

        Returns:
            True if verified
        """
        if not is_valid_pin(pin):
            return False

        try:
            return await self.client.verify_pin(pin)
        except WalletError as e:
            logger.error(f"Error verifying PIN: {e.message}")
            return False
