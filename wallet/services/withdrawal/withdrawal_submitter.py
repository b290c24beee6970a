"""
Withdrawal submitter.

Verifies the PIN remotely, then issues exactly one initiate-withdrawal
call. No retries: a failed submission needs explicit user re-initiation.
"""

from decimal import Decimal

from loguru import logger

from wallet.config.settings import Settings, settings as default_settings
from wallet.models.withdrawal import SubmissionResult
from wallet.services.wallet_functions_client import WalletFunctionsClient
from wallet.utils.exceptions import IncorrectPinError, RemoteRejectionError
from wallet.utils.validation import is_valid_pin


class WithdrawalSubmitter:
    """Packages a verified withdrawal into a single remote call."""

    def __init__(
        self,
        client: WalletFunctionsClient,
        config: Settings | None = None,
    ) -> None:
        """
        Initialize withdrawal submitter.

        Args:
            client: Edge functions client
            config: Settings instance (defaults to global settings)
        """
        self.client = client
        self.config = config or default_settings

    async def submit(
        self,
        amount: Decimal,
        payout_method_id: str,
        pin: str,
        description: str | None = None,
    ) -> SubmissionResult:
        """
        Verify PIN and initiate the withdrawal.

        Args:
            amount: Withdrawal amount
            payout_method_id: Payout method reference
            pin: 4-digit PIN entered by the user
            description: Transfer description

        Returns:
            SubmissionResult with the transaction reference

        Raises:
            IncorrectPinError: If the PIN is malformed or rejected
            RemoteRejectionError: If the service answers success=false
            NetworkError: On transport failure (passed through)
        """
        if not is_valid_pin(pin):
            logger.warning("Withdrawal aborted: malformed transaction PIN")
            raise IncorrectPinError("Transaction PIN must be exactly 4 digits")

        # PIN verification must resolve before initiation is issued
        if not await self.client.verify_pin(pin):
            logger.warning("Withdrawal aborted: incorrect transaction PIN")
            raise IncorrectPinError()

        forwarded_pin = pin if self.config.forward_pin_on_initiate else None
        response = await self.client.initiate_withdrawal(
            payout_method_id=payout_method_id,
            amount=amount,
            description=description or self.config.withdrawal_description,
            pin=forwarded_pin,
        )

        if not response.get("success"):
            message = response.get("error") or "Failed to initiate withdrawal"
            logger.warning(f"Withdrawal rejected by remote service: {message}")
            raise RemoteRejectionError(message)

        transaction = response.get("data") or {}
        reference = transaction.get("reference") or response.get("reference")
        if not reference:
            raise RemoteRejectionError(
                "Withdrawal accepted without a transaction reference"
            )

        logger.info(
            f"Withdrawal submitted: reference={reference}, amount={amount}"
        )
        return SubmissionResult(reference=reference, transaction=transaction)
