"""
Withdrawal request handler.

Drives one withdrawal through the flow:
amount -> quote -> security gate -> PIN -> remote submission.
"""

from decimal import Decimal

from loguru import logger

from wallet.models.security import SecurityState
from wallet.models.withdrawal import (
    SubmissionResult,
    WithdrawalQuote,
    WithdrawalRequest,
)
from wallet.services.wallet_security_service import WalletSecurityService
from wallet.services.withdrawal.withdrawal_security_gate import (
    GateResult,
    SecurityGate,
)
from wallet.services.withdrawal.withdrawal_submitter import WithdrawalSubmitter
from wallet.services.withdrawal.withdrawal_tiering import RiskTieringEvaluator
from wallet.utils.exceptions import WalletError, WithdrawalInProgressError
from wallet.utils.validation import parse_amount


class WithdrawalRequestHandler:
    """Handler for withdrawal requests."""

    def __init__(
        self,
        security_service: WalletSecurityService,
        submitter: WithdrawalSubmitter,
        gate: SecurityGate | None = None,
        evaluator: RiskTieringEvaluator | None = None,
    ) -> None:
        """
        Initialize withdrawal request handler.

        Args:
            security_service: Source of the current security state
            submitter: Remote submitter
            gate: Security gate
            evaluator: Risk tiering evaluator
        """
        self.security_service = security_service
        self.submitter = submitter
        self.gate = gate or SecurityGate()
        self.evaluator = evaluator or RiskTieringEvaluator()
        self._in_flight = False

    @property
    def is_submitting(self) -> bool:
        """Whether a submission is awaiting the remote service."""
        return self._in_flight

    def preview(self, amount: Decimal | str | None) -> WithdrawalQuote:
        """
        Compute fee, net amount and tier for display.

        Args:
            amount: Amount as entered; blank, invalid or negative
                entries are quoted as zero

        Returns:
            WithdrawalQuote
        """
        return self.evaluator.evaluate(max(parse_amount(amount), Decimal("0")))

    async def _current_state(self) -> SecurityState:
        """Return cached security state, fetching it on first use."""
        state = self.security_service.state
        if state is None:
            state = await self.security_service.refresh()
        return state

    async def authorize(
        self,
        amount: Decimal,
        payout_method_id: str | None,
        available_balance: Decimal,
    ) -> GateResult:
        """
        Check whether the withdrawal may proceed to the PIN challenge.

        Args:
            amount: Withdrawal amount
            payout_method_id: Selected payout method reference
            available_balance: User's available balance

        Returns:
            GateResult
        """
        state = await self._current_state()
        result = self.gate.can_withdraw(
            state, amount, available_balance, payout_method_id
        )
        if not result.allowed:
            logger.info(f"Withdrawal not authorized: {result.reason}")
        return result

    async def withdraw(
        self,
        request: WithdrawalRequest,
        available_balance: Decimal,
    ) -> SubmissionResult:
        """
        Gate and submit a withdrawal.

        Local validation errors are raised before any remote call.

        Args:
            request: Withdrawal request carrying the entered PIN
            available_balance: User's available balance

        Returns:
            SubmissionResult with transaction reference

        Raises:
            WithdrawalInProgressError: If a submission is outstanding
            WalletError: Gate denial or remote failure
        """
        if self._in_flight:
            raise WithdrawalInProgressError()

        self._in_flight = True
        try:
            result = await self.authorize(
                request.amount, request.payout_method_id, available_balance
            )
            result.raise_for_reason()

            quote = self.preview(request.amount)
            logger.info(
                f"Submitting withdrawal: amount={quote.amount}, "
                f"fee={quote.fee}, tier={quote.tier}"
            )

            try:
                return await self.submitter.submit(
                    amount=request.amount,
                    payout_method_id=request.payout_method_id,
                    pin=request.pin,
                    description=request.description,
                )
            finally:
                await self._refresh_after_submission()
        finally:
            self._in_flight = False

    async def _refresh_after_submission(self) -> None:
        """Re-read security state once the remote call has resolved."""
        try:
            await self.security_service.refresh()
        except WalletError as e:
            logger.warning(
                f"Could not refresh security state after withdrawal: {e.message}"
            )
