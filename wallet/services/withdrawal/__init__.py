"""
Withdrawal services package.

This package provides the withdrawal authorization flow:
- withdrawal_tiering: Fee and risk tier for a requested amount
- withdrawal_security_gate: Ordered gate checks and GateResult
  - withdrawal_basic_checks: Amount, balance and payout method checks
  - withdrawal_security_checks: Security lock and PIN checks
- withdrawal_submitter: PIN verification and remote submission
- withdrawal_request_handler: End-to-end orchestration

All components are re-exported for easy importing.
"""

from wallet.services.withdrawal.withdrawal_request_handler import (
    WithdrawalRequestHandler,
)
from wallet.services.withdrawal.withdrawal_security_gate import (
    GateResult,
    SecurityGate,
)
from wallet.services.withdrawal.withdrawal_submitter import (
    WithdrawalSubmitter,
)
from wallet.services.withdrawal.withdrawal_tiering import (
    RiskTieringEvaluator,
    calculate_fee,
    classify_tier,
    quote_withdrawal,
)


__all__ = [
    "GateResult",
    "RiskTieringEvaluator",
    "SecurityGate",
    "WithdrawalRequestHandler",
    "WithdrawalSubmitter",
    "calculate_fee",
    "classify_tier",
    "quote_withdrawal",
]
