"""Core time-value-of-money functions."""

from financial_tvm.core.annuity import fv, ipmt, nper, pmt, ppmt, pv
from financial_tvm.core.cash_flow_analyzer import CashFlowAnalyzer
from financial_tvm.core.cash_flows import mirr, npv
from financial_tvm.core.payment_due_time import PaymentDueTime
from financial_tvm.core.rate_solver import irr, rate

__all__ = [
    "PaymentDueTime",
    "fv",
    "pmt",
    "nper",
    "ipmt",
    "ppmt",
    "pv",
    "rate",
    "irr",
    "npv",
    "mirr",
    "CashFlowAnalyzer",
]
