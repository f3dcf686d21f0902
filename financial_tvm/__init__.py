"""
Time-value-of-money functions.

Spreadsheet-equivalent financial functions on plain floats:
- Future value, present value, payment and number of periods of an annuity
- Interest/principal split of each payment
- Periodic interest rate and IRR via Newton-Raphson (NaN if no convergence)
- NPV and MIRR of periodic cash flow series
"""

from financial_tvm.core import (
    CashFlowAnalyzer,
    PaymentDueTime,
    fv,
    ipmt,
    irr,
    mirr,
    nper,
    npv,
    pmt,
    ppmt,
    pv,
    rate,
)
from financial_tvm.models import AmortizationModel

__version__ = "1.0.0"
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
    "AmortizationModel",
    "CashFlowAnalyzer",
]
