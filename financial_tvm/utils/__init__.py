"""Utility functions for financial calculations."""

from financial_tvm.utils.financial_utils import (
    as_cash_flows,
    as_float64,
    calculate_discount_factors,
    has_mixed_signs,
)

__all__ = [
    "as_cash_flows",
    "as_float64",
    "calculate_discount_factors",
    "has_mixed_signs",
]
