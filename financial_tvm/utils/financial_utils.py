"""Numeric helpers shared by the TVM and cash flow functions."""

from typing import Sequence

import numpy as np


def as_float64(*values: float) -> tuple[np.float64, ...]:
    """
    Convert scalars to numpy float64.

    float64 arithmetic follows IEEE semantics: division by zero gives a
    signed infinity, overflow gives infinity, and a negative base raised to
    a fractional power gives NaN (plain Python floats raise or go complex).

    Example:
        >>> rate, nper = as_float64(0.05, 10)
    """
    return tuple(np.float64(v) for v in values)


def as_cash_flows(values: Sequence[float]) -> np.ndarray:
    """Return a read-only float64 copy of a cash flow sequence."""
    cash_flows = np.array(values, dtype=np.float64).reshape(-1)
    cash_flows.flags.writeable = False
    return cash_flows


def has_mixed_signs(values: np.ndarray) -> bool:
    """
    Check that a cash flow series has at least one inflow and one outflow.

    Args:
        values: Cash flows, negative = outflow, positive = inflow.

    Returns:
        True if there is a strictly positive and a strictly negative entry.
    """
    return bool(np.any(values > 0) and np.any(values < 0))


def calculate_discount_factors(
    discount_rate: float,
    n_periods: int,
) -> np.ndarray:
    """
    Calculate discount factors for periods 0 to n_periods-1.

    Period 0 is not discounted (factor 1), period t is 1/(1+r)^t.

    Args:
        discount_rate: Discount rate per period.
        n_periods: Number of periods.

    Returns:
        Array of discount factors.

    Example:
        >>> calculate_discount_factors(0.05, 5)
        array([1.        , 0.95238095, 0.90702948, 0.8638376 , 0.82270247])
    """
    periods = np.arange(n_periods)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        return 1 / (1 + np.float64(discount_rate)) ** periods
