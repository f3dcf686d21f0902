"""Net present value and modified IRR of a periodic cash flow series."""

from typing import Sequence

import numpy as np

from financial_tvm.utils.financial_utils import as_cash_flows, has_mixed_signs


@np.errstate(divide="ignore", over="ignore", invalid="ignore")
def npv(rate: float, values: Sequence[float]) -> float:
    """
    Calculate the Net Present Value of a cash flow series.

    values[0] is at t=0 and is not discounted; values[t] is discounted by
    (1+rate)**t. For end-of-period flows only, zero values[0] and add the
    initial investment to the result.

    Args:
        rate: Discount rate per period.
        values: Cash flows, one per period. Negative = outflow.

    Returns:
        NPV as float. 0.0 for an empty series.

    Example:
        >>> npv(0.08, [-40_000, 5000, 8000, 12000, 30000])
        3065.2226681795255
    """
    values = as_cash_flows(values)
    periods = np.arange(len(values))
    return float(np.sum(values / (1 + np.float64(rate)) ** periods))


@np.errstate(divide="ignore", over="ignore", invalid="ignore")
def mirr(
    values: Sequence[float],
    finance_rate: float,
    reinvest_rate: float,
) -> float:
    """
    Calculate the Modified Internal Rate of Return.

    Outflows are discounted at `finance_rate`, inflows at `reinvest_rate`:

        (|npv(reinvest, inflows)| / |npv(finance, outflows)|) ** (1/(N-1))
            * (1 + reinvest_rate) - 1

    Args:
        values: Cash flows; values[0] is a sunk cost at time zero.
        finance_rate: Interest rate paid on the outflows.
        reinvest_rate: Interest rate earned on reinvested inflows.

    Returns:
        MIRR as decimal, or NaN unless `values` contains both an inflow
        and an outflow.
    """
    values = as_cash_flows(values)
    if not has_mixed_signs(values):
        return float("nan")

    numer = np.abs(np.float64(npv(reinvest_rate, np.where(values > 0, values, 0.0))))
    denom = np.abs(np.float64(npv(finance_rate, np.where(values < 0, values, 0.0))))
    n = len(values)
    return float((numer / denom) ** (1 / (n - 1)) * (1 + np.float64(reinvest_rate)) - 1)
