"""Newton-Raphson solvers for the periodic interest rate and the IRR."""

import logging
from typing import Sequence

import numpy as np

from financial_tvm.core.payment_due_time import PaymentDueTime, when_multiplier
from financial_tvm.templates.solver_defaults import (
    DEFAULT_GUESS,
    DEFAULT_MAX_ITER,
    DEFAULT_TOL,
)
from financial_tvm.utils.financial_utils import (
    as_cash_flows,
    as_float64,
    has_mixed_signs,
)

logger = logging.getLogger(__name__)

DAYS_PER_PERIOD = 365


@np.errstate(divide="ignore", over="ignore", invalid="ignore")
def rate(
    nper: float,
    pmt: float,
    pv: float,
    fv: float,
    when: PaymentDueTime | str = PaymentDueTime.END,
    guess: float = DEFAULT_GUESS,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
) -> float:
    """
    Compute the rate of interest per period.

    Solves the annuity equation

        fv + pv*(1+rate)**nper + pmt*(1+rate*w)/rate*((1+rate)**nper - 1) == 0

    for `rate` with Newton's rule r[n+1] = r[n] - g(r[n])/g'(r[n]), stopping
    once the update is smaller than `tol`.

    Args:
        nper: Number of compounding periods.
        pmt: Payment per period.
        pv: Present value.
        fv: Future value.
        when: When payments are due.
        guess: Starting estimate.
        tol: Required tolerance on the change between iterations.
        max_iter: Maximum number of iterations.

    Returns:
        Rate of interest per period, or NaN if it did not converge within
        `max_iter` iterations.

    Example:
        >>> round(rate(10, 0, -3500, 10000), 7)
        0.1106908
    """
    w = when_multiplier(when)
    nper, pmt, pv, fv = as_float64(nper, pmt, pv, fv)

    rn = np.float64(guess)
    iteration = 0
    close = False

    while iteration < max_iter and not close:
        rnp1 = rn - _g_div_gp(rn, nper, pmt, pv, fv, w)
        close = bool(abs(rnp1 - rn) < tol)
        iteration += 1
        logger.debug("rate iter %s: r=%s next=%s", iteration, rn, rnp1)
        rn = rnp1

    if not close:
        logger.debug("rate did not converge after %s iterations", iteration)
        return float("nan")

    return float(rn)


@np.errstate(divide="ignore", over="ignore", invalid="ignore")
def irr(
    values: Sequence[float],
    guess: float = DEFAULT_GUESS,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
) -> float:
    """
    Compute the Internal Rate of Return.

    The IRR is the rate `r` solving

        sum(values[t] / (1+r)**t for t in range(len(values))) == 0

    Cash flows are placed on a 365-day grid, one period apart, and the
    equation is solved with Newton's rule. Iteration stops once both the
    update and the residual are within `tol`.

    Args:
        values: Cash flows per period. Negative = investment (outflow),
            positive = return (inflow). values[0] is at time 0.
        guess: Starting estimate.
        tol: Required tolerance on both the update and the residual.
        max_iter: Maximum number of iterations.

    Returns:
        IRR as decimal (e.g., 0.08 for 8%). NaN if `values` does not contain
        both an inflow and an outflow, or if there is no convergence.
        Very large cash flows (around 1e11 and up) leave rounding noise in
        the residual above the default `tol` and give NaN; pass a looser
        `tol` for them.

    Example:
        >>> round(irr([-100, 39, 59, 55, 20]), 5)
        0.28095
    """
    values = as_cash_flows(values)
    if not has_mixed_signs(values):
        return float("nan")

    dates = DAYS_PER_PERIOD * np.arange(len(values), dtype=np.float64)

    result_rate = np.float64(guess)
    iteration = 0
    converged = False

    while not converged and iteration < max(max_iter, 1):
        result_value = _irr_result(values, dates, result_rate)
        new_rate = result_rate - result_value / _irr_result_deriv(
            values, dates, result_rate
        )
        eps_rate = abs(new_rate - result_rate)
        iteration += 1
        logger.debug(
            "irr iter %s: r=%s npv=%s next=%s",
            iteration,
            result_rate,
            result_value,
            new_rate,
        )
        result_rate = new_rate
        converged = bool(eps_rate <= tol and abs(result_value) <= tol)

    if not converged:
        logger.debug("irr did not converge after %s iterations", iteration)
        return float("nan")

    return float(result_rate)


def _g_div_gp(
    r: np.float64,
    n: np.float64,
    p: np.float64,
    x: np.float64,
    y: np.float64,
    w: int,
) -> np.float64:
    """
    Evaluate g(r)/g'(r) for the annuity equation

        g = y + x*(1+r)**n + p*(1+r*w)/r*((1+r)**n - 1)

    with n = nper, p = pmt, x = pv, y = fv.
    """
    t1 = (r + 1) ** n
    t2 = (r + 1) ** (n - 1)
    g = y + t1 * x + p * (t1 - 1) * (r * w + 1) / r
    gp = (
        n * t2 * x
        - p * (t1 - 1) * (r * w + 1) / (r**2)
        + n * p * t2 * (r * w + 1) / r
        + p * (t1 - 1) * w / r
    )
    return g / gp


def _irr_result(
    values: np.ndarray, dates: np.ndarray, rate: np.float64
) -> np.float64:
    """Discounted sum of the cash flows at `rate`."""
    r = rate + 1
    frac = (dates[1:] - dates[0]) / DAYS_PER_PERIOD
    return values[0] + np.sum(values[1:] / r**frac)


def _irr_result_deriv(
    values: np.ndarray, dates: np.ndarray, rate: np.float64
) -> np.float64:
    """First derivative of _irr_result with respect to `rate`."""
    r = rate + 1
    frac = (dates[1:] - dates[0]) / DAYS_PER_PERIOD
    return -np.sum(frac * values[1:] / r ** (frac + 1))
