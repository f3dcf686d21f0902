"""
Closed-form solutions of the annuity equation.

Each function isolates one unknown of

    fv + pv*(1+rate)**nper + pmt*(1+rate*w)/rate*((1+rate)**nper - 1) == 0

or, when rate == 0,

    fv + pv + pmt*nper == 0

where w is 1 for payments due at the beginning of a period and 0 for
payments due at the end. By convention negative amounts are cash paid out.
"""

import numpy as np

from financial_tvm.core.payment_due_time import PaymentDueTime, when_multiplier
from financial_tvm.utils.financial_utils import as_float64


@np.errstate(divide="ignore", over="ignore", invalid="ignore")
def fv(
    rate: float,
    nper: float,
    pmt: float,
    pv: float,
    when: PaymentDueTime | str = PaymentDueTime.END,
) -> float:
    """
    Compute the future value.

    Args:
        rate: Rate of interest per period as a decimal (e.g., 0.05 for 5%).
        nper: Number of compounding periods.
        pmt: Fixed payment per period.
        pv: Present value.
        when: When payments are due.

    Returns:
        Value at the end of the `nper` periods.

    Example:
        Saving 100 now plus 100 a month for 10 years at 5% p.a.
        compounded monthly:

        >>> fv(0.05 / 12, 10 * 12, -100, -100)
        15692.928894335748
    """
    w = when_multiplier(when)
    rate, nper, pmt, pv = as_float64(rate, nper, pmt, pv)

    if rate == 0:
        return float(-(pv + pmt * nper))

    temp = (1 + rate) ** nper
    return float(-pv * temp - pmt * (1 + rate * w) / rate * (temp - 1))


@np.errstate(divide="ignore", over="ignore", invalid="ignore")
def pmt(
    rate: float,
    nper: float,
    pv: float,
    fv: float = 0,
    when: PaymentDueTime | str = PaymentDueTime.END,
) -> float:
    """
    Compute the fixed periodic payment against principal plus interest.

    Args:
        rate: Rate of interest per period.
        nper: Number of compounding periods (e.g., number of payments).
        pv: Present value (e.g., the amount borrowed).
        fv: Future value (e.g., 0 for a fully repaid loan).
        when: When payments are due.

    Returns:
        The periodic payment.

    Example:
        Monthly payment on a 200,000 loan over 15 years at 7.5% p.a.:

        >>> pmt(0.075 / 12, 12 * 15, 200000)
        -1854.0247200054619
    """
    w = when_multiplier(when)
    rate, nper, pv, fv = as_float64(rate, nper, pv, fv)

    temp = (1 + rate) ** nper
    if rate == 0:
        fact = nper
    else:
        fact = (1 + rate * w) * (temp - 1) / rate

    return float(-(fv + pv * temp) / fact)


@np.errstate(divide="ignore", over="ignore", invalid="ignore")
def nper(
    rate: float,
    pmt: float,
    pv: float,
    fv: float = 0,
    when: PaymentDueTime | str = PaymentDueTime.END,
) -> float:
    """
    Compute the number of periodic payments.

    A zero payment at zero rate gives a signed infinity: the balance is
    never paid off.

    Args:
        rate: Rate of interest per period.
        pmt: Payment per period.
        pv: Present value.
        fv: Future value.
        when: When payments are due.

    Returns:
        Number of periods.

    Example:
        Paying 150 a month against an 8,000 loan at 7% p.a.:

        >>> nper(0.07 / 12, -150, 8000)
        64.07334877066185
    """
    w = when_multiplier(when)
    rate, pmt, pv, fv = as_float64(rate, pmt, pv, fv)

    if rate == 0:
        return float(-(fv + pv) / pmt)

    z = pmt * (1 + rate * w) / rate
    return float(np.log((-fv + z) / (pv + z)) / np.log(1 + rate))


@np.errstate(divide="ignore", over="ignore", invalid="ignore")
def pv(
    rate: float,
    nper: float,
    pmt: float,
    fv: float = 0,
    when: PaymentDueTime | str = PaymentDueTime.END,
) -> float:
    """
    Compute the present value.

    Args:
        rate: Rate of interest per period.
        nper: Number of compounding periods.
        pmt: Payment per period.
        fv: Future value.
        when: When payments are due.

    Returns:
        Present value of the payments and future value.

    Example:
        Initial deposit needed to reach 15,692.93 after saving 100 a month
        for 10 years at 5% p.a.:

        >>> pv(0.05 / 12, 10 * 12, -100, 15692.93)
        -100.00067131625819
    """
    w = when_multiplier(when)
    rate, nper, pmt, fv = as_float64(rate, nper, pmt, fv)

    temp = (1 + rate) ** nper
    if rate == 0:
        fact = nper
    else:
        fact = (1 + rate * w) * (temp - 1) / rate

    return float(-(fv + pmt * fact) / temp)


@np.errstate(divide="ignore", over="ignore", invalid="ignore")
def ipmt(
    rate: float,
    per: float,
    nper: float,
    pv: float,
    fv: float = 0,
    when: PaymentDueTime | str = PaymentDueTime.END,
) -> float:
    """
    Compute the interest portion of the payment in period `per`.

    Periods are 1-indexed; `per` below 1 gives NaN.

    Args:
        rate: Rate of interest per period.
        per: Payment period, starting at 1.
        nper: Number of compounding periods.
        pv: Present value.
        fv: Future value.
        when: When payments are due.

    Returns:
        Interest portion of the payment.

    Example:
        >>> ipmt(0.1 / 12, 1, 24, 2000)
        -16.666666666666668
    """
    w = when_multiplier(when)
    if per < 1:
        return float("nan")

    # Nothing has accrued yet when the first payment is made up front.
    if w == 1 and per == 1:
        return 0.0

    rate = np.float64(rate)
    total_pmt = pmt(rate, nper, pv, fv, when)
    ipmt_val = _rbl(rate, per, total_pmt, pv, when) * rate

    # Payments at the beginning are discounted by one period.
    if w == 1 and per > 1:
        ipmt_val = ipmt_val / (1 + rate)

    return float(ipmt_val)


def ppmt(
    rate: float,
    per: float,
    nper: float,
    pv: float,
    fv: float = 0,
    when: PaymentDueTime | str = PaymentDueTime.END,
) -> float:
    """
    Compute the principal portion of the payment in period `per`.

    Args:
        rate: Rate of interest per period.
        per: Payment period, starting at 1.
        nper: Number of compounding periods.
        pv: Present value.
        fv: Future value.
        when: When payments are due.

    Returns:
        Principal portion of the payment (NaN when `per` < 1).
    """
    total = pmt(rate, nper, pv, fv, when)
    return total - ipmt(rate, per, nper, pv, fv, when)


def _rbl(
    rate: float,
    per: float,
    pmt: float,
    pv: float,
    when: PaymentDueTime | str,
) -> float:
    """Remaining balance on the loan before period `per`."""
    return fv(rate, per - 1, pmt, pv, when)
