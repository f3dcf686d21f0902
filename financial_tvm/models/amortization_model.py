"""Amortization model for fixed-payment loans."""

import logging
from typing import Any

import numpy as np

from financial_tvm.core.annuity import fv, ipmt, pmt, ppmt
from financial_tvm.core.payment_due_time import PaymentDueTime

logger = logging.getLogger(__name__)


class AmortizationModel:
    """
    Builds the payment schedule of an annuity loan.

    Splits every payment into interest and principal and tracks the
    outstanding balance. Amounts follow the usual sign convention: a loan
    received (positive principal) is repaid with negative payments.
    """

    REQUIRED_KEYS = ("principal", "rate", "nper")

    def calculate(self, loan_config: dict[str, Any]) -> dict[str, Any]:
        """
        Calculate the amortization schedule.

        Args:
            loan_config: Loan configuration with principal, rate (per
                period), nper, and optional fv and when.

        Returns:
            Dictionary with per-period arrays (period, payment, interest,
            principal, balance) and the totals.

        Raises:
            ValueError: If a required key is missing or nper is not a
                positive whole number.
        """
        for key in self.REQUIRED_KEYS:
            if key not in loan_config:
                raise ValueError(f"'{key}' parameter is required")

        principal = loan_config["principal"]
        rate = loan_config["rate"]
        n_periods = loan_config["nper"]
        future_value = loan_config.get("fv", 0.0)
        when = loan_config.get("when", PaymentDueTime.END)

        if int(n_periods) != n_periods or n_periods < 1:
            raise ValueError(
                f"'nper' must be a positive whole number of periods, got {n_periods}"
            )
        n_periods = int(n_periods)

        payment = pmt(rate, n_periods, principal, future_value, when)

        periods = np.arange(1, n_periods + 1)
        loan_terms = (n_periods, principal, future_value, when)
        interest = np.array([ipmt(rate, per, *loan_terms) for per in periods])
        principal_paid = np.array([ppmt(rate, per, *loan_terms) for per in periods])
        balance = np.array(
            [-fv(rate, per, payment, principal, when) for per in periods]
        )

        if np.isnan(payment):
            logger.debug("Payment is undefined for loan config %s", loan_config)

        return {
            "period": periods,
            "payment": np.full(n_periods, payment),
            "interest": interest,
            "principal": principal_paid,
            "balance": balance,
            "payment_amount": payment,
            "total_interest": float(np.sum(interest)),
            "total_principal": float(np.sum(principal_paid)),
        }
