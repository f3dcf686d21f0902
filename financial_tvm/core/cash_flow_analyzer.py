"""Cash flow analyzer for NPV, IRR, MIRR, Payback Period and Profitability Index."""

import logging
import math
from typing import Any, Sequence

import numpy as np

from financial_tvm.core.cash_flows import mirr, npv
from financial_tvm.core.rate_solver import irr
from financial_tvm.templates.solver_defaults import SOLVER_PRESETS
from financial_tvm.utils.financial_utils import (
    as_cash_flows,
    calculate_discount_factors,
)

logger = logging.getLogger(__name__)


class CashFlowAnalyzer:
    """
    Calculates investment KPIs for a periodic cash flow series.

    Args:
        solver: Name of the solver preset used for the IRR
            ('standard', 'precise', 'fast').
    """

    def __init__(self, solver: str = "standard") -> None:
        """Initialize the analyzer with a solver preset."""
        if solver not in SOLVER_PRESETS:
            raise ValueError(
                f"Unknown solver '{solver}'. "
                f"Available presets: {list(SOLVER_PRESETS.keys())}"
            )
        self.solver = solver
        self.solver_settings = SOLVER_PRESETS[solver]

    def calculate(
        self,
        values: Sequence[float],
        config: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Calculate all KPIs.

        Args:
            values: Cash flows per period, values[0] at t=0.
            config: Rates with discount_rate (required), and optional
                finance_rate and reinvest_rate (default: discount_rate).

        Returns:
            Dictionary with npv, irr, mirr, payback_simple,
            payback_discounted and profitability_index.

        Raises:
            ValueError: If discount_rate is missing.
        """
        if "discount_rate" not in config:
            raise ValueError("'discount_rate' parameter is required")

        discount_rate = config["discount_rate"]
        finance_rate = config.get("finance_rate", discount_rate)
        reinvest_rate = config.get("reinvest_rate", discount_rate)

        cash_flows = as_cash_flows(values)

        kpis = {
            "npv": npv(discount_rate, cash_flows),
            "irr": irr(cash_flows, **self.solver_settings),
            "mirr": mirr(cash_flows, finance_rate, reinvest_rate),
            "payback_simple": self._calculate_payback(cash_flows),
            "payback_discounted": self._calculate_payback(
                cash_flows * calculate_discount_factors(discount_rate, len(cash_flows))
            ),
            "profitability_index": self._calculate_profitability_index(
                cash_flows, discount_rate
            ),
        }

        undefined = [name for name, value in kpis.items() if math.isnan(value)]
        if undefined:
            logger.debug(
                "Undefined KPIs for %s cash flows: %s", len(cash_flows), undefined
            )

        return kpis

    @staticmethod
    def _calculate_payback(cash_flows: np.ndarray) -> float:
        """
        Calculate the payback period of a (possibly discounted) series.

        Args:
            cash_flows: Cash flows per period.

        Returns:
            Payback period in periods, interpolated within the period in
            which the cumulative cash flow turns positive. inf if never
            recovered.
        """
        cumulative = np.cumsum(cash_flows)
        positive_periods = np.where(cumulative > 0)[0]

        if len(positive_periods) == 0:
            return float("inf")

        payback_period = positive_periods[0]
        if payback_period == 0:
            return 0.0

        # Fraction of the recovering period needed to cover the shortfall
        shortfall = -cumulative[payback_period - 1]
        return float(payback_period - 1 + shortfall / cash_flows[payback_period])

    @staticmethod
    def _calculate_profitability_index(
        cash_flows: np.ndarray, discount_rate: float
    ) -> float:
        """
        Calculate the Profitability Index.

        PI = PV(inflows) / |PV(outflows)|

        Returns:
            Profitability index. inf if there are no outflows.
        """
        inflows = npv(discount_rate, np.where(cash_flows > 0, cash_flows, 0.0))
        outflows = abs(npv(discount_rate, np.where(cash_flows < 0, cash_flows, 0.0)))

        if outflows == 0:
            return float("inf")

        return inflows / outflows
