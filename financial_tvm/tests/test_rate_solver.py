"""Tests for the Newton-Raphson rate and IRR solvers."""

import logging
import math

import pytest
from scipy import optimize

from financial_tvm import PaymentDueTime, fv, irr, npv, rate


class TestRate:
    """Tests for rate()."""

    def test_payment_at_end(self) -> None:
        """Test rate turning 3500 into 10000 over 10 periods."""
        assert rate(10, 0, -3500, 10000) == pytest.approx(0.1106908, abs=1e-6)

    def test_payment_at_begin(self) -> None:
        """Test timing is irrelevant without periodic payments."""
        result = rate(10, 0, -3500, 10000, PaymentDueTime.BEGIN)
        assert result == pytest.approx(0.1106908, abs=1e-6)

    def test_custom_solver_settings(self) -> None:
        """Test custom guess, tolerance and iteration limit."""
        result = rate(10, 0, -3500, 10000, PaymentDueTime.BEGIN, 0.2, 1e-5, 200)
        assert result == pytest.approx(0.1106908, abs=1e-6)

    @pytest.mark.parametrize("when", [PaymentDueTime.END, PaymentDueTime.BEGIN])
    def test_infeasible_is_nan(self, when: PaymentDueTime) -> None:
        """Test no rate makes receiving payments and a future value break even."""
        assert math.isnan(rate(12, 400, 10000, 5000, when))

    def test_too_few_iterations_is_nan(self) -> None:
        """Test exhausting max_iter gives NaN."""
        assert math.isnan(rate(10, 0, -3500, 10000, max_iter=1))

    def test_step_equal_to_tol_is_not_converged(self) -> None:
        """Test convergence requires the step to be strictly below tol."""
        # Linear case: one Newton step from the guess lands on the root.
        first = rate(1, 0, -1, 1.1, guess=0.5, tol=1.0, max_iter=1)
        step = abs(first - 0.5)
        assert step > 0
        assert math.isnan(rate(1, 0, -1, 1.1, guess=0.5, tol=step, max_iter=1))
        assert rate(1, 0, -1, 1.1, guess=0.5, tol=step, max_iter=2) == pytest.approx(
            0.1
        )

    def test_recovers_rate_used_by_fv(self) -> None:
        """Test rate inverts fv for an annuity with payments."""
        future = fv(0.06 / 12, 60, -250, -1000)
        assert rate(60, -250, -1000, future) == pytest.approx(0.005, abs=1e-9)

    def test_matches_bracketing_root(self) -> None:
        """Test the Newton result agrees with a bracketing root finder."""
        n_periods, payment, present, future = 48, -300, 10000, 0

        def residual(r: float) -> float:
            temp = (1 + r) ** n_periods
            return future + present * temp + payment / r * (temp - 1)

        expected = optimize.brentq(residual, 1e-4, 0.5)
        assert rate(n_periods, payment, present, future) == pytest.approx(
            expected, abs=1e-8
        )

    def test_logs_non_convergence(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test exhausting the iterations is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="financial_tvm.core.rate_solver"):
            rate(12, 400, 10000, 5000)
        assert "did not converge" in caplog.text


class TestIRR:
    """Tests for irr()."""

    def test_basic_values(self) -> None:
        """Test IRR of several standard cash flow series."""
        assert irr([-150000, 15000, 25000, 35000, 45000, 60000]) == pytest.approx(
            0.052432889, abs=1e-9
        )
        assert irr([-100, 0, 0, 74]) == pytest.approx(-0.095496, abs=1e-6)
        assert irr([-100, 39, 59, 55, 20]) == pytest.approx(0.2809484, abs=1e-6)
        assert irr([-100, 100, 0, -7]) == pytest.approx(-0.0833, abs=1e-6)
        assert irr([-100, 100, 0, 7]) == pytest.approx(0.062058, abs=1e-6)
        assert irr([-5, 10.5, 1, -8, 1]) == pytest.approx(0.088598, abs=1e-6)

    def test_trailing_zeros(self) -> None:
        """Test trailing zero cash flows do not change the IRR."""
        assert irr([-5, 10.5, 1, -8, 1, 0, 0, 0]) == pytest.approx(
            irr([-5, 10.5, 1, -8, 1]), abs=1e-9
        )

    @pytest.mark.parametrize(
        "values",
        [[-1, -2, -3], [1, 2, 3], [0, 5, 0], [-4, 0, 0], [0, 0], []],
    )
    def test_single_signed_is_nan(self, values: list[float]) -> None:
        """Test series without both an inflow and an outflow have no IRR."""
        assert math.isnan(irr(values))

    def test_custom_solver_settings(self) -> None:
        """Test custom guess, tolerance and iteration limit."""
        result = irr([-5, 10.5, 1, -8, 1], 0.1, 1e-10, 10)
        assert result == pytest.approx(0.08859833852439172, abs=1e-9)

    def test_too_few_iterations_is_nan(self) -> None:
        """Test exhausting max_iter gives NaN."""
        assert math.isnan(irr([-5, 10.5, 1, -8, 1], 0.1, 1e-10, 2))

    def test_small_step_with_large_residual_is_nan(self) -> None:
        """Test a tiny update alone does not count as convergence."""
        # The guess is the exact root, but rounding leaves a residual above tol.
        assert math.isnan(irr([-1e12, 1.1e12]))

    def test_large_cash_flows_with_loose_tol(self) -> None:
        """Test large cash flows converge once tol covers the rounding noise."""
        assert irr([-1e12, 1.1e12], tol=1e-2) == pytest.approx(0.1, abs=1e-9)

    def test_npv_is_zero_at_irr(self) -> None:
        """Test the NPV vanishes at the IRR."""
        values = [-150000, 15000, 25000, 35000, 45000, 60000]
        assert npv(irr(values), values) == pytest.approx(0, abs=1e-6)

    def test_matches_bracketing_root(self) -> None:
        """Test the Newton result agrees with a bracketing root finder."""
        values = [-100, 39, 59, 55, 20]
        expected = optimize.brentq(lambda r: npv(r, values), 0.0, 1.0)
        assert irr(values) == pytest.approx(expected, abs=1e-9)

    def test_input_not_mutated(self) -> None:
        """Test the cash flow list is left untouched."""
        values = [-100, 39, 59, 55, 20]
        irr(values)
        assert values == [-100, 39, 59, 55, 20]
