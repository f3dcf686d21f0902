"""Financial sub-models built on the core functions."""

from financial_tvm.models.amortization_model import AmortizationModel

__all__ = ["AmortizationModel"]
