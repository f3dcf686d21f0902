"""Payment timing option shared by the annuity functions."""

from enum import Enum


class PaymentDueTime(str, Enum):
    """When payments are due within a period."""

    BEGIN = "begin"
    END = "end"


def when_multiplier(when: PaymentDueTime | str) -> int:
    """
    Convert a payment timing into the `w` term of the annuity equation.

    Args:
        when: PaymentDueTime member or its string value ("begin"/"end").

    Returns:
        1 for payments at the beginning of a period, 0 for the end.

    Raises:
        ValueError: If `when` is not a known payment timing.
    """
    try:
        when = PaymentDueTime(when)
    except ValueError:
        raise ValueError(f"Unknown payment due time: {when!r}") from None
    return 1 if when is PaymentDueTime.BEGIN else 0
