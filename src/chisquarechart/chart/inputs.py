"""Validation of the values typed into the chart controls."""
from __future__ import annotations

from dataclasses import dataclass
from math import isfinite


class InvalidChartInput(ValueError):
    """Raised when the degrees of freedom or the significance level cannot be charted."""


@dataclass(frozen=True)
class ChartInputs:
    k: int
    alpha_percent: float


def parse_inputs(dof_text: str, alpha_text: str) -> ChartInputs:
    """
    Parse the degrees of freedom and the significance level (in percent).

    Args:
        dof_text: Positive integer.
        alpha_text: Real number strictly between 0 and 100.

    Raises:
        InvalidChartInput: If either value is malformed or out of range.

    Returns:
        The parsed inputs.
    """
    try:
        k = int(dof_text.strip())
    except ValueError:
        raise InvalidChartInput(f"Degrees of freedom must be an integer, got '{dof_text}'.") from None
    if k <= 0:
        raise InvalidChartInput(f"Degrees of freedom must be positive, got {k}.")

    try:
        alpha_percent = float(alpha_text.strip().replace(",", "."))
    except ValueError:
        raise InvalidChartInput(f"Significance level must be a number, got '{alpha_text}'.") from None
    if not isfinite(alpha_percent) or not 0 < alpha_percent < 100:
        raise InvalidChartInput(f"Significance level must lie between 0 and 100 %, got {alpha_percent}.")

    return ChartInputs(k=k, alpha_percent=alpha_percent)
