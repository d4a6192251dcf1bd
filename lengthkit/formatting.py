"""Rendering of magnitudes and lengths as text.

Numbers are printed with the shortest digit string that reads back as the
same float, with trailing zeros and a dangling decimal point removed
("500", "1.5", "-0.25"). Magnitudes between POSITIONAL_MIN and
POSITIONAL_MAX are written positionally; smaller or larger magnitudes use
scientific notation ("1e+20") so huge and tiny values stay readable.

A length is its number immediately followed by its unit symbol, without
whitespace: "5m", "1.5km", "-3ft".
"""

from __future__ import annotations

import numpy as np

from lengthkit.config import POSITIONAL_MAX, POSITIONAL_MIN
from lengthkit.unit import LengthUnit


def format_value(value: float, precision: int | None = None) -> str:
    """Render a magnitude without trailing zeros.

    Args:
        value: The number to render.
        precision: Maximum number of digits after the decimal point (of the
            mantissa in scientific notation). None prints as many digits as
            needed to identify the float uniquely.

    Returns:
        str: The rendered number.

    Raises:
        ValueError: If ``precision`` is negative.
    """
    if precision is not None and precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")

    # -0.0 renders as "0"
    value = float(value) + 0.0
    magnitude = abs(value)
    if magnitude == 0.0 or POSITIONAL_MIN <= magnitude < POSITIONAL_MAX:
        text = np.format_float_positional(value, precision=precision, unique=True, trim="-")
    else:
        text = np.format_float_scientific(value, precision=precision, unique=True, trim="-")

    if text in ("-0", "-0."):
        return "0"
    return text


def format_length(value: float, unit: LengthUnit, precision: int | None = None) -> str:
    """Render a magnitude followed by the unit's canonical symbol.

    Example:
        >>> format_length(1.5, MetricUnit.KILOMETER)
        '1.5km'
        >>> format_length(1609.344, MetricUnit.METER, precision=1)
        '1609.3m'
    """
    return f"{format_value(value, precision)}{unit.symbol}"
