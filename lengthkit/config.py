"""Global configuration and type definitions for lengthkit.

This module keeps the numeric settings shared by conversion, normalization
and formatting in one place. The values are plain module constants; there
is no environment or file based configuration.

Type Definitions:
    BASE_TYPE: Union type of the numeric inputs accepted by the registry's
               conversion routine. Python scalars are converted one at a
               time, NumPy arrays are converted element-wise in one call.

Settings:
    NORMALIZE_TOLERANCE: Relative shortfall below a unit boundary that
        normalize() still treats as reaching it, absorbing float noise.
    POSITIONAL_MIN, POSITIONAL_MAX: Magnitude range rendered in positional
        notation. Values outside it are rendered in scientific notation.
    DEFAULT_CLI_PRECISION: Fractional digits printed by the command line.

Example:
    >>> from lengthkit.config import BASE_TYPE
    >>> import numpy as np
    >>> scalar: BASE_TYPE = 3.5
    >>> batch: BASE_TYPE = np.array([1.0, 2.0, 3.0])
"""

from numpy import ndarray

BASE_TYPE = int | float | ndarray

NORMALIZE_TOLERANCE = 1e-9

POSITIONAL_MIN = 1e-6
POSITIONAL_MAX = 1e15

DEFAULT_CLI_PRECISION = 6
