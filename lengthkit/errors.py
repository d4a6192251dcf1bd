"""Exception hierarchy for length parsing, conversion and arithmetic.

Every error raised by the package derives from LengthError so callers can
catch the whole family at once. The concrete classes also derive from the
matching builtin exception (ValueError, ZeroDivisionError, OverflowError),
which keeps them usable with code that only knows the builtin types.

Hierarchy:
    LengthError
    ├── ParseError (ValueError)
    │   ├── InvalidNumber
    │   └── UnrecognizedUnit
    ├── LengthArithmeticError (ArithmeticError)
    │   ├── DivisionByZero (ZeroDivisionError)
    │   └── Overflow (OverflowError)
    └── NonFiniteValue (ValueError)
"""

from __future__ import annotations


class LengthError(Exception):
    """Base class for all errors raised by lengthkit."""


class ParseError(LengthError, ValueError):
    """A string could not be read as a length.

    Attributes:
        text (str | None): The full input string, when known.
    """

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message)
        self.text = text


class InvalidNumber(ParseError):
    """The numeric prefix of a length string is missing or not a float."""

    def __init__(self, text: str, reason: str = "no leading number"):
        super().__init__(f"Invalid number in length {text!r}: {reason}", text)
        self.reason = reason


class UnrecognizedUnit(ParseError):
    """A unit token does not match any registered unit.

    Attributes:
        token (str): The token that failed to match. Empty when the input
            carried no unit at all.
    """

    def __init__(self, token: str, text: str | None = None):
        if text is None:
            message = f"Unrecognized unit {token!r}"
        elif token:
            message = f"Unrecognized unit {token!r} in length {text!r}"
        else:
            message = f"Missing unit in length {text!r}"
        super().__init__(message, text)
        self.token = token


class LengthArithmeticError(LengthError, ArithmeticError):
    """Base class for failed conversions and arithmetic on lengths."""


class DivisionByZero(LengthArithmeticError, ZeroDivisionError):
    """A length was divided by an exact zero factor."""

    def __init__(self):
        super().__init__("Cannot divide a length by zero")


class Overflow(LengthArithmeticError, OverflowError):
    """A conversion or arithmetic operation produced a non-finite value.

    Attributes:
        operation (str): Name of the operation that failed.
        value (float): The non-finite result.
    """

    def __init__(self, operation: str, value: float):
        super().__init__(f"{operation} produced a non-finite result ({value})")
        self.operation = operation
        self.value = value


class NonFiniteValue(LengthError, ValueError):
    """NaN or infinity was given where a finite magnitude is required."""

    def __init__(self, value: float):
        super().__init__(f"Length value must be finite, got {value}")
        self.value = value
