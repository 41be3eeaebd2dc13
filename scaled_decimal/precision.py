import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from scaled_decimal.constants import DEFAULT_PRECISION
from scaled_decimal.model import NumericInput


class Precision:
    """
    Handles scaling logic for a specific number of decimal places.
    Used for converting decimals to their exact integer representation
    (e.g. ten-thousandths of a second, cents) and back.
    """
    def __init__(self, decimals: int = DEFAULT_PRECISION):
        if isinstance(decimals, bool) or not isinstance(decimals, int):
            raise ValueError(f"Precision must be an integer, got {decimals!r}")
        if decimals < 0:
            raise ValueError(f"Precision {decimals} must not be negative.")
        self.decimals = decimals
        self.multiplier = 10 ** decimals

    def to_int(self, value: Any) -> Optional[int]:
        """
        Converts the value to its integer representation based on precision.
        e.g. value=1.23, decimals=2 -> 123

        Halves round away from zero: 1.00005 with 4 decimals -> 10001.
        Returns None when the value is not numeric.
        """
        parsed = NumericInput.decimal(value)
        if parsed.is_absent:
            return None

        # shift the exponent directly; scaleb would round to the context precision
        sign, digits, exponent = parsed.value.as_tuple()
        scaled = Decimal((sign, digits, exponent + self.decimals))
        return int(scaled.to_integral_value(rounding=ROUND_HALF_UP))

    def from_int(self, value: Any) -> Optional[float]:
        """
        Converts an integer representation back to a float value.
        e.g. value=123, decimals=2 -> 1.23

        Integers too large for a float read back as inf or -inf.
        """
        parsed = NumericInput.integer(value)
        if parsed.is_absent:
            return None

        # int / int is correctly rounded, no float scale involved
        try:
            return parsed.value / self.multiplier
        except OverflowError:
            return math.inf if parsed.value > 0 else -math.inf

    def round(self, value: Any) -> Optional[float]:
        """Snaps a decimal onto this precision's grid, e.g. 1.23456 -> 1.2346 for 4 decimals."""
        return self.from_int(self.to_int(value))

    def __repr__(self) -> str:
        return f"Precision({self.decimals})"

    def __eq__(self, other):
        if isinstance(other, Precision):
            return self.decimals == other.decimals
        return False

    def __hash__(self):
        return hash(self.decimals)


def integer_to_decimal(value: Any, precision: int = DEFAULT_PRECISION) -> Optional[float]:
    """Scaled integer -> float, or None for non-numeric input."""
    return Precision(precision).from_int(value)


def decimal_to_integer(value: Any, precision: int = DEFAULT_PRECISION) -> Optional[int]:
    """Decimal -> scaled integer (half away from zero), or None for non-numeric input."""
    return Precision(precision).to_int(value)
