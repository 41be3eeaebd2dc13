import math
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Union


class NumericKind(Enum):
    INTEGER = "Integer"
    DECIMAL = "Decimal"
    ABSENT = "Absent"

    def __str__(self):
        return self.value


def _parse_decimal(text: str) -> Optional[Decimal]:
    try:
        parsed = Decimal(text)
    except InvalidOperation:
        return None
    if not parsed.is_finite():
        return None
    return parsed


class NumericInput:
    """
    Host value mapped onto Integer(i) | Decimal(d) | Absent.

    Booleans, None, blank strings, non-finite numbers and anything that does
    not parse as a number are Absent. Mapping never raises.
    """
    def __init__(self, kind: NumericKind, value: Union[int, Decimal, None] = None):
        if kind is NumericKind.ABSENT and value is not None:
            raise ValueError("Absent input cannot carry a value")
        if kind is not NumericKind.ABSENT and value is None:
            raise ValueError(f"{kind} input requires a value")
        self._kind = kind
        self._value = value

    @classmethod
    def absent(cls) -> "NumericInput":
        return cls(NumericKind.ABSENT)

    @classmethod
    def integer(cls, value: Any) -> "NumericInput":
        """Map a stored integer; decimal-like inputs are truncated toward zero."""
        if value is None or isinstance(value, bool):
            return cls.absent()
        if isinstance(value, int):
            return cls(NumericKind.INTEGER, value)

        if isinstance(value, str):
            text = value.strip()
            if not text:
                return cls.absent()
            try:
                return cls(NumericKind.INTEGER, int(text))
            except ValueError:
                parsed = _parse_decimal(text)
                if parsed is None:
                    return cls.absent()
                return cls(NumericKind.INTEGER, int(parsed))

        if isinstance(value, float):
            if not math.isfinite(value):
                return cls.absent()
            return cls(NumericKind.INTEGER, int(value))

        if isinstance(value, Decimal):
            if not value.is_finite():
                return cls.absent()
            return cls(NumericKind.INTEGER, int(value))

        try:
            return cls(NumericKind.INTEGER, int(value))
        except (TypeError, ValueError, OverflowError):
            return cls.absent()

    @classmethod
    def decimal(cls, value: Any) -> "NumericInput":
        """
        Map a decimal value.

        Floats go through their shortest repr, so 1.00005 is taken as the
        decimal 1.00005 rather than the nearest binary fraction.
        """
        if value is None or isinstance(value, bool):
            return cls.absent()
        if isinstance(value, Decimal):
            if not value.is_finite():
                return cls.absent()
            return cls(NumericKind.DECIMAL, value)
        if isinstance(value, int):
            return cls(NumericKind.DECIMAL, Decimal(value))

        if isinstance(value, str):
            text = value.strip()
            if not text:
                return cls.absent()
            parsed = _parse_decimal(text)
            if parsed is None:
                return cls.absent()
            return cls(NumericKind.DECIMAL, parsed)

        if not isinstance(value, float):
            try:
                value = float(value)
            except (TypeError, ValueError, OverflowError):
                return cls.absent()

        if not math.isfinite(value):
            return cls.absent()
        return cls(NumericKind.DECIMAL, Decimal(repr(value)))

    @property
    def kind(self) -> NumericKind:
        return self._kind

    @property
    def value(self) -> Union[int, Decimal, None]:
        return self._value

    @property
    def is_absent(self) -> bool:
        return self._kind is NumericKind.ABSENT

    def __repr__(self) -> str:
        if self.is_absent:
            return "NumericInput(Absent)"
        return f"NumericInput({self._kind}({self._value!r}))"

    def __eq__(self, other):
        if isinstance(other, NumericInput):
            return self._kind is other._kind and self._value == other._value
        return False

    def __hash__(self):
        return hash((self._kind, self._value))
