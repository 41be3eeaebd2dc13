"""Assertion helpers for test suites of classes that use decimal accessors."""

import random
from typing import Any, Optional

from scaled_decimal.config import AccessorOptions
from scaled_decimal.constants import DEFAULT_PRECISION
from scaled_decimal.precision import decimal_to_integer, integer_to_decimal

_MISSING = object()


def random_decimal(max_value: float = 1000.0) -> float:
    return random.uniform(-max_value, max_value)


def assert_decimal_as_integer(
    subject: Any,
    attribute: str,
    source: Optional[str] = None,
    precision: Optional[int] = None,
    value: Any = _MISSING,
):
    """
    Assert that ``attribute`` on ``subject`` is a decimal view of its backing field.

    Writes ``value`` (a random float when omitted; None is written as given)
    through the accessor, then checks the backing field holds
    decimal_to_integer(value) and the accessor reads back integer_to_decimal
    of that integer.
    """
    options = AccessorOptions(
        source=source,
        precision=DEFAULT_PRECISION if precision is None else precision,
    )
    source = options.resolve_source(attribute)
    precision = options.precision

    if value is _MISSING:
        value = random_decimal()
    setattr(subject, attribute, value)

    expected_integer = decimal_to_integer(value, precision)
    stored = getattr(subject, source)
    assert stored == expected_integer, (
        f"Expected {source} to be {expected_integer!r} after setting "
        f"{attribute}={value!r}, got {stored!r}"
    )

    expected_decimal = integer_to_decimal(expected_integer, precision)
    read_back = getattr(subject, attribute)
    assert read_back == expected_decimal, (
        f"Expected {attribute} to read back {expected_decimal!r} "
        f"(precision={precision}), got {read_back!r}"
    )
