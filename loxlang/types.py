"""Runtime value helpers for Lox.

Lox has exactly four kinds of runtime value, carried as plain Python
objects:

    String   -> str
    Number   -> float
    Boolean  -> bool
    Nil      -> None

Python treats `bool` as a subclass of `int` and lets `True == 1`, so the
helpers here always test for booleans before numbers and compare types
explicitly before comparing payloads.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from .ast import LoxValue


def type_name(value: Any) -> str:
    """Return the Lox type name of a runtime value."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'string'
    return type(value).__name__


def is_number(value: Any) -> bool:
    return isinstance(value, float) and not isinstance(value, bool)


def is_truthy(value: LoxValue) -> bool:
    # nil and false are falsy; 0 and "" are not
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: LoxValue, b: LoxValue) -> bool:
    """Structural equality: same kind of value and equal payload.

    There is no coercion, so `1 == "1"` and `nil == false` are both false.
    NaN compares unequal to itself, as IEEE-754 requires.
    """
    if a is None or b is None:
        return a is None and b is None
    if type(a) is not type(b):
        return False
    return a == b


def divide(a: float, b: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ZeroDivisionError."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def format_number(value: float) -> str:
    """Format a number the way Lox prints it.

    Integral values lose their trailing `.0`; everything else uses the
    shortest decimal that round-trips, written out without an exponent.
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    text = repr(value)
    if 'e' in text or 'E' in text:
        text = format(Decimal(text), 'f')
    if text.endswith('.0'):
        text = text[:-2]
    return text


def stringify(value: LoxValue) -> str:
    """Convert a Lox value to its display string for printing."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"not a Lox value: {value!r}")
