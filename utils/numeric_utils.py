"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of Design Overlay, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

Numeric coercion helpers for loosely typed catalog payloads
"""

import math
from typing import Any, Mapping


def to_float(value: Any, default: float = 0.0) -> float:
    """
    Coerce a payload value to a finite float.
    Booleans, None, NaN, infinities, integers too large for a float and
    unparsable strings give the default.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number):
        return default
    return number


def or_default(value: Any, default: float) -> float:
    """
    Falsy-or-default: 0, None, NaN and garbage all fall back to the default.
    Mirrors `value || default` semantics of the catalog front end.
    """
    number = to_float(value)
    return number if number else default


def clamp(value: float, lower: float, upper: float) -> float:
    """
    Clamp value into [lower, upper].
    """
    return max(lower, min(upper, value))


def is_positive(*values: Any) -> bool:
    """
    True when every value is a finite number strictly greater than zero.
    """
    return all(to_float(value) > 0 for value in values)


def read_field(record: Any, *names: str, default: Any = None) -> Any:
    """
    Read the first present field of a record.
    Records may be mappings (raw JSON) or objects (pydantic models).
    """
    if record is None:
        return default
    for name in names:
        if isinstance(record, Mapping):
            if name in record and record[name] is not None:
                return record[name]
        else:
            value = getattr(record, name, None)
            if value is not None:
                return value
    return default


def format_number(value: float, precision: int = 3) -> str:
    """
    Format a float for CSS output: fixed precision, trailing zeros dropped.
    """
    text = f"{to_float(value):.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text
