"""Scales a number by a factor given as text."""

from __future__ import annotations

import re
from typing import Any

# Leading decimal number, as accepted by a C-style string-to-double parse.
_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_leading_float(text: str) -> float:
    match = _LEADING_NUMBER.match(text)
    if match is None:
        raise ValueError(f"no number at start of {text!r}")
    return float(match.group(1))


def convert(value: Any, target_type: type, parameter: str, language: str | None) -> float:
    """Return ``value`` multiplied by the number that ``parameter`` starts with.

    Only conversion to ``float`` is supported.
    """
    if target_type is not float:
        raise TypeError(f"can only convert to float, not {target_type!r}")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"value must be a number, got {value!r}")
    if not isinstance(parameter, str):
        raise TypeError(f"parameter must be a string, got {parameter!r}")
    return float(value) * _parse_leading_float(parameter)