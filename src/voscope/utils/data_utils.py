"""Numeric parsing helpers shared by the loader and the aggregator."""

import re
from typing import Any, Optional

_THOUSANDS_GROUPED = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d+)?$")


def parse_optional_number(val: Any) -> Optional[float]:
    """
    Parse a raw payload value into an optional float.

    Args:
        val: Value to parse (number, numeric string, None, ...)

    Returns:
        Float value, or None when the value is absent or not numeric
    """
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, str):
        val = val.strip()
        if not val:
            return None
        if "," in val:
            # Only "1,250.5"-style grouping; "1,5" is ambiguous and rejected.
            if not _THOUSANDS_GROUPED.match(val):
                return None
            val = val.replace(",", "")
    try:
        number = float(val)
    except (ValueError, TypeError):
        return None
    if number != number:  # NaN
        return None
    return number


def parse_numeric_safe(val: Any, default: float = 0.0) -> float:
    """
    Safely parse a value to float with fallback.

    Args:
        val: Value to parse
        default: Default value if parsing fails

    Returns:
        Parsed float or default value
    """
    number = parse_optional_number(val)
    return default if number is None else number


def parse_optional_int(val: Any) -> Optional[int]:
    """Parse an identifier-like value to int, or None when not integral."""
    number = parse_optional_number(val)
    if number is None or not number.is_integer():
        return None
    return int(number)


def clean_text(val: Any) -> Optional[str]:
    """Return a stripped string, or None for missing/blank values."""
    if val is None:
        return None
    text = str(val).strip()
    return text or None
