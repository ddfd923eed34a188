# converter/conversions.py
from __future__ import annotations

from typing import Any, Dict

_DURATION_UNITS = (
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


def _plural(value: int, unit: str) -> str:
    return f"{value} {unit}" if value == 1 else f"{value} {unit}s"


def format_duration(seconds: int) -> str:
    """
    Read n as a number of seconds:
    3661  -> '1 hour, 1 minute, 1 second'
    90000 -> '1 day, 1 hour'
    0     -> '0 seconds'
    Zero-valued parts are left out.
    """
    if seconds < 0:
        return "negative " + format_duration(-seconds)

    parts = []
    rest = seconds
    for unit, size in _DURATION_UNITS:
        value, rest = divmod(rest, size)
        if value > 0:
            parts.append(_plural(value, unit))

    return ", ".join(parts) or "0 seconds"


def conversions(n: int) -> Dict[str, Any]:
    # negatives keep a leading '-' before the magnitude digits
    return {
        "binary": format(n, "b"),
        "hex": format(n, "X"),
        "octal": format(n, "o"),
        "square": n * n,
        "cube": n * n * n,
        "time": format_duration(n),
    }
