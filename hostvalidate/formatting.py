"""
Human-readable formatting helpers.
"""

from typing import Any

KIB = 1024
MIB = 1024 ** 2
GIB = 1024 ** 3

_UNITS = (
    (GIB, "GB"),
    (MIB, "MB"),
    (KIB, "KB"),
)


def human_size(num_bytes: Any) -> str:
    """Format a byte count with binary units and one truncated decimal.

    Absent, non-numeric and non-positive values all render as ``"0B"``.
    The decimal digit is floored, never rounded up.

    Args:
        num_bytes: Byte count as an int or an integer string, or None.

    Returns:
        Size string such as ``"500B"``, ``"1.5KB"`` or ``"2.0GB"``.

    Example:
        >>> human_size(1536)
        '1.5KB'
        >>> human_size(1073741823)
        '1023.9MB'
        >>> human_size(None)
        '0B'
    """
    try:
        num_bytes = int(num_bytes)
    except (TypeError, ValueError, OverflowError):
        return "0B"

    if num_bytes <= 0:
        return "0B"

    for divisor, unit in _UNITS:
        if num_bytes >= divisor:
            whole, remainder = divmod(num_bytes, divisor)
            return f"{whole}.{remainder * 10 // divisor}{unit}"

    return f"{num_bytes}B"
