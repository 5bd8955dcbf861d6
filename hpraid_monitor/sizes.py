"""Conversion between human readable capacities and byte counts

Controllers print capacities with decimal units ("279 GB", "0  B",
"558.9 GB"). Sizes are parsed exactly, without going through floats.
"""

import re
from decimal import Decimal

from .errors import SizeFormatError

SIZE_BASE = 1000

SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(?:([KMGT])?B)?\s*$")

# Exponent of SIZE_BASE for every accepted unit prefix
UNIT_EXPONENTS = {"": 0, "K": 1, "M": 2, "G": 3, "T": 4}

DISPLAY_SUFFIXES = ("", "KB", "MB", "GB", "TB", "PB", "EB")


def parse_size(text: str) -> int:
    """Convert size text such as '279 GB' to a byte count

    Args:
        text: Number with an optional fraction and optional unit

    Returns:
        int: Size in bytes, fractional bytes truncated

    Raises:
        SizeFormatError: If text does not match the size grammar
    """
    match = SIZE_PATTERN.match(text)
    if not match:
        raise SizeFormatError(text)

    number, prefix = match.group(1), match.group(2) or ""
    return int(Decimal(number) * SIZE_BASE ** UNIT_EXPONENTS[prefix])


def format_size(num_bytes: int) -> str:
    """Render a byte count for display, e.g. 279000000000 -> '279GB'

    Values below 10 are printed as plain integers. Otherwise the largest unit
    keeping the value >= 1 is used, with one decimal below 10.
    """
    if num_bytes < 0:
        raise ValueError(f"size cannot be negative: {num_bytes}")
    if num_bytes < 10:
        return str(num_bytes)

    exponent = 0
    while exponent < len(DISPLAY_SUFFIXES) - 1 and num_bytes >= SIZE_BASE ** (exponent + 1):
        exponent += 1

    value = int(num_bytes / SIZE_BASE ** exponent * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f}{DISPLAY_SUFFIXES[exponent]}"
    return f"{value:.0f}{DISPLAY_SUFFIXES[exponent]}"
