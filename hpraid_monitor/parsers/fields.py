"""Parsers for single lines of controller reports

Each function takes one line with its indentation removed and either returns
the populated model or raises FieldFormatError.
"""

import re
from typing import Optional, Tuple

from ..errors import FieldFormatError, SizeFormatError
from ..models import Array, Controller, Drive
from ..sizes import parse_size
from ..status_codes import (
    BATTERY_COUNT, BATTERY_STATUS, CACHE_FREE, CACHE_STATUS, CACHE_TOTAL,
    CONTROLLER_STATUS, SCAN_MODE
)

LOGICAL_DRIVE_PREFIX = "logicaldrive"
PHYSICAL_DRIVE_PREFIX = "physicaldrive"
ARRAY_PREFIX = "array"

# Smart Array P420i in Slot 0 (Embedded)    (sn: 0014380287D4A10)
CONTROLLER_PATTERN = re.compile(r"^(.*?) in Slot (\d+)(.*?)\(sn: ([^)]+)\)$")

# array A (SAS, Unused Space: 0  MB)
ARRAY_PATTERN = re.compile(r"^array\s+([A-Z])\s+\(([^,]+),\s+Unused\s+Space:([^)]+)\)$")

# 1 (279.4 GB, RAID 1, OK)
LOGICAL_DRIVE_PATTERN = re.compile(r"^(\S+)\s+\(([^,]+),\s+([^,]+),\s+([^)]+)\)$")

# 1I:1:1 (port 1I:box 1:bay 1, SAS, 300 GB, OK)
PHYSICAL_DRIVE_PATTERN = re.compile(
    r"^(\S+)\s+\(port\s+([^:]+):box\s+([^:]+):bay\s+(\d+),\s+([^,]+),\s+([^,]+),\s+([^)]+)\)$"
)

# Lines of 'ctrl slot=N show' worth monitoring, tried in order
STATUS_PATTERNS: Tuple[Tuple[str, "re.Pattern"], ...] = (
    (CONTROLLER_STATUS, re.compile(r"\bController Status:\s*(\S.*?)\s*$")),
    (SCAN_MODE, re.compile(r"\bSurface Scan Mode:\s*(\S.*?)\s*$")),
    (CACHE_STATUS, re.compile(r"\bCache Status:\s*(\S.*?)\s*$")),
    (CACHE_TOTAL, re.compile(r"\bTotal Cache Size:\s*(\d+(?:\.\d+)?) MB")),
    (CACHE_FREE, re.compile(r"\bTotal Cache Memory Available:\s*(\d+(?:\.\d+)?) MB")),
    (BATTERY_COUNT, re.compile(r"\bBattery/Capacitor Count:\s*(\d+)\s*$")),
    (BATTERY_STATUS, re.compile(r"\bBattery/Capacitor Status:\s*(\S.*?)\s*$")),
)


def parse_uint(text: str, field: str) -> int:
    """Parse an unsigned decimal integer field"""
    value = text.strip()
    if not (value.isascii() and value.isdigit()):
        raise FieldFormatError("integer", text, f"{field} is not an unsigned integer")
    return int(value)


def _parse_size_field(text: str, grammar: str, line: str) -> int:
    try:
        return parse_size(text)
    except SizeFormatError as e:
        raise FieldFormatError(grammar, line, f"invalid size {e.text!r}") from e


def parse_controller_line(text: str) -> Controller:
    """Parse a controller header such as 'Smart Array P420i in Slot 0 (sn: ABC123)'"""
    match = CONTROLLER_PATTERN.match(text)
    if not match:
        raise FieldFormatError("controller", text)

    return Controller(
        name=match.group(1),
        slot=parse_uint(match.group(2), "slot"),
        type=match.group(3).strip(),
        serial=match.group(4)
    )


def parse_array_line(text: str) -> Array:
    """Parse an array header such as 'array A (SAS, Unused Space: 0  MB)'"""
    match = ARRAY_PATTERN.match(text)
    if not match:
        raise FieldFormatError("array", text)

    return Array(
        id=match.group(1),
        type=match.group(2),
        unused_space=_parse_size_field(match.group(3), "array", text)
    )


def parse_logical_drive(text: str) -> Drive:
    """Parse the part of a logical drive line following 'logicaldrive'"""
    match = LOGICAL_DRIVE_PATTERN.match(text.strip())
    if not match:
        raise FieldFormatError(LOGICAL_DRIVE_PREFIX, text)

    return Drive(
        id=match.group(1),
        size=_parse_size_field(match.group(2), LOGICAL_DRIVE_PREFIX, text),
        raid_mode=match.group(3),
        status=match.group(4),
        physical=False
    )


def parse_physical_drive(text: str) -> Drive:
    """Parse the part of a physical drive line following 'physicaldrive'"""
    match = PHYSICAL_DRIVE_PATTERN.match(text.strip())
    if not match:
        raise FieldFormatError(PHYSICAL_DRIVE_PREFIX, text)

    return Drive(
        id=match.group(1),
        port=match.group(2),
        box=parse_uint(match.group(3), "box"),
        bay=parse_uint(match.group(4), "bay"),
        type=match.group(5),
        size=_parse_size_field(match.group(6), PHYSICAL_DRIVE_PREFIX, text),
        status=match.group(7),
        physical=True
    )


def parse_drive_line(text: str) -> Drive:
    """Parse a 'logicaldrive ...' or 'physicaldrive ...' line"""
    if text.startswith(LOGICAL_DRIVE_PREFIX):
        return parse_logical_drive(text[len(LOGICAL_DRIVE_PREFIX):])
    elif text.startswith(PHYSICAL_DRIVE_PREFIX):
        return parse_physical_drive(text[len(PHYSICAL_DRIVE_PREFIX):])

    raise FieldFormatError("drive", text, "cannot determine drive type")


def match_status_line(line: str) -> Optional[Tuple[str, str]]:
    """Find the status category and value reported on a line

    Returns:
        (category, value) for the first matching pattern, None otherwise
    """
    for category, pattern in STATUS_PATTERNS:
        match = pattern.search(line)
        if match:
            return category, match.group(1)
    return None
