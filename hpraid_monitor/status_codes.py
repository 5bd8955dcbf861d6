"""Normalization of raw status text to numeric codes

Every categorical table maps status text to a code and carries an
"undefined" entry used for text the table does not know. The built-in tables
only cover the healthy states plus a few well known battery states; extend
them through the `status_codes` section of the configuration file.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

UNDEFINED = "undefined"
UNDEFINED_CODE = 99

DRIVE_STATUS = "drive-status"
CONTROLLER_STATUS = "controller-status"
SCAN_MODE = "scan-mode"
CACHE_STATUS = "cache-status"
CACHE_TOTAL = "cache-total"
CACHE_FREE = "cache-free"
BATTERY_COUNT = "battery-count"
BATTERY_STATUS = "battery-status"

# Categories whose value is reported as a number rather than looked up
NUMERIC_CATEGORIES = frozenset({CACHE_TOTAL, CACHE_FREE, BATTERY_COUNT})

DEFAULT_STATUS_CODES: Mapping[str, Mapping[str, float]] = MappingProxyType({
    DRIVE_STATUS: MappingProxyType({
        "OK": 0,
        UNDEFINED: UNDEFINED_CODE,
    }),
    CONTROLLER_STATUS: MappingProxyType({
        "OK": 0,
        UNDEFINED: UNDEFINED_CODE,
    }),
    SCAN_MODE: MappingProxyType({
        "Idle": 0,
        UNDEFINED: UNDEFINED_CODE,
    }),
    CACHE_STATUS: MappingProxyType({
        "OK": 0,
        UNDEFINED: UNDEFINED_CODE,
    }),
    BATTERY_STATUS: MappingProxyType({
        "OK": 0,
        "Recharging": 1,
        "Failed (Replace Batteries)": 10,
        UNDEFINED: UNDEFINED_CODE,
    }),
})

CATEGORIES = frozenset(DEFAULT_STATUS_CODES) | NUMERIC_CATEGORIES


def _to_number(value: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


class StatusNormalizer:
    """Maps raw status values to numeric codes

    Tables are read-only after construction, so one normalizer can be shared
    between threads.
    """

    def __init__(self, overrides: Optional[Mapping[str, Mapping[str, float]]] = None):
        """Initialize the normalizer

        Args:
            overrides: Extra status text to code entries per category, merged
                over the built-in tables

        Raises:
            ValueError: If overrides name an unknown or numeric category, or
                map a status to something that is not a number
        """
        tables: Dict[str, Mapping[str, float]] = {}

        for category, defaults in DEFAULT_STATUS_CODES.items():
            tables[category] = defaults

        for category, entries in (overrides or {}).items():
            if category not in DEFAULT_STATUS_CODES:
                raise ValueError(f"Cannot define status codes for category {category!r}")

            merged = dict(tables[category])
            for status, code in entries.items():
                if isinstance(code, bool) or not isinstance(code, (int, float)):
                    raise ValueError(f"Status code for {category} {status!r} must be a number, got {code!r}")
                merged[str(status)] = code
            tables[category] = MappingProxyType(merged)

        self._tables: Mapping[str, Mapping[str, float]] = MappingProxyType(tables)

    def table(self, category: str) -> Mapping[str, float]:
        """Get the read-only lookup table for a categorical status"""
        if category not in self._tables:
            raise ValueError(f"Unknown status category {category!r}")
        return self._tables[category]

    def normalize(self, category: str, raw_value: str) -> float:
        """Convert a raw status value to its numeric code

        Drive statuses are looked up without their qualifier, so
        "OK, spun down" maps like "OK". Values missing from a table map to its
        "undefined" code. Numeric categories are parsed as numbers, with 0 for
        text that is not a number.

        Raises:
            ValueError: If category is unknown
        """
        if category in NUMERIC_CATEGORIES:
            return _to_number(raw_value)

        table = self.table(category)
        key = raw_value
        if category == DRIVE_STATUS:
            key = raw_value.split(",", 1)[0].strip()

        return float(table.get(key, table[UNDEFINED]))

    def to_dict(self) -> dict:
        return {category: dict(table) for category, table in self._tables.items()}
