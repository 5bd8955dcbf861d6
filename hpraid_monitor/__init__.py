"""
HP Smart Array Monitor

This module parses the reports of the HP Smart Array CLI (ssacli, hpssacli,
hpacucli) into controller, array and drive models and normalizes their
health values to numeric status codes.
"""

from .collector import CollectionResult, RaidStatusCollector
from .errors import CommandError, FieldFormatError, ReportParseError, ReportStructureError, SizeFormatError
from .models import Array, Controller, Drive, DriveRow, StatusObservation
from .parsers import ConfigReport, parse_config_report, parse_status_report
from .sizes import format_size, parse_size
from .status_codes import StatusNormalizer

__version__ = "1.0.0"
__all__ = [
    "Array",
    "CollectionResult",
    "CommandError",
    "ConfigReport",
    "Controller",
    "Drive",
    "DriveRow",
    "FieldFormatError",
    "RaidStatusCollector",
    "ReportParseError",
    "ReportStructureError",
    "SizeFormatError",
    "StatusNormalizer",
    "StatusObservation",
    "format_size",
    "parse_config_report",
    "parse_size",
    "parse_status_report",
]
