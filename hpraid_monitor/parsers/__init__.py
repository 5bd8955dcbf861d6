"""Parsers for Smart Array CLI reports"""

from .config_report import ConfigReport, ConfigReportParser, parse_config_report
from .status_report import StatusReportParser, parse_status_report

__all__ = [
    "ConfigReport",
    "ConfigReportParser",
    "StatusReportParser",
    "parse_config_report",
    "parse_status_report",
]
