"""Sources of Smart Array reports"""

from .base import BaseController
from .hpssacli import HpssacliController
from .report_file import ReportFileController

__all__ = ["BaseController", "HpssacliController", "ReportFileController"]
