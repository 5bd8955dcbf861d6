"""Controller reading previously saved reports from disk"""

import os
from typing import Optional

from ..errors import CommandError
from .base import BaseController


class ReportFileController(BaseController):
    """Serves reports captured earlier with 'ctrl all show config' and 'ctrl slot=N show'

    Status reports are looked up as slot<N>.txt inside status_report_dir.
    """

    def __init__(self, config_report_path: str, status_report_dir: Optional[str] = None,
                 logger=None):
        """Initialize ReportFileController

        Args:
            config_report_path: File holding the configuration report
            status_report_dir: Directory holding slot<N>.txt status reports
            logger: Logger instance
        """
        super().__init__(logger)
        self.config_report_path = os.path.expanduser(config_report_path)
        self.status_report_dir = os.path.expanduser(status_report_dir) if status_report_dir else None

    @property
    def controller_type(self) -> str:
        return "file"

    def is_available(self) -> bool:
        return os.path.isfile(self.config_report_path)

    def status_report_path(self, slot: int) -> Optional[str]:
        if not self.status_report_dir:
            return None
        return os.path.join(self.status_report_dir, f"slot{slot}.txt")

    def _read(self, path: str) -> str:
        self.logger.debug(f"Reading report from {path}")
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise CommandError(["cat", path], reason=str(e)) from e

        try:
            return data.decode('utf-8')
        except UnicodeDecodeError:
            self.logger.debug("utf-8 decoding failed, falling back to latin-1")
            return data.decode('latin-1')

    def get_config_report(self) -> str:
        self.logger.info(f"Reading configuration report from {self.config_report_path}")
        return self._read(self.config_report_path)

    def get_status_report(self, slot: int) -> str:
        path = self.status_report_path(slot)
        if path is None:
            raise CommandError(["cat", f"slot{slot}.txt"], reason="no status report directory configured")
        return self._read(path)
