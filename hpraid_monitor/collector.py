"""Collection of drive, controller and battery health from Smart Array reports"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .controllers import BaseController
from .errors import CommandError, ReportParseError
from .models import BatteryStatus, ControllerStatus, DriveStatus
from .parsers import ConfigReport, ConfigReportParser, StatusReportParser
from .status_codes import BATTERY_COUNT, BATTERY_STATUS, DRIVE_STATUS, StatusNormalizer


@dataclass
class CollectionResult:
    """Status rows produced by one collection run"""

    drives: List[DriveStatus] = field(default_factory=list)
    controllers: List[ControllerStatus] = field(default_factory=list)
    batteries: List[BatteryStatus] = field(default_factory=list)
    available: bool = True           # False when the configuration report was unusable
    report: Optional[ConfigReport] = None

    def to_dict(self) -> dict:
        return {
            "available": self.available,
            "drives": [row.to_dict() for row in self.drives],
            "controllers": [row.to_dict() for row in self.controllers],
            "batteries": [row.to_dict() for row in self.batteries]
        }


class RaidStatusCollector:
    """Runs the report commands and turns their output into status rows

    Every call to collect() parses fresh reports, so one collector can serve
    concurrent callers.
    """

    def __init__(self, controller: BaseController, normalizer: Optional[StatusNormalizer] = None,
                 logger: Optional[logging.Logger] = None):
        """Initialize the collector

        Args:
            controller: Source of configuration and status reports
            normalizer: Status code tables, built-in tables if not set
            logger: Logger instance
        """
        self.controller = controller
        self.normalizer = normalizer or StatusNormalizer()
        self.logger = logger or logging.getLogger(__name__)
        self.config_parser = ConfigReportParser()
        self.status_parser = StatusReportParser()

    def collect(self) -> CollectionResult:
        """Collect drive, controller and battery status rows

        Returns:
            CollectionResult: Rows for all controllers. When the configuration
            report cannot be read or parsed, a single placeholder drive row.
        """
        try:
            output = self.controller.get_config_report()
            report = self.config_parser.parse(output)
        except CommandError as e:
            self.logger.error(f"Error running {self.controller.controller_type}: {e}")
            if e.output:
                self.logger.debug(f"Command output: {e.output[:200]}")
            return CollectionResult(drives=[DriveStatus.unavailable()], available=False)
        except ReportParseError as e:
            self.logger.error(f"Error parsing configuration report: {e}")
            return CollectionResult(drives=[DriveStatus.unavailable()], available=False)

        result = CollectionResult(report=report)
        result.drives = self.drive_statuses(report)
        self.logger.debug(f"Found {len(report.controllers)} controllers and {len(result.drives)} drives")

        for ctrl in report.controllers:
            self._collect_controller_status(ctrl.name, ctrl.slot, result)

        return result

    def drive_statuses(self, report: ConfigReport) -> List[DriveStatus]:
        """Attach status codes to the flattened drive rows of a report"""
        return [
            DriveStatus(
                controller=row.controller,
                array=row.array,
                drive=row.drive,
                status=row.status,
                code=self.normalizer.normalize(DRIVE_STATUS, row.status)
            )
            for row in report.rows()
        ]

    def _collect_controller_status(self, name: str, slot: int, result: CollectionResult) -> None:
        try:
            output = self.controller.get_status_report(slot)
        except CommandError as e:
            self.logger.error(f"Error getting status of controller in slot {slot}: {e}")
            return

        for observation in self.status_parser.parse(output):
            if observation.category == BATTERY_COUNT:
                continue

            code = self.normalizer.normalize(observation.category, observation.value)
            if observation.category == BATTERY_STATUS:
                result.batteries.append(BatteryStatus(
                    controller=name,
                    battery_count=observation.battery_count,
                    status=observation.value,
                    code=code
                ))
            else:
                result.controllers.append(ControllerStatus(
                    controller=name,
                    category=observation.category,
                    value=observation.value,
                    code=code
                ))
