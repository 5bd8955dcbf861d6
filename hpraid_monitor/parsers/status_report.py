"""Parser for the 'ctrl slot=N show' report"""

from typing import List

from ..models import StatusObservation
from ..status_codes import BATTERY_COUNT, BATTERY_STATUS
from .fields import match_status_line

DEFAULT_BATTERY_COUNT = "0"


class StatusReportParser:
    """Extracts controller, cache and battery health lines from a status report

    Lines that carry none of the monitored labels are skipped. Each battery
    status observation is labelled with the battery count reported before it.
    """

    def __init__(self, default_battery_count: str = DEFAULT_BATTERY_COUNT):
        """Initialize StatusReportParser

        Args:
            default_battery_count: Count used for battery statuses reported
                before any battery count line
        """
        self.default_battery_count = default_battery_count

    def parse(self, text: str) -> List[StatusObservation]:
        """Parse a complete status report

        Args:
            text: Output of 'ctrl slot=N show'

        Returns:
            List[StatusObservation]: One observation per recognized line, in
            report order
        """
        observations = []
        battery_count = self.default_battery_count

        for line in text.splitlines():
            if not line.strip():
                continue

            matched = match_status_line(line)
            if matched is None:
                continue

            category, value = matched
            if category == BATTERY_COUNT:
                battery_count = value
                observations.append(StatusObservation(category, value))
            elif category == BATTERY_STATUS:
                observations.append(StatusObservation(category, value, battery_count=battery_count))
            else:
                observations.append(StatusObservation(category, value))

        return observations


def parse_status_report(text: str) -> List[StatusObservation]:
    """Parse the output of 'ctrl slot=N show'"""
    return StatusReportParser().parse(text)
