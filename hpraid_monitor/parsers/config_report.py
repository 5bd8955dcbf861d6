"""Parser for the 'ctrl all show config' report

The report nests arrays and drives under controllers by indentation:

    Smart Array P420i in Slot 0 (Embedded)    (sn: 0014380287D4A10)

       array A (SAS, Unused Space: 0  MB)

          logicaldrive 1 (279.4 GB, RAID 1, OK)

          physicaldrive 1I:1:1 (port 1I:box 1:bay 1, SAS, 300 GB, OK)
          physicaldrive 1I:1:2 (port 1I:box 1:bay 2, SAS, 300 GB, OK)

Controllers start at column 0, arrays at column 3 and drives at column 6.
Column 3 also carries cage, expander and port lines, which are ignored. The
one exception is a line reading exactly 'unassigned': it is acted on, and the
drives listed under it go to the controller's unassigned array instead of
the array before it. A drive line must follow an array or 'unassigned'
header of its controller.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from ..errors import ReportParseError, ReportStructureError
from ..models import UNASSIGNED_ARRAY_TYPE, Array, Controller, Drive, DriveRow
from .fields import ARRAY_PREFIX, parse_array_line, parse_controller_line, parse_drive_line

CONTROLLER_DEPTH = 0
ARRAY_DEPTH = 3
DRIVE_DEPTH = 6


@dataclass
class ConfigReport:
    """Controllers found in one configuration report, in report order"""

    controllers: List[Controller] = field(default_factory=list)

    def drives(self) -> Iterator[Tuple[Controller, Array, Drive]]:
        """Iterate over every drive together with its controller and array"""
        for controller in self.controllers:
            for array in controller.arrays:
                for drive in array.drives:
                    yield controller, array, drive

    def rows(self) -> List[DriveRow]:
        """Flatten the tree into one row of descriptions per drive"""
        return [
            DriveRow(
                controller=controller.describe(),
                array=array.describe(),
                drive=drive.describe(),
                status=drive.status
            )
            for controller, array, drive in self.drives()
        ]

    def to_dict(self) -> dict:
        return {"controllers": [controller.to_dict() for controller in self.controllers]}


def indentation_depth(line: str) -> int:
    """Count the spaces a line starts with"""
    return len(line) - len(line.lstrip(" "))


class ConfigReportParser:
    """Builds the controller/array/drive tree from a configuration report

    The parser keeps no state between calls to parse().
    """

    def parse(self, text: str) -> ConfigReport:
        """Parse a complete report

        Args:
            text: Output of 'ctrl all show config'

        Returns:
            ConfigReport: Parsed controllers

        Raises:
            ReportStructureError: If a line sits at an unexpected depth or
                has no controller or array to belong to
            FieldFormatError: If a line does not match its expected grammar
        """
        report = ConfigReport()
        # Cursors into report.controllers and the current controller's arrays;
        # array_idx is None until an array or 'unassigned' header is seen
        controller_idx: Optional[int] = None
        array_idx: Optional[int] = None

        for line_number, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.rstrip()
            if not line:
                continue

            depth = indentation_depth(line)
            content = line[depth:]

            try:
                if depth == CONTROLLER_DEPTH:
                    report.controllers.append(parse_controller_line(content))
                    controller_idx = len(report.controllers) - 1
                    array_idx = None

                elif depth == ARRAY_DEPTH:
                    if content == UNASSIGNED_ARRAY_TYPE and controller_idx is not None:
                        array_idx = 0
                        continue
                    # Depth 3 also carries cage, expander and port lines
                    if not content.startswith(ARRAY_PREFIX):
                        continue
                    controller = self._current_controller(report, controller_idx, line_number, line, depth)
                    array = parse_array_line(content)
                    if controller.get_array(array.id) is not None:
                        raise ReportStructureError(
                            f"array {array.id} defined twice on {controller.describe()}",
                            line_number, line, depth
                        )
                    controller.add(array)
                    array_idx = len(controller.arrays) - 1

                elif depth == DRIVE_DEPTH:
                    controller = self._current_controller(report, controller_idx, line_number, line, depth)
                    if array_idx is None:
                        raise ReportStructureError(
                            f"drive line appears before any array of {controller.describe()}",
                            line_number, line, depth
                        )
                    controller.arrays[array_idx].add(parse_drive_line(content))

                else:
                    raise ReportStructureError(
                        f"cannot parse line with {depth} leading spaces: {content!r}",
                        line_number, line, depth
                    )

            except ReportParseError as e:
                if e.line_number is None:
                    e.line_number = line_number
                    e.line = line
                raise

        return report

    @staticmethod
    def _current_controller(report: ConfigReport, controller_idx: Optional[int],
                            line_number: int, line: str, depth: int) -> Controller:
        if controller_idx is None:
            raise ReportStructureError(
                f"line with {depth} leading spaces appears before any controller",
                line_number, line, depth
            )
        return report.controllers[controller_idx]


def parse_config_report(text: str) -> ConfigReport:
    """Parse the output of 'ctrl all show config'"""
    return ConfigReportParser().parse(text)
