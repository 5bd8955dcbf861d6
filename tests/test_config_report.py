"""
Tests for the configuration report parser
"""
import pytest

from hpraid_monitor.errors import FieldFormatError, ReportParseError, ReportStructureError
from hpraid_monitor.parsers import ConfigReportParser, parse_config_report
from hpraid_monitor.parsers.config_report import indentation_depth


class TestSampleReport:
    """Test the minimal single controller report."""

    def test_controller(self, sample_config_report):
        report = parse_config_report(sample_config_report)

        assert len(report.controllers) == 1
        controller = report.controllers[0]
        assert controller.slot == 0
        assert controller.serial == "ABC123"
        assert controller.describe() == "Smart Array P420i in slot 0"

    def test_arrays(self, sample_config_report):
        controller = parse_config_report(sample_config_report).controllers[0]

        assert [array.id for array in controller.arrays] == ["U", "A"]
        assert controller.arrays[0].drives == []
        assert len(controller.arrays[1].drives) == 2

    def test_rows(self, sample_config_report):
        rows = parse_config_report(sample_config_report).rows()

        assert len(rows) == 2
        assert rows[0].controller == "Smart Array P420i in slot 0"
        assert rows[0].array == "A (SAS)"
        assert rows[0].drive == "logical 1 (RAID 1, 279GB)"
        assert rows[0].status == "OK"
        assert rows[1].drive == "physical 1I:1:1 (SAS, 300GB)"
        assert rows[1].status == "OK"


class TestFullReport:
    """Test a report with several controllers, annotations and blank lines."""

    def test_controllers(self, full_config_report):
        report = parse_config_report(full_config_report)

        assert [c.describe() for c in report.controllers] == [
            "Smart Array P420i in slot 0",
            "Smart Array P812 in slot 3",
        ]

    def test_annotation_lines_ignored(self, full_config_report):
        controller = parse_config_report(full_config_report).controllers[0]

        assert [array.id for array in controller.arrays] == ["U", "A", "B"]

    def test_drives_follow_their_array(self, full_config_report):
        controller = parse_config_report(full_config_report).controllers[0]
        array_b = controller.get_array("B")

        assert [drive.id for drive in array_b.drives] == ["2", "1I:1:3", "1I:1:4"]
        assert array_b.unused_space == 1_500_000_000_000

    def test_unassigned_header_routes_to_unassigned_array(self, full_config_report):
        controller = parse_config_report(full_config_report).controllers[0]
        unassigned = controller.arrays[0]

        assert [drive.id for drive in unassigned.drives] == ["2I:1:5"]
        assert unassigned.drives[0].status == "OK, spun down"

    def test_second_controller_gets_fresh_arrays(self, full_config_report):
        controller = parse_config_report(full_config_report).controllers[1]

        assert [array.id for array in controller.arrays] == ["U", "A"]
        assert [drive.id for drive in controller.get_array("A").drives] == ["1", "5E:1:1"]

    def test_rows_in_report_order(self, full_config_report):
        rows = parse_config_report(full_config_report).rows()

        assert len(rows) == 9
        assert rows[0].array == "U (unassigned)"
        assert rows[-1].controller == "Smart Array P812 in slot 3"
        assert rows[-1].drive == "physical 5E:1:1 (SAS, 600GB)"

    def test_to_dict(self, sample_config_report):
        data = parse_config_report(sample_config_report).to_dict()

        array = data["controllers"][0]["arrays"][1]
        assert array["id"] == "A"
        assert array["drives"][1]["bay"] == 1
        assert array["drives"][0]["raid_mode"] == "RAID 1"


class TestLayoutHandling:
    """Test line and indentation edge cases."""

    def test_empty_report(self):
        assert parse_config_report("").controllers == []

    def test_whitespace_only_and_crlf_lines(self):
        text = "Smart Array P420i in Slot 1 (sn: S1)\r\n      \r\n   array A (SAS, Unused Space: 0  MB)\r\n"
        controller = parse_config_report(text).controllers[0]

        assert controller.slot == 1
        assert controller.get_array("A") is not None

    def test_unassigned_header_before_any_array(self):
        text = (
            "Smart Array P420i in Slot 0 (sn: S1)\n"
            "   unassigned\n"
            "      physicaldrive 1I:1:1 (port 1I:box 1:bay 1, SAS, 300 GB, OK)\n"
        )
        controller = parse_config_report(text).controllers[0]

        assert len(controller.arrays) == 1
        assert controller.arrays[0].drives[0].id == "1I:1:1"

    def test_parser_is_reusable(self, sample_config_report):
        parser = ConfigReportParser()
        first = parser.parse(sample_config_report)
        second = parser.parse(sample_config_report)

        assert first is not second
        assert first.controllers[0] is not second.controllers[0]
        assert len(second.rows()) == 2

    def test_indentation_depth(self):
        assert indentation_depth("abc") == 0
        assert indentation_depth("   array") == 3
        assert indentation_depth("\tarray") == 0


class TestStructuralErrors:
    """Test that malformed reports fail with descriptive errors."""

    def test_unexpected_depth(self):
        text = (
            "Smart Array P420i in Slot 0 (sn: ABC123)\n"
            "  array A (SAS, Unused Space: 0  B)\n"
        )
        with pytest.raises(ReportStructureError) as excinfo:
            parse_config_report(text)

        assert excinfo.value.line_number == 2
        assert excinfo.value.depth == 2
        assert "line 2" in str(excinfo.value)
        assert "2 leading spaces" in str(excinfo.value)

    def test_drive_without_controller(self):
        text = "      logicaldrive 1 (279 GB, RAID 1, OK)\n"
        with pytest.raises(ReportStructureError) as excinfo:
            parse_config_report(text)
        assert excinfo.value.line_number == 1

    def test_drive_before_any_array(self):
        text = (
            "Smart Array P420i in Slot 0 (sn: S1)\n"
            "      physicaldrive 1I:1:1 (port 1I:box 1:bay 1, SAS, 300 GB, OK)\n"
        )
        with pytest.raises(ReportStructureError) as excinfo:
            parse_config_report(text)

        assert excinfo.value.line_number == 2
        assert excinfo.value.depth == 6

    def test_array_cursor_resets_on_next_controller(self, sample_config_report):
        text = sample_config_report + (
            "Smart Array P812 in Slot 3 (sn: S2)\n"
            "      logicaldrive 1 (1.2 TB, RAID 5, OK)\n"
        )
        with pytest.raises(ReportStructureError) as excinfo:
            parse_config_report(text)

        assert excinfo.value.line_number == 6
        assert "Smart Array P812 in slot 3" in str(excinfo.value)

    def test_array_without_controller(self):
        with pytest.raises(ReportStructureError):
            parse_config_report("   array A (SAS, Unused Space: 0  B)\n")

    def test_duplicate_array(self):
        text = (
            "Smart Array P420i in Slot 0 (sn: ABC123)\n"
            "   array A (SAS, Unused Space: 0  B)\n"
            "   array A (SAS, Unused Space: 0  B)\n"
        )
        with pytest.raises(ReportStructureError) as excinfo:
            parse_config_report(text)
        assert excinfo.value.line_number == 3

    def test_bad_controller_line(self):
        text = "\nNot a controller header\n"
        with pytest.raises(FieldFormatError) as excinfo:
            parse_config_report(text)

        assert excinfo.value.grammar == "controller"
        assert excinfo.value.line_number == 2
        assert str(excinfo.value).startswith("line 2:")

    def test_bad_drive_line_reports_line_number(self, sample_config_report):
        text = sample_config_report + "      physicaldrive 1I:1:2 (port 1I:box A:bay 2, SAS, 300 GB, OK)\n"
        with pytest.raises(ReportParseError) as excinfo:
            parse_config_report(text)

        assert excinfo.value.line_number == 5
        assert "box" in str(excinfo.value)
