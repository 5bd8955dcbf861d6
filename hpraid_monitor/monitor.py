"""Command line front end for the Smart Array monitor"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .collector import CollectionResult, RaidStatusCollector
from .config import ConfigManager
from .controllers import BaseController, HpssacliController, ReportFileController
from .models import Controller
from .sizes import format_size

EXIT_OK = 0
EXIT_UNAVAILABLE = 1
EXIT_NO_COMMAND = 2


class HPRaidMonitor:
    """Main class for the Smart Array monitor

    Reads the controller configuration and status reports, normalizes the
    status values and prints them as tables or JSON.
    """

    def __init__(self):
        """Initialize the HPRaidMonitor instance"""
        # Options
        self.command: Optional[str] = None
        self.config_file = "./hpraid_monitor.conf"
        self.report_file: Optional[str] = None
        self.status_dir: Optional[str] = None
        self.json_output = False
        self.show_tree = False
        self.verbose = False
        self.quiet = False

        # Components (initialized later)
        self.logger = self._setup_logger()
        self.config_manager: Optional[ConfigManager] = None
        self.controller: Optional[BaseController] = None

    def _setup_logger(self) -> logging.Logger:
        """Set up the logger for the application"""
        logger = logging.getLogger("hpraid-monitor")
        logger.setLevel(logging.INFO)

        # Replace handlers left by an earlier instance
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)

        formatter = logging.Formatter('[%(levelname)s] %(message)s')
        ch.setFormatter(formatter)

        logger.addHandler(ch)

        return logger

    def parse_arguments(self, argv: Optional[List[str]] = None) -> None:
        """Parse command line arguments"""
        parser = argparse.ArgumentParser(
            description="Reports drive, controller and battery health of HP Smart Array controllers."
        )

        parser.add_argument("--cmd", metavar="COMMAND",
                          help="Smart Array CLI to run (default: detect ssacli, hpssacli or hpacucli)")
        parser.add_argument("-c", "--config", default=self.config_file, metavar="FILE",
                          help="YAML configuration file")
        parser.add_argument("--report", metavar="FILE",
                          help="Read a saved 'ctrl all show config' report instead of running the CLI")
        parser.add_argument("--status-dir", metavar="DIR",
                          help="Directory with saved 'ctrl slot=N show' reports named slot<N>.txt")
        parser.add_argument("-j", "--json", action="store_true", help="Output results in JSON format")
        parser.add_argument("-t", "--tree", action="store_true",
                          help="Display the controller/array/drive tree")
        parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
        parser.add_argument("-q", "--quiet", action="store_true", help="Suppress INFO messages")

        args = parser.parse_args(argv)

        # Set instance variables
        self.command = args.cmd
        self.config_file = args.config
        self.report_file = args.report
        self.status_dir = args.status_dir
        self.json_output = args.json
        self.show_tree = args.tree
        self.verbose = args.verbose
        self.quiet = args.quiet

        # Configure logger
        if self.verbose:
            self._set_log_level(logging.DEBUG)
        elif self.quiet:
            self._set_log_level(logging.WARNING)

    def _set_log_level(self, level: int) -> None:
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def create_controller(self) -> Optional[BaseController]:
        """Create the report source selected by the options

        Returns:
            BaseController instance, or None if no Smart Array CLI is available
        """
        if self.report_file:
            return ReportFileController(self.report_file, self.status_dir, logger=self.logger)

        command = self.command or self.config_manager.command
        controller = HpssacliController(logger=self.logger, command=command)
        if not controller.is_available():
            self.logger.error("No Smart Array CLI found. Please install ssacli, hpssacli or hpacucli, or use --cmd.")
            return None

        self.logger.info(f"Selected controller: {controller.controller_type}")
        return controller

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Main entry point for the application

        Returns:
            int: Process exit status
        """
        self.parse_arguments(argv)

        self.config_manager = ConfigManager(self.config_file, logger=self.logger)

        self.controller = self.create_controller()
        if self.controller is None:
            return EXIT_NO_COMMAND

        collector = RaidStatusCollector(
            self.controller, self.config_manager.create_normalizer(), logger=self.logger
        )

        self.logger.info("Collecting controller status...")
        result = collector.collect()

        self._display_results(result)

        return EXIT_OK if result.available else EXIT_UNAVAILABLE

    def _display_results(self, result: CollectionResult) -> None:
        """Display collected status rows"""
        if self.json_output:
            output = result.to_dict()
            if self.show_tree and result.report is not None:
                output["tree"] = result.report.to_dict()["controllers"]
            print(json.dumps(output, indent=2))
            return

        if self.show_tree and result.report is not None:
            for controller in result.report.controllers:
                self._display_tree(controller)

        print("\nDrives")
        self._print_table(
            ["Controller", "Array", "Drive", "Status", "Code"],
            [[row.controller, row.array, row.drive, row.status, self._format_code(row.code)]
             for row in result.drives]
        )

        if result.controllers:
            print("\nControllers")
            self._print_table(
                ["Controller", "Category", "Value", "Code"],
                [[row.controller, row.category, row.value, self._format_code(row.code)]
                 for row in result.controllers]
            )

        if result.batteries:
            print("\nBatteries")
            self._print_table(
                ["Controller", "Count", "Status", "Code"],
                [[row.controller, row.battery_count, row.status, self._format_code(row.code)]
                 for row in result.batteries]
            )

    def _display_tree(self, controller: Controller) -> None:
        """Display one controller with its arrays and drives"""
        print(f"{controller.describe()} (sn: {controller.serial})")
        for array in controller.arrays:
            if array.is_unassigned and not array.drives:
                continue
            print(f"   array {array.describe()}, unused {format_size(array.unused_space)}")
            for drive in array.drives:
                print(f"      {drive.describe()}: {drive.status}")

    @staticmethod
    def _format_code(code: float) -> str:
        return f"{code:g}"

    def _print_table(self, headers: List[str], data: List[List[str]]) -> None:
        """Print a formatted table"""
        # Calculate column widths
        widths = [len(h) for h in headers]
        for row in data:
            for i, val in enumerate(row):
                if i < len(widths):
                    widths[i] = max(widths[i], len(str(val)))

        header_parts = [h.ljust(widths[i]) for i, h in enumerate(headers)]
        header_line = "  ".join(header_parts)
        print("-" * len(header_line))
        print(header_line)
        print("-" * len(header_line))

        for row in data:
            row_parts = [str(val).ljust(widths[i]) for i, val in enumerate(row)]
            print("  ".join(row_parts))

        print("-" * len(header_line))


def main(argv: Optional[List[str]] = None) -> int:
    """Console script entry point"""
    return HPRaidMonitor().run(argv)


if __name__ == "__main__":
    sys.exit(main())
