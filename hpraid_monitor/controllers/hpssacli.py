"""HP Smart Array controller implementation"""

from typing import List, Optional

from .base import BaseController

# Names the Smart Array CLI has shipped under, newest first
KNOWN_COMMANDS = ("ssacli", "hpssacli", "hpacucli")

CONFIG_REPORT_ARGS = ["ctrl", "all", "show", "config"]


class HpssacliController(BaseController):
    """Controller for HP Smart Array cards using ssacli/hpssacli/hpacucli"""

    def __init__(self, logger=None, command: Optional[str] = None):
        """Initialize HpssacliController

        Args:
            logger: Logger instance
            command: Command name or path; detected from KNOWN_COMMANDS if not set
        """
        super().__init__(logger)
        self.cmd = command or self._detect_command()

    def _detect_command(self) -> str:
        """Detect which Smart Array CLI is installed

        Returns:
            str: Command name, or empty string if none is found
        """
        for cmd in KNOWN_COMMANDS:
            if self._check_command_exists(cmd):
                self.logger.debug(f"Found {cmd} command")
                return cmd
        return ""

    @property
    def controller_type(self) -> str:
        """Get controller type identifier"""
        return self.cmd or "ssacli"

    def is_available(self) -> bool:
        """Check if the configured command can be found"""
        if not self.cmd:
            self.logger.debug("No Smart Array CLI command found")
            return False

        if not self._check_command_exists(self.cmd):
            self.logger.debug(f"Command {self.cmd} not found in PATH")
            return False

        return True

    def config_report_command(self) -> List[str]:
        return [self.cmd] + CONFIG_REPORT_ARGS

    def status_report_command(self, slot: int) -> List[str]:
        return [self.cmd, "ctrl", f"slot={slot}", "show"]

    def get_config_report(self) -> str:
        """Get the configuration report of all controllers"""
        self.logger.info(f"Getting {self.cmd} configuration report")
        return self._execute_command(self.config_report_command())

    def get_status_report(self, slot: int) -> str:
        """Get the status report of the controller in the given slot"""
        self.logger.debug(f"Getting {self.cmd} status report for slot {slot}")
        return self._execute_command(self.status_report_command(slot))
