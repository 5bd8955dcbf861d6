"""Base controller abstraction"""

from abc import ABC, abstractmethod
from typing import List, Optional
import logging
import shutil
import subprocess

from ..errors import CommandError


class BaseController(ABC):
    """Abstract source of Smart Array reports"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize the controller

        Args:
            logger: Logger instance for output
        """
        self.logger = logger or logging.getLogger(__name__)

    @abstractmethod
    def is_available(self) -> bool:
        """Check if reports can be obtained from this source

        Returns:
            bool: True if the source is usable
        """
        pass

    @abstractmethod
    def get_config_report(self) -> str:
        """Get the 'ctrl all show config' report

        Returns:
            str: Report text

        Raises:
            CommandError: If the report cannot be obtained
        """
        pass

    @abstractmethod
    def get_status_report(self, slot: int) -> str:
        """Get the 'ctrl slot=N show' report for one controller

        Args:
            slot: Slot number of the controller

        Returns:
            str: Report text

        Raises:
            CommandError: If the report cannot be obtained
        """
        pass

    @property
    @abstractmethod
    def controller_type(self) -> str:
        """Get the controller type identifier

        Returns:
            str: Controller type (e.g., 'ssacli', 'file')
        """
        pass

    # Helper methods that can be used by all controllers

    def _execute_command(self, cmd: List[str], decode_method: str = 'utf-8') -> str:
        """Execute a command and return its output

        Args:
            cmd: Command to execute as list of strings
            decode_method: Method to decode command output

        Returns:
            str: Command output as string

        Raises:
            CommandError: If the command cannot be started or exits non-zero
        """
        self.logger.debug(f"Executing command: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, check=False)
        except OSError as e:
            raise CommandError(cmd, reason=str(e)) from e

        try:
            output = result.stdout.decode(decode_method)
        except UnicodeDecodeError:
            self.logger.debug(f"{decode_method} decoding failed, falling back to latin-1")
            output = result.stdout.decode('latin-1')

        if result.returncode != 0:
            stderr = result.stderr.decode(decode_method, errors='replace').strip()
            raise CommandError(cmd, returncode=result.returncode, output=output, reason=stderr)

        return output

    def _check_command_exists(self, cmd: str) -> bool:
        """Check if a command exists in the system PATH

        Args:
            cmd: Command to check

        Returns:
            bool: True if command exists, False otherwise
        """
        return shutil.which(cmd) is not None
