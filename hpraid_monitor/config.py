"""Configuration management for the Smart Array monitor"""

import os
import logging
from typing import Dict, Optional
import yaml

from .status_codes import DEFAULT_STATUS_CODES, StatusNormalizer


class ConfigManager:
    """Manages loading and accessing configuration from YAML file"""

    def __init__(self, config_file: str = "./hpraid_monitor.conf", logger: Optional[logging.Logger] = None):
        """Initialize configuration manager

        Args:
            config_file: Path to configuration file
            logger: Logger instance
        """
        self.config_file = os.path.expanduser(config_file)
        self.logger = logger or logging.getLogger(__name__)

        self.command: Optional[str] = None
        self.status_codes: Dict[str, Dict[str, float]] = {}

        self.load()

    def load(self) -> None:
        """Load configuration from YAML file

        Configuration file structure:
        ```yaml
        command: ssacli               # Smart Array CLI name or path

        status_codes:                 # Extra entries for the status code tables
          drive-status:
            "Predictive Failure": 5
            "Failed": 10
          battery-status:
            "Failed": 10
        ```
        """
        if not os.path.exists(self.config_file):
            self.logger.warning(f"Configuration file {self.config_file} not found. Using default settings.")
            return

        try:
            self.logger.info(f"Loading user configuration from {self.config_file}")

            with open(self.config_file, 'r') as f:
                config = yaml.safe_load(f)

            if not config or not isinstance(config, dict):
                self.logger.warning(f"Configuration file {self.config_file} is empty or invalid")
                return

            if config.get('command'):
                self.command = str(config['command'])
                self.logger.debug(f"Using command {self.command} from configuration")

            if 'status_codes' in config:
                self._load_status_codes(config['status_codes'])

        except yaml.YAMLError as e:
            self.logger.error(f"Error parsing YAML in configuration file: {e}")
        except IOError as e:
            self.logger.error(f"Error reading configuration file: {e}")

    def _load_status_codes(self, status_codes_data) -> None:
        """Load status code table entries from data

        Args:
            status_codes_data: Mapping of category to {status text: code}
        """
        if not isinstance(status_codes_data, dict):
            self.logger.warning("Ignoring status_codes: expected a mapping of categories")
            return

        for category, entries in status_codes_data.items():
            if category not in DEFAULT_STATUS_CODES:
                self.logger.warning(f"Skipping status codes for unknown category {category}")
                continue
            if not isinstance(entries, dict):
                self.logger.warning(f"Skipping status codes for {category}: expected a mapping")
                continue

            table = {}
            for status, code in entries.items():
                if isinstance(code, bool) or not isinstance(code, (int, float)):
                    self.logger.warning(f"Skipping status code for {category} {status!r}: {code!r} is not a number")
                    continue
                table[str(status)] = code

            self.status_codes[category] = table
            self.logger.debug(f"Loaded {len(table)} status codes for {category}")

    def create_normalizer(self) -> StatusNormalizer:
        """Build a normalizer using the built-in tables extended by this configuration"""
        return StatusNormalizer(self.status_codes)

    def has_status_codes(self) -> bool:
        """Check if any status code entries are loaded"""
        return len(self.status_codes) > 0
