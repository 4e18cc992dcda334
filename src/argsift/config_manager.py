"""Configuration management functionality for argsift."""

import re
from pathlib import Path

from .config_result import ConfigResult, split_names
from .exceptions import ConflictingModeError, InvalidConfigError, InvalidModeError
from .modes import Mode
from .path_helper import PathHelper
from .types import ConfigData

KNOWN_KEYS = ("mode", "params")
MAX_CONFIG_SIZE = 1024 * 1024
MAX_LINE_LENGTH = 10000


class ConfigManager:
    """Manages configuration file loading."""

    @staticmethod
    def find_config_file() -> Path | None:
        """Find argsift.conf config file path."""
        return PathHelper.get_config_path()

    @staticmethod
    def load_config(config_file: Path) -> ConfigResult:
        """
        Load the CLI defaults from a configuration file.

        Args:
            config_file: Path to the configuration file

        Returns:
            ConfigResult containing the 'mode' and 'params' settings

        Raises:
            InvalidConfigError: If config file has invalid format or content
        """
        settings: ConfigData = {}

        file_size = config_file.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            raise InvalidConfigError(
                str(config_file), message=f"Config file too large ({file_size} bytes)"
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, 1):
                    ConfigManager._process_config_line(
                        line, line_num, str(config_file), settings
                    )
        except UnicodeDecodeError as e:
            raise InvalidConfigError(
                str(config_file), message=f"Invalid file encoding: {e}"
            ) from e

        return ConfigResult(settings)

    @staticmethod
    def _process_config_line(
        line: str, line_num: int, config_file: str, settings: ConfigData
    ) -> None:
        """
        Process a single configuration line.

        Args:
            line: The configuration line to process
            line_num: Line number for error reporting
            config_file: Config file path for error reporting
            settings: Dictionary to store settings
        """
        # Skip empty lines and comments
        if not line.strip() or line.lstrip().startswith("#"):
            return

        if len(line) > MAX_LINE_LENGTH:
            raise InvalidConfigError(
                config_file,
                line_num,
                f"Line too long ({len(line)} characters)",
            )

        if "=" not in line:
            raise InvalidConfigError(config_file, line_num, "Expected KEY=VALUE")

        key, value = line.strip().split("=", 1)
        key = ConfigManager._strip_quotes(key.strip()).lower()
        value = ConfigManager._strip_quotes(value.strip())

        if key not in KNOWN_KEYS:
            raise InvalidConfigError(config_file, line_num, f"Unknown key: '{key}'")

        if key == "mode":
            try:
                Mode.from_names(value)
            except (InvalidModeError, ConflictingModeError) as e:
                raise InvalidConfigError(config_file, line_num, e.message) from e
        else:
            for name in split_names(value):
                if not ConfigManager._is_valid_param_name(name):
                    raise InvalidConfigError(
                        config_file, line_num, f"Invalid parameter name: '{name}'"
                    )

        settings[key] = value

    @staticmethod
    def _strip_quotes(value: str) -> str:
        """Strip quotes from value if present."""
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            return value[1:-1]
        return value

    @staticmethod
    def _is_valid_param_name(name: str) -> bool:
        """Check that a registered name is an option word, optionally with its marker."""
        return re.match(r"^(-{1,2}|/)?[A-Za-z0-9_][A-Za-z0-9_.-]*$", name) is not None
