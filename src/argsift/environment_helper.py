"""Environment variable operations for argsift."""

import os
import sys

TRUTHY_VALUES = ("1", "true", "yes", "on")
FALSY_VALUES = ("0", "false", "no", "off")


def debug_log(message: str) -> None:
    """Log debug message when ARGSIFT_DEBUG=1 is set."""
    if EnvironmentHelper.is_debug_enabled():
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    @staticmethod
    def is_debug_enabled() -> bool:
        """Check if debug output was requested through ARGSIFT_DEBUG."""
        return os.environ.get("ARGSIFT_DEBUG", "").lower() in TRUTHY_VALUES

    @staticmethod
    def get_default_mode_names() -> str:
        """Get the comma separated mode names from ARGSIFT_MODE."""
        return os.environ.get("ARGSIFT_MODE", "").strip()
