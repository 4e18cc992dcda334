"""Config result container for argsift."""

from .modes import Mode
from .types import ConfigData


def split_names(value: str) -> list[str]:
    """Split a comma separated list, dropping blanks."""
    return [name.strip() for name in value.split(",") if name.strip()]


class ConfigResult:
    """Class to hold the settings read from argsift.conf."""

    def __init__(self, settings: ConfigData | None = None):
        self.settings = dict(settings or {})

    def __contains__(self, key):
        """Allow checking if a setting exists using 'in' operator."""
        return key in self.settings

    def __getitem__(self, key):
        """Allow dictionary-style access to settings."""
        return self.settings[key]

    def __eq__(self, other):
        if isinstance(other, dict):
            return self.settings == other
        if isinstance(other, ConfigResult):
            return self.settings == other.settings
        return NotImplemented

    def get(self, key, default=None):
        """Allow .get() method access to settings."""
        return self.settings.get(key, default)

    @property
    def params(self) -> list[str]:
        """Registered parameter names from the 'params' setting."""
        return split_names(self.settings.get("params", ""))

    @property
    def mode(self) -> Mode | None:
        """Mode from the 'mode' setting, or None when unset."""
        names = self.settings.get("mode", "")
        return Mode.from_names(names) if names.strip() else None
