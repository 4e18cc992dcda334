"""Custom exceptions for argsift."""


class ArgsiftError(Exception):
    """Base exception for argsift errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConflictingModeError(ArgsiftError):
    """Raised when both unregistered-option preferences are requested."""

    def __init__(self, mode: int):
        super().__init__(
            "PREFER_FLAG_FOR_UNREG_OPTION and PREFER_PARAM_FOR_UNREG_OPTION "
            f"are mutually exclusive (mode={int(mode)})"
        )
        self.mode = mode


class InvalidModeError(ArgsiftError):
    """Raised when a mode name cannot be resolved."""

    def __init__(self, name: str):
        super().__init__(f"Unknown mode '{name}'")
        self.name = name


class MissingValueError(ArgsiftError):
    """Raised when a typed value is requested from an absent argument."""

    def __init__(self, key: str | int | None = None):
        message = "No value available"
        if key is not None:
            message += f" for {key!r}"
        super().__init__(message)
        self.key = key


class ConversionError(ArgsiftError):
    """Raised when an argument's text cannot be converted to the requested type."""

    def __init__(self, raw: str, target: str, reason: str = ""):
        message = f"Cannot convert '{raw}' to {target}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.raw = raw
        self.target = target


class InvalidConfigError(ArgsiftError):
    """Raised when config file has invalid format or content."""

    def __init__(
        self,
        path: str,
        line_num: int | None = None,
        message: str = "Invalid config format",
    ):
        full_message = f"Invalid config in {path}"
        if line_num:
            full_message += f" at line {line_num}"
        full_message += f": {message}"
        super().__init__(full_message)
        self.path = path
        self.line_num = line_num
