"""argsift - classify command-line tokens into positionals, flags and params."""

from .arg_value import ArgValue
from .exceptions import (
    ArgsiftError,
    ConflictingModeError,
    ConversionError,
    InvalidModeError,
    MissingValueError,
)
from .modes import Mode
from .parse_result import ParseResult
from .parser import Parser, parse

PREFER_FLAG_FOR_UNREG_OPTION = Mode.PREFER_FLAG_FOR_UNREG_OPTION
PREFER_PARAM_FOR_UNREG_OPTION = Mode.PREFER_PARAM_FOR_UNREG_OPTION
NO_SPLIT_ON_EQUALSIGN = Mode.NO_SPLIT_ON_EQUALSIGN
SINGLE_DASH_IS_MULTIFLAG = Mode.SINGLE_DASH_IS_MULTIFLAG

__all__ = [
    "ArgValue",
    "ArgsiftError",
    "ConflictingModeError",
    "ConversionError",
    "InvalidModeError",
    "MissingValueError",
    "Mode",
    "NO_SPLIT_ON_EQUALSIGN",
    "PREFER_FLAG_FOR_UNREG_OPTION",
    "PREFER_PARAM_FOR_UNREG_OPTION",
    "ParseResult",
    "Parser",
    "SINGLE_DASH_IS_MULTIFLAG",
    "parse",
]
