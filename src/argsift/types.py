"""
Type aliases for argsift.

This module provides centralized type definitions used throughout the package
to ensure consistency and maintainability.

Type Aliases:
    ArgsList: List of string tokens
    NameList: Sequence of option names (aliases)
    NameOrNames: A single option name or a sequence of aliases
    FlagCounts: Multiset of flag names
    ParamMap: Dictionary mapping parameter names to values
    ConfigData: Dictionary representing configuration data
    ExitCode: Integer representing exit codes
    SplitResult: Tuple of token lists before/after the separator
    ConversionTuple: Tuple of success indicator and converted value
"""

from collections import Counter
from typing import Any, Dict, List, Sequence, Tuple, Union

# Common type aliases used throughout the package
ArgsList = List[str]
"""List of string tokens as received on the command line."""

NameList = Sequence[str]
"""Sequence of alternative names for one option (e.g., ['-v', '--verbose'])."""

NameOrNames = Union[str, NameList]
"""A single option name or a sequence of aliases."""

FlagCounts = Counter
"""Multiset of bare flag names; each occurrence is counted."""

ParamMap = Dict[str, str]
"""Dictionary mapping bare parameter names to their string values."""

ConfigData = Dict[str, str]
"""Dictionary representing configuration data with string keys and values."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""

# Tuple type aliases for common patterns
SplitResult = Tuple[ArgsList, ArgsList]
"""Result of splitting tokens at separator (before, after)."""

ConversionTuple = Tuple[bool, Any]
"""Result of a non-throwing conversion (ok, value); value is None when not ok."""
