"""Tests for the type definitions in argsift."""

from collections import Counter

from argsift.argument_processor import ArgumentProcessor
from argsift.types import (
    ArgsList,
    ConversionTuple,
    FlagCounts,
    NameOrNames,
    ParamMap,
    SplitResult,
)


class TestTypesUnit:
    """Unit tests for the type definitions."""

    def test_args_list_type(self):
        """Test ArgsList type alias."""
        args: ArgsList = ["-v", "--name", "Bob", "--", "file"]
        assert isinstance(args, list)
        assert all(isinstance(item, str) for item in args)

    def test_flag_counts_type(self):
        """Test FlagCounts type alias."""
        flags: FlagCounts = Counter(["v", "v", "q"])
        assert flags["v"] == 2
        assert flags["missing"] == 0

    def test_param_map_type(self):
        """Test ParamMap type alias."""
        params: ParamMap = {"name": "Bob"}
        assert all(isinstance(v, str) for v in params.values())

    def test_name_or_names_type(self):
        """Test NameOrNames type alias accepts both forms."""
        single: NameOrNames = "-v"
        aliases: NameOrNames = ["-v", "--verbose"]
        assert isinstance(single, str)
        assert isinstance(aliases, list)

    def test_split_result_type(self):
        """Test SplitResult type alias with ArgumentProcessor."""
        result: SplitResult = ArgumentProcessor.split_at_separator(["-v", "--", "x"])
        assert result == (["-v"], ["--", "x"])

    def test_conversion_tuple_type(self):
        """Test ConversionTuple type alias."""
        ok: ConversionTuple = (True, 3)
        failed: ConversionTuple = (False, None)
        assert ok[0] and ok[1] == 3
        assert not failed[0] and failed[1] is None
