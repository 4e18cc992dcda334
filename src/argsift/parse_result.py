"""Parse result container for argsift."""

from collections import Counter
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from .arg_value import ArgValue
from .token_helper import TokenHelper
from .types import ArgsList, FlagCounts, NameOrNames, ParamMap


def _as_names(names: NameOrNames) -> list[str]:
    """Normalize one name or a sequence of aliases to bare names."""
    if isinstance(names, str):
        names = [names]
    return [TokenHelper.strip_marker(name) for name in names]


class ParseResult:
    """Class to hold the positionals, flags and params of one classification."""

    def __init__(
        self,
        pos_args: ArgsList | None = None,
        flags: FlagCounts | None = None,
        params: ParamMap | None = None,
    ):
        self._pos_args = tuple(pos_args or ())
        self._flags = Counter(flags or ())
        self._params = dict(params or {})

    @property
    def pos_args(self) -> tuple[str, ...]:
        """Positional values in input order."""
        return self._pos_args

    @property
    def flags(self) -> Mapping[str, int]:
        """Read-only view of flag names to occurrence counts."""
        return MappingProxyType(self._flags)

    @property
    def params(self) -> Mapping[str, str]:
        """Read-only view of parameter names to values."""
        return MappingProxyType(self._params)

    def __iter__(self) -> Iterator[str]:
        """Iterate over positional values in order."""
        return iter(self._pos_args)

    def __len__(self) -> int:
        """Number of positional values."""
        return len(self._pos_args)

    def __contains__(self, name):
        """Allow checking if a flag appeared using 'in' operator."""
        return self.has_flag(name)

    def __getitem__(self, key):
        """
        Allow argv-style access.

        An integer index returns the positional string (empty when out of
        range); a name or list of aliases returns flag presence.
        """
        if isinstance(key, int):
            return self._pos_args[key] if 0 <= key < len(self._pos_args) else ""
        return self.has_flag(key)

    def __call__(self, key, default=None) -> ArgValue:
        """
        Allow call-style typed access.

        An integer index looks up a positional value; a name or list of
        aliases looks up a parameter.
        """
        if isinstance(key, int):
            return self.positional(key, default)
        return self.param(key, default)

    def __eq__(self, other):
        if isinstance(other, ParseResult):
            return (
                self._pos_args == other._pos_args
                and self._flags == other._flags
                and self._params == other._params
            )
        return NotImplemented

    def __repr__(self) -> str:
        return (
            f"ParseResult(pos_args={list(self._pos_args)!r}, "
            f"flags={dict(self._flags)!r}, params={self._params!r})"
        )

    def has_flag(self, names: NameOrNames) -> bool:
        """True if any of the given names appeared as a flag."""
        return any(self._flags[name] for name in _as_names(names))

    def flag_count(self, names: NameOrNames) -> int:
        """Total occurrences of the given flag names (e.g. -v -v -v is 3)."""
        return sum(self._flags[name] for name in _as_names(names))

    def has_param(self, names: NameOrNames) -> bool:
        """True if any of the given names was given a value."""
        return any(name in self._params for name in _as_names(names))

    def positional(self, index: int, default: Any = None) -> ArgValue:
        """Get the positional value at *index*, or *default* when out of range.

        A None default counts as no default, so the result is absent.
        """
        if 0 <= index < len(self._pos_args):
            return ArgValue(self._pos_args[index], index)
        if default is None:
            return ArgValue.missing(index)
        return ArgValue.from_default(default, index)

    def param(self, names: NameOrNames, default: Any = None) -> ArgValue:
        """
        Get a parameter value.

        Args:
            names: Parameter name or list of aliases; the first alias found wins
            default: Value used when none of the names was given; None means
                no default

        Returns:
            ArgValue holding the text, the stringified default, or the absent
            marker when nothing matched and no default was supplied
        """
        bare_names = _as_names(names)
        for name in bare_names:
            if name in self._params:
                return ArgValue(self._params[name], name)

        key = bare_names[0] if bare_names else None
        if default is None:
            return ArgValue.missing(key)
        return ArgValue.from_default(default, key)

    def get(self, names: NameOrNames, default: str | None = None) -> str | None:
        """Allow .get() method access to parameter strings."""
        value = self.param(names)
        return default if value.failed else value.raw

    def to_dict(self) -> dict[str, Any]:
        """Plain data view used for reporting."""
        return {
            "positionals": list(self._pos_args),
            "flags": dict(self._flags),
            "params": dict(self._params),
        }
