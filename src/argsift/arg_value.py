"""Typed conversion of classified argument text for argsift."""

from typing import Any, Callable, Optional

from .environment_helper import FALSY_VALUES, TRUTHY_VALUES
from .exceptions import ConversionError, MissingValueError
from .types import ConversionTuple


def parse_bool(raw: str) -> bool:
    """Read a boolean from its textual form (1/0, true/false, yes/no, on/off)."""
    value = raw.strip().lower()
    if value in TRUTHY_VALUES:
        return True
    if value in FALSY_VALUES:
        return False
    raise ValueError(f"not a boolean literal: {raw!r}")


def format_default(value: Any) -> str:
    """Render a default value the way it would have been typed on the command line."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return repr(value)
    return str(value)


class ArgValue:
    """
    Conversion source for a single argument.

    Holds either the raw text of a positional value or parameter, or an
    explicit *absent* marker when the lookup found nothing and no default was
    given. The absent state is queryable through ``failed`` independently of
    any conversion, so a missing value never reads as zero or empty.
    """

    __slots__ = ("_raw", "_key")

    def __init__(self, raw: Optional[str] = None, key: str | int | None = None):
        self._raw = raw
        self._key = key

    @classmethod
    def missing(cls, key: str | int | None = None) -> "ArgValue":
        """Create a value in the absent state."""
        return cls(None, key)

    @classmethod
    def from_default(cls, default: Any, key: str | int | None = None) -> "ArgValue":
        """Create a value holding the textual form of *default*."""
        return cls(format_default(default), key)

    @property
    def failed(self) -> bool:
        """True when the lookup found no value."""
        return self._raw is None

    @property
    def key(self) -> str | int | None:
        return self._key

    def __bool__(self) -> bool:
        return not self.failed

    @property
    def raw(self) -> str:
        """Raw underlying text; empty when absent."""
        return self._raw if self._raw is not None else ""

    def __str__(self) -> str:
        return self.raw

    def __repr__(self) -> str:
        if self.failed:
            return f"ArgValue(<absent>, key={self._key!r})"
        return f"ArgValue({self._raw!r}, key={self._key!r})"

    def __eq__(self, other):
        if isinstance(other, ArgValue):
            return self._raw == other._raw
        if isinstance(other, str):
            return self._raw == other
        return NotImplemented

    def __hash__(self):
        return hash(self._raw)

    def as_(self, target: Callable[[str], Any] = str) -> Any:
        """
        Convert to *target*.

        *target* is any callable building a value from text (``int``,
        ``float``, ``pathlib.Path``, ``decimal.Decimal``...); ``bool`` is read
        with parse_bool.

        Raises:
            MissingValueError: If the value is absent
            ConversionError: If the text cannot be converted
        """
        if self._raw is None:
            raise MissingValueError(self._key)
        if target is str:
            return self._raw

        converter = parse_bool if target is bool else target
        try:
            return converter(self._raw)
        except (ValueError, TypeError, ArithmeticError) as e:
            raise ConversionError(
                self._raw, getattr(target, "__name__", repr(target)), str(e)
            ) from e

    def try_as(self, target: Callable[[str], Any] = str) -> ConversionTuple:
        """Convert to *target* without raising; returns ``(ok, value)``."""
        try:
            return True, self.as_(target)
        except (MissingValueError, ConversionError):
            return False, None

    def as_or(self, target: Callable[[str], Any], default: Any) -> Any:
        """Convert to *target*, returning *default* when absent or unconvertible."""
        ok, value = self.try_as(target)
        return value if ok else default
