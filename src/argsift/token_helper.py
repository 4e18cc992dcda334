"""Token inspection helpers for argsift."""

import re

# Decimal literal as accepted by a floating point text read: optional sign,
# digits with an optional fraction (or a bare fraction), optional exponent.
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

OPTION_MARKERS = ("-", "/")


class TokenHelper:
    """Utility class for token inspection."""

    @staticmethod
    def strip_marker(name: str) -> str:
        """
        Remove the leading option marker from *name*.

        Leading dashes are removed; if the name does not start with a dash,
        leading slashes are removed instead. A name made only of marker
        characters yields the empty string.
        """
        if name.startswith("-"):
            return name.lstrip("-")
        return name.lstrip("/")

    @staticmethod
    def marker_length(token: str, bare_name: str) -> int:
        """Number of marker characters stripped from *token* to get *bare_name*."""
        return len(token) - len(bare_name)

    @staticmethod
    def is_number(token: str) -> bool:
        """Check if the whole token reads as a decimal floating point literal."""
        return NUMBER_PATTERN.fullmatch(token) is not None

    @staticmethod
    def is_option(token: str) -> bool:
        """
        Check if *token* starts an option.

        Numeric literals such as ``-3.14`` are values even though they begin
        with a dash; the numeric test comes first.
        """
        if not token or TokenHelper.is_number(token):
            return False
        return token[0] in OPTION_MARKERS
