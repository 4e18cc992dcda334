"""Parser front end for argsift."""

from typing import Iterable, Optional, Sequence

from .argument_processor import ArgumentProcessor
from .environment_helper import debug_log
from .modes import DEFAULT_MODE, Mode
from .parse_result import ParseResult
from .token_helper import TokenHelper
from .types import ArgsList


class Parser:
    """Holds registered parameter names and the mode, and classifies tokens."""

    def __init__(
        self,
        params: Optional[Iterable[str]] = None,
        mode: int = DEFAULT_MODE,
    ):
        self.mode = Mode.validate(mode)
        self._registered: set[str] = set()
        if params:
            self.add_params(params)

    @property
    def registered_params(self) -> frozenset[str]:
        """Bare names that take the following token as their value."""
        return frozenset(self._registered)

    def add_param(self, name: str) -> None:
        """Register a parameter name; leading dashes or slashes are ignored."""
        self._registered.add(TokenHelper.strip_marker(name))

    def add_params(self, names: Iterable[str]) -> None:
        """Register several parameter names."""
        if isinstance(names, str):
            names = [names]
        for name in names:
            self.add_param(name)

    def parse(
        self,
        args: Sequence[Optional[str]],
        mode: Optional[int] = None,
        argc: Optional[int] = None,
    ) -> ParseResult:
        """
        Classify *args* and return a new ParseResult.

        Args:
            args: Tokens to classify, typically ``sys.argv[1:]``
            mode: Mode for this call; defaults to the parser's mode
            argc: Number of tokens to use; in either case the sequence ends
                at its first ``None`` entry

        Raises:
            ConflictingModeError: If *mode* sets both unregistered-option preferences
        """
        mode = self.mode if mode is None else Mode.validate(mode)
        tokens = self._materialize(args, argc)
        debug_log(
            f"parse: {len(tokens)} tokens, mode={mode!r}, "
            f"registered={sorted(self._registered)}"
        )
        return ArgumentProcessor.classify(tokens, self.registered_params, mode)

    @staticmethod
    def _materialize(args: Sequence[Optional[str]], argc: Optional[int]) -> ArgsList:
        """Copy the tokens to classify; *argc* limits the count and None terminates."""
        if argc is not None:
            args = args[: max(argc, 0)]

        tokens: ArgsList = []
        for arg in args:
            if arg is None:
                break
            tokens.append(arg)
        return tokens


def parse(
    args: Sequence[Optional[str]],
    params: Optional[Iterable[str]] = None,
    mode: int = DEFAULT_MODE,
) -> ParseResult:
    """Classify *args* with a throwaway Parser."""
    return Parser(params, mode).parse(args)
