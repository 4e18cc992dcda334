"""Argument classification functionality for argsift."""

from collections import Counter
from typing import AbstractSet, Sequence

from .environment_helper import debug_log
from .modes import DEFAULT_MODE, Mode
from .parse_result import ParseResult
from .token_helper import TokenHelper
from .types import ArgsList, ParamMap, SplitResult


class ArgumentProcessor:
    """Handles argument splitting and classification."""

    @staticmethod
    def split_at_separator(args: ArgsList) -> SplitResult:
        """Split arguments at '--' separator."""
        if "--" in args:
            idx = args.index("--")
            return args[:idx], args[idx:]
        return args, []

    @staticmethod
    def classify(
        args: Sequence[str],
        registered: AbstractSet[str] = frozenset(),
        mode: int = DEFAULT_MODE,
    ) -> ParseResult:
        """
        Split arguments into positionals, flags and params.

        * `positionals` – tokens that are not options, in input order. A
          numeric literal such as ``-2.5`` is a positional even with its dash.
        * `flags` – bare option names with no value; repeats are counted.
        * `params` – bare option names with a value, either joined with ``=``
          or taken from the following token when the name is in *registered*
          (or the mode prefers params for unregistered names). A repeated
          name keeps its last value.

        One left-to-right pass with one token of lookahead; nothing raises.
        """
        mode = Mode.validate(mode)
        positionals: ArgsList = []
        flags: Counter = Counter()
        params: ParamMap = {}

        i = 0
        while i < len(args):
            arg = args[i]

            # Positional argument – keep as-is.
            if not TokenHelper.is_option(arg):
                debug_log(f"classify: '{arg}' -> positional")
                positionals.append(arg)
                i += 1
                continue

            name = TokenHelper.strip_marker(arg)

            # Single token parameter: --name=value
            if mode.splits_on_equalsign() and "=" in name:
                key, value = name.split("=", 1)
                debug_log(f"classify: '{arg}' -> param {key}={value}")
                params[key] = value
                i += 1
                continue

            # Unregistered single dash option expands to one flag per character
            if (
                TokenHelper.marker_length(arg, name) == 1
                and mode.expands_multiflag()
                and name not in registered
            ):
                keep_param = ""
                if name and name[-1] in registered:
                    keep_param = name[-1]
                    name = name[:-1]

                for char in name:
                    flags[char] += 1
                debug_log(
                    f"classify: '{arg}' -> multiflag {list(name)}"
                    + (f", param '{keep_param}'" if keep_param else "")
                )

                if not keep_param:
                    i += 1
                    continue
                name = keep_param

            # Option without a following value is a flag.
            if i + 1 == len(args) or TokenHelper.is_option(args[i + 1]):
                debug_log(f"classify: '{arg}' -> flag '{name}'")
                flags[name] += 1
                i += 1
                continue

            # Option followed by a value: registered names (or every name when
            # params are preferred) consume it, otherwise it stays positional.
            if name in registered or mode.prefers_param():
                debug_log(f"classify: '{arg}' -> param {name}={args[i + 1]}")
                params[name] = args[i + 1]
                i += 2
            else:
                debug_log(f"classify: '{arg}' -> flag '{name}'")
                flags[name] += 1
                i += 1

        return ParseResult(positionals, flags, params)
