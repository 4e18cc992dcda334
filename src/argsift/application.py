#!/usr/bin/env python3
"""Command-line front end for argsift."""

import json
import logging
import sys
from typing import Optional

from .argument_processor import ArgumentProcessor
from .config_manager import ConfigManager
from .config_result import ConfigResult, split_names
from .environment_helper import EnvironmentHelper, debug_log
from .exceptions import ArgsiftError
from .modes import DEFAULT_MODE, Mode
from .parse_result import ParseResult
from .parser import Parser
from .types import ArgsList, ExitCode

OWN_PARAMS = ("m", "mode", "P", "params")


def print_help() -> None:
    """Print concise help message about argsift functionality."""
    help_text = """argsift - command-line argument classifier
Usage:
  argsift -- -v --name Bob file.txt                 # Classify with defaults
  argsift -m prefer_param -- --name Bob             # Unregistered options take values
  argsift -m multiflag -P f -- -xvf archive.tar     # Expand -xvf, f takes a value
  argsift --json -- --size=3 -2.5                   # Report as JSON

  Modes: prefer_flag, prefer_param, no_split, multiflag (comma separated)
  Config file: $XDG_CONFIG_HOME/argsift.conf or $HOME/.config/argsift.conf
  Config format: KEY=VALUE (e.g., "mode=multiflag", "params=o,output")
  Supports ARGSIFT_MODE=... default mode and ARGSIFT_DEBUG=1 tracing
"""
    print(help_text)


def format_result(result: ParseResult) -> str:
    """Render a ParseResult as one line per classified item."""
    lines = [f"positional[{i}]: {value}" for i, value in enumerate(result)]
    for name, count in result.flags.items():
        lines.append(f"flag: {name}" + (f" (x{count})" if count > 1 else ""))
    for name, value in result.params.items():
        lines.append(f"param: {name}={value}")
    return "\n".join(lines)


class Application:
    """Main application orchestrator."""

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
    ):
        self.config_manager = config_manager or ConfigManager()

    def run(self, args: ArgsList) -> ExitCode:
        """Run the application with the given arguments."""
        own_args, rest = ArgumentProcessor.split_at_separator(args)

        # Handle help request
        if not args or "--help" in own_args:
            print_help()
            return 0

        # Without a separator every argument is a token to classify
        if not rest:
            own_args, tokens = [], own_args
        else:
            tokens = rest[1:]

        try:
            options = Parser(OWN_PARAMS).parse(own_args)
            config = self._load_config()
            parser = Parser(
                self._resolve_params(options, config),
                self._resolve_mode(options, config),
            )
            result = parser.parse(tokens)
        except ArgsiftError as e:
            logging.error(str(e))
            return 1

        if options.has_flag("json"):
            print(json.dumps(result.to_dict(), indent=2))
        else:
            print(format_result(result))
        return 0

    def _load_config(self) -> ConfigResult:
        """Load argsift.conf if one exists."""
        config_file = self.config_manager.find_config_file()
        if not config_file:
            debug_log("config: no argsift.conf found")
            return ConfigResult()
        debug_log(f"config: loading {config_file}")
        return self.config_manager.load_config(config_file)

    @staticmethod
    def _resolve_mode(options: ParseResult, config: ConfigResult) -> Mode:
        """Command line mode wins over the config file, which wins over ARGSIFT_MODE."""
        cli_mode = options.get(["m", "mode"])
        if cli_mode is not None:
            return Mode.from_names(cli_mode)
        if config.mode is not None:
            return config.mode
        env_mode = EnvironmentHelper.get_default_mode_names()
        if env_mode:
            return Mode.from_names(env_mode)
        return DEFAULT_MODE

    @staticmethod
    def _resolve_params(options: ParseResult, config: ConfigResult) -> list[str]:
        """Registered names from the config file plus those given with -P."""
        return config.params + split_names(options.get(["P", "params"], ""))


def main() -> ExitCode:
    """Main entry point."""
    try:
        app = Application()
        return app.run(sys.argv[1:])
    except ArgsiftError as e:
        logging.error(str(e))
        return 1
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        return 1
