"""
CLI: pretty print a stream of JSON logs read from stdin.
Usage:
  tail -f app.log | prettylog
  tail -f app.log | prettylog --color-scheme solarized
"""
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from .config import load_config
from .errors import UnknownColorSchemeError
from .formatter import format_line
from .schemes import Palette, get_color_scheme, list_color_schemes

logger = logging.getLogger(__name__)

_RED = "\x1b[31m"
_RESET = "\x1b[39m"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prettylog",
        description="Pretty print a stream of json logs.",
    )
    parser.add_argument(
        "--color-scheme",
        type=str,
        default=None,
        help=f"Color scheme to use [{', '.join(list_color_schemes())}] (default: from config, else ocean).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug messages to stderr.",
    )
    return parser


def _discard_stdout(stdout: TextIO) -> None:
    """Point the stdout fd at devnull so the interpreter's exit-time flush does not hit the closed pipe."""
    if stdout is not sys.stdout:
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def run(palette: Palette, stdin: TextIO, stdout: TextIO) -> int:
    """Read lines until end of input, writing each one formatted. Returns the number of lines processed."""
    count = 0
    while True:
        try:
            line = stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Read failed, treating as end of input: %s", e)
            break
        if not line:
            break
        try:
            stdout.write(format_line(line, palette).strip() + "\n")
            stdout.flush()
        except BrokenPipeError:
            logger.debug("Output closed after %s lines", count)
            _discard_stdout(stdout)
            break
        count += 1
    return count


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    args = _build_parser().parse_args(argv)
    config = load_config(args.config)
    level = str(config.get("log_level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(level), int):
        print(f"{_RED}Invalid log_level in config: {config.get('log_level')}{_RESET}", file=stderr)
        return 1
    if args.verbose:
        level = "DEBUG"
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=stderr)

    name = args.color_scheme if args.color_scheme is not None else config.get("color_scheme")
    try:
        palette = get_color_scheme(name)
    except UnknownColorSchemeError as e:
        print(f"{_RED}{e}{_RESET}", file=stderr)
        print(f"Available color schemes: {', '.join(e.available)}", file=stderr)
        return 1

    logger.debug("Using color scheme %s", name)
    count = run(palette, stdin, stdout)
    logger.debug("End of input after %s lines", count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
