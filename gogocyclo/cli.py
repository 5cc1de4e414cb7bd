"""
Command-line interface for gogocyclo.

Reads gocyclo output from stdin, drops the functions listed in the
configuration and prints whatever is left. The exit status tells CI
what happened:

    0  nothing left to report
    1  unresolved complex functions were printed
    2  usage error
    3  configuration or input could not be parsed
"""

import argparse
import os
import sys
from typing import IO, Iterator, List, Optional

from gogocyclo import __version__
from gogocyclo.config import DEFAULT_CONFIG_PATH, Configuration, load_config
from gogocyclo.core.engine import FilterEngine
from gogocyclo.core.statistics import Statistic, parse_line
from gogocyclo.errors import GoGoCycloError, InputError, MalformedRecord, UsageError
from gogocyclo.formatters import FORMATS, get_formatter
from gogocyclo.utils import setup_logging


EXIT_OK = 0
EXIT_FOUND = 1
EXIT_USAGE = 2
EXIT_FATAL = 3
EXIT_INTERRUPTED = 130

DESCRIPTION = """\
Ignore cyclomatic analysis results from gocyclo.

Intended to be used as a step in CI to exclude functions that are known
and expected to have high cyclomatic complexity (e.g. functions with big
switches). Reads gocyclo output from stdin."""

EPILOG = """\
Example:
  gocyclo -over 20 $GOPATH/src/database | gogocyclo -config gogocyclo.ini

Configuration file:
  gogocyclo reads the gitconfig section named "gogocyclo". It holds a
  multi-value key called "ignores" in the following format:

    `Package`.Func

  where "Package" and "Func" are the second and third column of gocyclo
  output respectively. "Package" matches any package starting with it.
  "Func" also accepts the wildcard character "*", which matches functions
  of any name.

Exit status:
  0 nothing to report, 1 functions reported, 2 usage error,
  3 bad configuration or input
"""


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting."""

    def error(self, message: str):
        raise UsageError(message)


def create_parser() -> ArgumentParser:
    """Create the argument parser."""
    parser = ArgumentParser(
        prog="gogocyclo",
        usage="%(prog)s [flags]",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-config", "--config",
        metavar="PATH",
        default=DEFAULT_CONFIG_PATH,
        help=f"read configuration from PATH (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "-format", "--format",
        choices=sorted(FORMATS),
        default="text",
        help="output format (default: text)",
    )
    parser.add_argument(
        "-v", "-verbose", "--verbose",
        action="store_true",
        help="log ignored functions to stderr",
    )
    parser.add_argument(
        "-version", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-h", "-help", "--help",
        action="store_true",
        dest="help",
        help="show this help and exit",
    )

    return parser


def usage(parser: argparse.ArgumentParser, message: Optional[str] = None) -> int:
    """Print usage to stderr and return the usage exit status."""
    if message:
        print(f"gogocyclo: {message}", file=sys.stderr)
    print(parser.format_help(), file=sys.stderr)
    return EXIT_USAGE


def read_lines(stream: IO[str]) -> Iterator[str]:
    """Yield lines from a stream without their line terminator."""
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def read_statistics(stream: IO[str]) -> List[Statistic]:
    """
    Parse every line of a stream.

    Raises MalformedRecord, tagged with the 1-based line number, on the
    first line that does not parse, and InputError if the stream itself
    cannot be read or decoded.
    """
    statistics = []
    lineno = 0
    try:
        for lineno, line in enumerate(read_lines(stream), start=1):
            try:
                statistics.append(parse_line(line))
            except MalformedRecord as e:
                e.lineno = lineno
                raise
    except (UnicodeDecodeError, OSError) as e:
        raise InputError(f"cannot read input after line {lineno}: {e}") from e
    return statistics


def run(config: Configuration, stream: IO[str], output_format: str = "text") -> int:
    """Filter one report and print what is left. Returns the exit status."""
    statistics = read_statistics(stream)
    result = FilterEngine(config).filter(statistics)

    formatter = get_formatter(output_format)
    output = formatter.format_result(result)
    if output:
        print(output)

    return EXIT_OK if result.passed else EXIT_FOUND


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        return usage(parser, str(e))

    if args.help:
        return usage(parser)

    logger = setup_logging(args.verbose)

    try:
        config = load_config(args.config)
        return run(config, sys.stdin, args.format)

    except KeyboardInterrupt:
        logger.error("interrupted")
        return EXIT_INTERRUPTED
    except GoGoCycloError as e:
        logger.error("%s", e)
        if os.environ.get("DEBUG"):
            raise
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
