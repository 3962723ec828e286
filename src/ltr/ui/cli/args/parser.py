"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from typing import final

import ltr
from ltr.config.config import Config
from ltr.features.aggregation import AggregationOptions
from ltr.features.segmentation import UnitKind
from ltr.platform.logging import DEFAULT_LOG_FILE, setup_logger
from ltr.ui.cli.args.options import STDIN_OPERAND, ReportArgs

_COMMAND_HELP: dict[str, str] = {
    UnitKind.GRAPHEME.command: "Report on user-perceived characters (grapheme clusters)",
    UnitKind.WORD.command: "Report on words",
    UnitKind.SENTENCE.command: "Report on sentences",
}

_EPILOG = """\
Operands are one or more files provided by file path.
Using '-' (dash) as an operand reads from the standard input (STDIN).
When no operands are provided, input is read from STDIN.

Output is provided to the standard output (STDOUT).

Examples:
  ltr words -i -u notes.txt
  ltr words --count --sort --reverse notes.txt
  echo "Café cafe" | ltr words -I -i -c
  ltr sentences --locale=de-DE brief.txt
"""


def package_version() -> str:
    """Return the installed distribution version."""

    try:
        return version("ltr")
    except PackageNotFoundError:
        return ltr.__version__


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="ltr",
            description="ltr - segment text into characters, words, or sentences and report on them.",
            epilog=_EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "-v",
            "--version",
            action="version",
            version=f"%(prog)s {package_version()}",
            help="Output program version",
        )

        shared = ArgumentParser._create_shared_parser()
        subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")
        for command in UnitKind.commands():
            _ = subparsers.add_parser(
                command,
                parents=[shared],
                help=_COMMAND_HELP[command],
                epilog=_EPILOG,
                formatter_class=argparse.RawDescriptionHelpFormatter,
            )

        return parser

    @staticmethod
    def _create_shared_parser() -> argparse.ArgumentParser:
        """Options accepted by every unit command."""

        shared = argparse.ArgumentParser(add_help=False)
        _ = shared.add_argument(
            "operands",
            nargs="*",
            metavar="FILE",
            help="Files to read; '-' reads standard input (default)",
        )
        _ = shared.add_argument(
            "-u",
            "--unique",
            action="store_true",
            help="Output each unit once, keeping the first occurrence",
        )
        _ = shared.add_argument(
            "-i",
            "--ignore-case",
            action="store_true",
            help="Lowercase units before comparing them",
        )
        _ = shared.add_argument(
            "-I",
            "--ignore-accents",
            action="store_true",
            help="Strip diacritical marks from units",
        )
        _ = shared.add_argument(
            "-c",
            "--count",
            action="store_true",
            help="Output each distinct unit with its number of occurrences",
        )
        _ = shared.add_argument(
            "-s",
            "--sort",
            action="store_true",
            help="Sort units by collation order, or by descending count with --count",
        )
        _ = shared.add_argument(
            "-r",
            "--reverse",
            action="store_true",
            help="Reverse the final output order",
        )
        _ = shared.add_argument(
            "-l",
            "--locale",
            type=str,
            metavar="LOCALE",
            help="Locale for segmentation and sorting (e.g. en-US); defaults to the environment",
        )
        _ = shared.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information on standard error",
        )
        _ = shared.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all diagnostics except errors",
        )
        return shared

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> ReportArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            ReportArgs: Processed command line arguments.

        Raises:
            SystemExit: On usage errors, ``--help`` or ``--version``.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        configuration = Config.load()
        log_file_path = configuration.log_file or (
            DEFAULT_LOG_FILE if configuration.log_to_file else None
        )
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        options = AggregationOptions(
            unique=parsed_args.unique,
            ignore_case=parsed_args.ignore_case,
            ignore_accents=parsed_args.ignore_accents,
            count=parsed_args.count,
            sort=parsed_args.sort,
            reverse=parsed_args.reverse,
            locale=parsed_args.locale,
        )

        return ReportArgs(
            command=parsed_args.command,
            options=options,
            operands=list(parsed_args.operands) or [STDIN_OPERAND],
        )
