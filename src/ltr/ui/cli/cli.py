"""Command line interface for ltr."""

import sys
from typing import final

from ltr.platform.logging import logger
from ltr.shared.errors import LtrError
from ltr.ui.cli.args import ArgumentParser
from ltr.ui.cli.commands import ReportCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            _ = ReportCommand(args).execute()

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except LtrError as e:
            logger.error("%s", e)
            sys.exit(1)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read input: %s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
