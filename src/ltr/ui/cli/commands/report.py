"""src/ltr/ui/cli/commands/report.py
What: Execute a unit command from parsed arguments to displayed report.
Why: Wire source reading, the report service, and display together.
"""

from typing import TextIO, final

from ltr.application.services import ReportRequest, ReportService
from ltr.config import settings
from ltr.ui.cli.args.options import ReportArgs
from ltr.ui.cli.commands.sources import read_sources
from ltr.ui.cli.display.report import ReportDisplay


@final
class ReportCommand:
    """Run a ``chars``, ``words`` or ``sentences`` command."""

    args: ReportArgs
    service: ReportService
    display: ReportDisplay

    def __init__(
        self,
        args: ReportArgs,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        """Initialize the command.

        Args:
            args: Command line arguments.
            stdin: Stream read for the ``-`` operand (defaults to ``sys.stdin``).
            stdout: Stream the report is written to (defaults to ``sys.stdout``).
        """
        self.args = args
        self._stdin = stdin
        self.service = ReportService(
            default_locale=settings.default_locale(),
            max_workers=settings.max_workers(),
        )
        self.display = ReportDisplay(stdout)

    def execute(self) -> str:
        """Build and display the report.

        Returns:
            str: The report that was displayed.
        """
        sources = read_sources(self.args.operands, stdin=self._stdin)
        report = self.service.build_report(
            ReportRequest(
                command=self.args.command,
                options=self.args.options,
                sources=sources,
            )
        )
        self.display.show_report(report)
        return report


__all__ = ["ReportCommand"]
