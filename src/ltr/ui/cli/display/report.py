"""Report display functionality."""

import sys
from typing import TextIO, final


@final
class ReportDisplay:
    """Write finished reports to a text stream.

    Reports are written verbatim; tab separators in count output must not
    be expanded, so no console rendering is applied.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO | None = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def show_report(self, report: str) -> None:
        _ = self.stream.write(report + "\n")
        self.stream.flush()
