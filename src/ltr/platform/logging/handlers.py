"""Rich console handler for structured report events.

Where: platform/logging/handlers.py
What: Render ``report_event`` log records with icons and compact metrics.
Why: Keep console diagnostics readable without touching report output.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text
from typing_extensions import override


class ReportRichHandler(RichHandler):
    """Custom Rich handler that styles report pipeline events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "report.invocation.start": ("🚀", "cyan"),
        "report.invocation.complete": ("✅", "green"),
        "report.invocation.error": ("❌", "red"),
        "report.source.complete": ("📄", "blue"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _render_report_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured report events with dedicated styling."""

        event = getattr(record, "report_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        details: list[str] = []

        if event == "report.invocation.start":
            _ = body.append("Report start")
            command = getattr(record, "command", None)
            if command:
                details.append(str(command))
            total_sources = getattr(record, "total_sources", None)
            if isinstance(total_sources, int):
                details.append(f"sources={total_sources}")
            locale = getattr(record, "locale", None)
            if locale:
                details.append(f"locale={locale}")
        elif event == "report.source.complete":
            sequence = getattr(record, "sequence", None)
            total_sources = getattr(record, "total_sources", None)
            if isinstance(sequence, int) and isinstance(total_sources, int):
                _ = body.append(f"[{sequence}/{total_sources}] ")
            _ = body.append("Source segmented")
            units = getattr(record, "units", None)
            if isinstance(units, int):
                details.append(f"units={units}")
            duration_ms = getattr(record, "duration_ms", None)
            if isinstance(duration_ms, (int, float)):
                details.append(f"{duration_ms:.2f} ms")
        elif event == "report.invocation.complete":
            _ = body.append("Report complete")
            total_sources = getattr(record, "total_sources", None)
            if isinstance(total_sources, int):
                details.append(f"sources={total_sources}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                details.append(f"duration={duration:.2f}s")
        else:
            _ = body.append("Report failed")
            error = getattr(record, "error_message", None)
            if error:
                details.append(str(error))

        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for report events."""

        event_text = self._render_report_event(record)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["ReportRichHandler"]
