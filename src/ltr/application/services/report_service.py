"""Summary: Report orchestration across input sources.
Why: Run each source's segment-then-aggregate pipeline and join in operand order.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, final

from ltr.config.config import MAX_WORKERS_DEFAULT
from ltr.features.aggregation import AggregationOptions, Aggregator
from ltr.features.segmentation import Segmenter, UnitKind
from ltr.platform.logging import logger
from ltr.platform.unicode import Collator, resolve_locale

REPORT_SEPARATOR = "\n"


@final
@dataclass(frozen=True, slots=True)
class ReportRequest:
    """Inputs for one invocation: a command, its options, and source texts."""

    command: str
    options: AggregationOptions | Mapping[str, Any] = field(default_factory=AggregationOptions)
    sources: Sequence[str] = ()


@final
class ReportService:
    """Build reports for every source of a request."""

    def __init__(
        self,
        *,
        default_locale: str | None = None,
        max_workers: int = MAX_WORKERS_DEFAULT,
        executor_factory: Callable[[int], ThreadPoolExecutor] | None = None,
    ) -> None:
        self._default_locale: str | None = default_locale
        self._max_workers: int = max(1, max_workers)
        self._executor_factory: Callable[[int], ThreadPoolExecutor] = executor_factory or (
            lambda workers: ThreadPoolExecutor(max_workers=workers, thread_name_prefix="ltr-source")
        )

    def build_report(self, request: ReportRequest) -> str:
        """Return the reports for all sources joined in source order.

        The locale is resolved once and shared by segmentation and collation.
        Any failure aborts the whole invocation.

        Raises:
            InvalidUnitKind: If the command names no unit kind.
            InvalidLocale: If the locale cannot be resolved.
            UnknownOption: If an option name is not recognized.
        """
        kind = UnitKind.from_command(request.command)
        options = (
            request.options
            if isinstance(request.options, AggregationOptions)
            else AggregationOptions.from_mapping(request.options)
        )
        locale = resolve_locale(options.locale, default=self._default_locale)
        segmenter = Segmenter(kind, locale)
        aggregator = Aggregator(
            options,
            Collator.for_locale(locale) if options.sorts_lexically else None,
        )

        sources = tuple(request.sources)
        total = len(sources)
        started = time.perf_counter()
        logger.debug(
            "Report start",
            extra={
                "report_event": "report.invocation.start",
                "command": kind.command,
                "total_sources": total,
                "locale": locale.tag,
            },
        )

        def run(sequence: int, text: str) -> str:
            source_started = time.perf_counter()
            units = segmenter(text)
            report = aggregator(units)
            logger.debug(
                "Source segmented",
                extra={
                    "report_event": "report.source.complete",
                    "sequence": sequence,
                    "total_sources": total,
                    "units": len(units),
                    "duration_ms": (time.perf_counter() - source_started) * 1000,
                },
            )
            return report

        try:
            reports = self._run_all(run, sources)
        except Exception as exc:
            logger.debug(
                "Report failed",
                extra={"report_event": "report.invocation.error", "error_message": str(exc)},
            )
            raise

        logger.debug(
            "Report complete",
            extra={
                "report_event": "report.invocation.complete",
                "total_sources": total,
                "duration_seconds": time.perf_counter() - started,
            },
        )
        return REPORT_SEPARATOR.join(reports)

    def _run_all(self, run: Callable[[int, str], str], sources: tuple[str, ...]) -> list[str]:
        """Run ``run`` for every source; results are ordered by source index."""

        if len(sources) <= 1:
            return [run(sequence, text) for sequence, text in enumerate(sources, start=1)]

        workers = min(self._max_workers, len(sources))
        with self._executor_factory(workers) as executor:
            futures: list[Future[str]] = [
                executor.submit(run, sequence, text)
                for sequence, text in enumerate(sources, start=1)
            ]
            try:
                return [future.result() for future in futures]
            except Exception:
                for future in futures:
                    _ = future.cancel()
                raise


def build_report(
    command: str,
    options: AggregationOptions | Mapping[str, Any] | None = None,
    sources: Sequence[str] = (),
) -> str:
    """Build the joined report for ``sources`` with default service settings."""

    request = ReportRequest(
        command=command,
        options=options if options is not None else AggregationOptions(),
        sources=sources,
    )
    return ReportService().build_report(request)


__all__ = ["REPORT_SEPARATOR", "ReportRequest", "ReportService", "build_report"]
