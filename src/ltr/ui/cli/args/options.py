"""Command line argument options."""

from dataclasses import dataclass, field
from typing import Literal, final

from ltr.features.aggregation import AggregationOptions

STDIN_OPERAND = "-"


@final
@dataclass(slots=True)
class ReportArgs:
    """Command line arguments for the ``chars``, ``words`` and ``sentences`` subcommands."""

    command: Literal["chars", "words", "sentences"]
    options: AggregationOptions
    operands: list[str] = field(default_factory=lambda: [STDIN_OPERAND])


__all__ = ["ReportArgs", "STDIN_OPERAND"]
