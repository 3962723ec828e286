"""src/ltr/ui/cli/commands/sources.py
What: Read command operands into decoded text, one string per operand.
Why: Keep file and standard input handling out of the report core.
"""

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from ltr.platform.logging import logger
from ltr.ui.cli.args.options import STDIN_OPERAND


def _read_stream(stream: TextIO) -> str:
    """Read a text stream, decoding its underlying bytes as UTF-8 when exposed."""

    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        return stream.read()
    return buffer.read().decode("utf-8")


def read_sources(operands: Sequence[str], stdin: TextIO | None = None) -> list[str]:
    """Read every operand as UTF-8 text, in operand order.

    ``-`` reads standard input. Standard input is consumed once; later
    ``-`` operands read whatever remains, which is usually nothing.

    Raises:
        OSError: If a file cannot be read.
        UnicodeDecodeError: If a file or standard input is not valid UTF-8.
    """
    stream = stdin if stdin is not None else sys.stdin
    texts: list[str] = []
    for operand in operands:
        if operand == STDIN_OPERAND:
            logger.debug("Reading standard input")
            texts.append(_read_stream(stream))
            continue
        path = Path(operand)
        logger.debug("Reading %s", path)
        texts.append(path.read_text(encoding="utf-8"))
    return texts


__all__ = ["read_sources"]
