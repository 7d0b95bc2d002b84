"""Outcome writers for the emit stage.

Successful outcomes go to standard output one line per entry.
Failures go to standard error as a single marked line.
"""

from __future__ import annotations

import sys
from typing import TextIO

from core.constants import ERROR_MARKER
from core.logging_config import get_logger
from core.types import TransformOutcome

_LOGGER = get_logger(__name__)


def spit(
    outcome: TransformOutcome,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """Write an outcome to the output streams.

    Args:
        outcome: Transform outcome to render.
        stdout: Result stream, ``sys.stdout`` by default.
        stderr: Failure stream, ``sys.stderr`` by default.
    """
    if outcome.lines is None:
        error_stream = stderr if stderr is not None else sys.stderr
        error_stream.write(format_error_line(outcome.error or ""))
        return
    output_stream = stdout if stdout is not None else sys.stdout
    for line in outcome.lines:
        output_stream.write(line + "\n")
    _LOGGER.debug("emit_completed", line_count=len(outcome.lines))


def format_error_line(description: str) -> str:
    """Render the single standard error line for a failure.

    Line breaks inside the description are folded into spaces.
    """
    single_line = " ".join(description.splitlines())
    return f"{ERROR_MARKER} {single_line}\n"
