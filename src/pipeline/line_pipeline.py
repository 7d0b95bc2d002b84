"""Single-pass line pipeline.

This module runs ingest, transform, and emit strictly in sequence.
Any failure before emit becomes one failure outcome.
"""

from __future__ import annotations

from typing import IO, Sequence, TextIO

from core.config import ChewerConfig
from core.constants import EXIT_FAILURE, EXIT_SUCCESS
from core.errors import ChewerIngestError
from core.logging_config import configure_logging
from core.types import TransformOutcome
from emit.stream_writer import spit
from ingest.line_reader import ingest_lines
from transforms.base import LineTransform, chew


def run_line_pipeline(
    paths: Sequence[str],
    transform: LineTransform,
    config: ChewerConfig | None = None,
    stdin: IO[str] | IO[bytes] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> TransformOutcome:
    """Ingest lines, transform them once, and emit the outcome.

    Args:
        paths: Input files, or empty to read standard input.
        transform: Transform capability applied to all ingested lines.
        config: Runtime configuration; defaults are used when omitted.
        stdin: Optional standard input override.
        stdout: Optional standard output override.
        stderr: Optional standard error override.

    Returns:
        The emitted outcome.
    """
    resolved_config = config or ChewerConfig()
    configure_logging(resolved_config.log_level)
    outcome = _ingest_and_chew(paths, transform, resolved_config, stdin)
    spit(outcome, stdout=stdout, stderr=stderr)
    return outcome


def exit_code_for(outcome: TransformOutcome) -> int:
    """Map an outcome onto a process exit code."""
    return EXIT_SUCCESS if outcome.succeeded else EXIT_FAILURE


def _ingest_and_chew(
    paths: Sequence[str],
    transform: LineTransform,
    config: ChewerConfig,
    stdin: IO[str] | IO[bytes] | None,
) -> TransformOutcome:
    try:
        lines = ingest_lines(paths, config, stdin=stdin)
    except ChewerIngestError as error:
        return TransformOutcome.failure(str(error))
    return chew(lines, transform)
