"""Line readers for the ingest stage.

This module collects ordered text lines from standard input or files.
Any open or read failure aborts ingest without a partial result.
"""

from __future__ import annotations

from contextlib import ExitStack
import io
import sys
from typing import IO, Any, Iterable, Sequence

from core.config import ChewerConfig
from core.constants import STDIN_SOURCE_NAME
from core.errors import ChewerIngestError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def ingest_lines(
    paths: Sequence[str],
    config: ChewerConfig | None = None,
    stdin: IO[str] | IO[bytes] | None = None,
) -> list[str]:
    """Collect lines from standard input or files.

    Args:
        paths: Ordered file paths. Empty means read standard input.
        config: Runtime configuration; defaults are used when omitted.
        stdin: Stream read when ``paths`` is empty. Defaults to the raw bytes
            of ``sys.stdin`` so the configured encoding applies.

    Returns:
        Ordered lines without line terminators.

    Raises:
        ChewerIngestError: If a file cannot be opened or any source cannot be read.
    """
    resolved_config = config or ChewerConfig()
    if not paths:
        stream = stdin if stdin is not None else _process_stdin()
        lines = _read_stdin_lines(stream, resolved_config)
    else:
        lines = _read_file_lines(paths, resolved_config)
    _LOGGER.debug(
        "ingest_completed",
        source_count=len(paths) or 1,
        line_count=len(lines),
    )
    return lines


def _read_stdin_lines(stream: IO[str] | IO[bytes], config: ChewerConfig) -> list[str]:
    """Read all lines from a standard input stream.

    Args:
        stream: Text or binary stream.
        config: Runtime configuration.

    Returns:
        Lines read until end of stream.

    Raises:
        ChewerIngestError: If the stream cannot be read or decoded.
    """
    text_stream = _as_text_stream(stream, config.encoding)
    try:
        return _collect_lines(text_stream, config.max_line_length)
    except (OSError, ValueError) as error:
        raise ChewerIngestError(
            f"error reading from {STDIN_SOURCE_NAME}: {_describe_cause(error)}"
        ) from error
    finally:
        # The caller owns the binary stream, so the decoder must not close it.
        if text_stream is not stream:
            text_stream.detach()


def _read_file_lines(paths: Sequence[str], config: ChewerConfig) -> list[str]:
    """Read lines from files in the given order.

    Every opened handle is registered on one exit stack so all of them are
    closed when this function returns, on success or failure.

    Args:
        paths: Ordered file paths.
        config: Runtime configuration.

    Returns:
        Concatenated lines of all files.

    Raises:
        ChewerIngestError: If any file cannot be opened or read.
    """
    lines: list[str] = []
    with ExitStack() as stack:
        for path in paths:
            handle = _open_file(path, config.encoding)
            stack.enter_context(handle)
            try:
                lines.extend(_collect_lines(handle, config.max_line_length))
            except (OSError, ValueError) as error:
                raise ChewerIngestError(
                    f"error reading file {path}: {_describe_cause(error)}"
                ) from error
    return lines


def _open_file(path: str, encoding: str) -> IO[str]:
    """Open one input file for text reading.

    Raises:
        ChewerIngestError: If the file cannot be opened.
    """
    try:
        # Only "\n" terminates a line; a preceding "\r" is stripped later.
        return open(path, "r", encoding=encoding, newline="\n")
    except OSError as error:
        raise ChewerIngestError(
            f"error opening file {path}: {_describe_cause(error)}"
        ) from error


def _collect_lines(stream: Iterable[str], max_line_length: int) -> list[str]:
    """Split a text stream into terminator-free lines.

    Args:
        stream: Text stream iterated line by line.
        max_line_length: Longest accepted line, 0 for unlimited.

    Returns:
        Ordered lines, blank lines included.

    Raises:
        ValueError: If a line exceeds the maximum length.
    """
    lines: list[str] = []
    for line_number, raw_line in enumerate(stream, 1):
        line = _strip_terminator(raw_line)
        if max_line_length and len(line) > max_line_length:
            raise ValueError(
                f"line {line_number} exceeds maximum length of {max_line_length} characters"
            )
        lines.append(line)
    return lines


def _strip_terminator(raw_line: str) -> str:
    """Drop a trailing "\\n", then one trailing "\\r".

    The "\\r" is dropped even on a final line with no "\\n" after it.
    """
    if raw_line.endswith("\n"):
        raw_line = raw_line[:-1]
    if raw_line.endswith("\r"):
        raw_line = raw_line[:-1]
    return raw_line


def _process_stdin() -> IO[str] | IO[bytes]:
    """Return the byte stream behind sys.stdin, or sys.stdin when it has none."""
    return getattr(sys.stdin, "buffer", sys.stdin)


def _as_text_stream(stream: IO[str] | IO[bytes], encoding: str) -> Any:
    """Wrap binary streams in a decoder; text streams pass through."""
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return io.TextIOWrapper(stream, encoding=encoding, newline="\n")
    return stream


def _describe_cause(error: BaseException) -> str:
    """Render the underlying cause of an I/O failure."""
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)
