"""Runtime configuration model for Chewer.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_LINE_LENGTH,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import ChewerConfigError


@dataclass(frozen=True)
class ChewerConfig:
    """Validated runtime configuration.

    Attributes:
        encoding: Text encoding used to decode input files.
        max_line_length: Longest accepted line in characters, 0 for unlimited.
        log_level: Diagnostic logging threshold name.
    """

    encoding: str = DEFAULT_ENCODING
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "ChewerConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ChewerConfigError: If environment values are invalid.
        """
        encoding = _parse_encoding(os.getenv("CHEWER_ENCODING", DEFAULT_ENCODING))
        max_line_length = _parse_max_line_length(
            os.getenv("CHEWER_MAX_LINE_LENGTH", str(DEFAULT_MAX_LINE_LENGTH))
        )
        log_level = _parse_log_level(os.getenv("CHEWER_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(encoding=encoding, max_line_length=max_line_length, log_level=log_level)


def _parse_encoding(raw_value: str) -> str:
    """Validate the encoding environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized codec name.

    Raises:
        ChewerConfigError: If the codec is unknown.
    """
    try:
        return codecs.lookup(raw_value.strip()).name
    except LookupError as error:
        raise ChewerConfigError(
            f"Invalid CHEWER_ENCODING value: unknown codec '{raw_value}'. "
            "Set CHEWER_ENCODING to a codec name such as utf-8."
        ) from error


def _parse_max_line_length(raw_value: str) -> int:
    """Parse the maximum line length environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed non-negative integer.

    Raises:
        ChewerConfigError: If value is not a non-negative integer.
    """
    try:
        value = int(raw_value)
    except ValueError as error:
        raise ChewerConfigError(
            "Invalid CHEWER_MAX_LINE_LENGTH value: "
            f"expected integer, got '{raw_value}'. "
            "Set CHEWER_MAX_LINE_LENGTH to a numeric value."
        ) from error
    if value < 0:
        raise ChewerConfigError(
            f"Invalid CHEWER_MAX_LINE_LENGTH value: expected 0 or more, got {value}."
        )
    return value


def _parse_log_level(raw_value: str) -> str:
    """Validate the log level environment value."""
    normalized = raw_value.strip().lower()
    if normalized not in SUPPORTED_LOG_LEVELS:
        supported = ", ".join(SUPPORTED_LOG_LEVELS)
        raise ChewerConfigError(
            f"Invalid CHEWER_LOG_LEVEL value '{raw_value}'. Choose one of: {supported}."
        )
    return normalized
