"""Shared typed models.

This module defines immutable data models passed between the ingest,
transform, and emit stages to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class TransformOutcome:
    """Result of one transform invocation.

    Exactly one of ``lines`` and ``error`` is set.

    Attributes:
        lines: Transformed line sequence on success.
        error: Human-readable failure description on failure.
    """

    lines: tuple[str, ...] | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if (self.lines is None) == (self.error is None):
            raise ValueError("TransformOutcome requires exactly one of lines or error")

    @classmethod
    def success(cls, lines: Iterable[str]) -> "TransformOutcome":
        """Build a successful outcome from a line sequence."""
        return cls(lines=tuple(lines))

    @classmethod
    def failure(cls, description: str) -> "TransformOutcome":
        """Build a failed outcome carrying a description."""
        return cls(error=description)

    @property
    def succeeded(self) -> bool:
        """Return whether the outcome carries a line sequence."""
        return self.lines is not None
