"""Unit tests for shared typed models."""

from __future__ import annotations

import pytest

from core.types import TransformOutcome


def test_success_outcome_holds_lines() -> None:
    """Success outcomes should freeze the line sequence."""
    outcome = TransformOutcome.success(["a", "b"])

    assert outcome.succeeded and outcome.lines == ("a", "b") and outcome.error is None


def test_failure_outcome_holds_description() -> None:
    """Failure outcomes should carry only the description."""
    outcome = TransformOutcome.failure("boom")

    assert not outcome.succeeded and outcome.lines is None and outcome.error == "boom"


def test_empty_success_is_still_success() -> None:
    """An empty result sequence is a success, not a failure."""
    outcome = TransformOutcome.success([])

    assert outcome.succeeded and outcome.lines == ()


@pytest.mark.parametrize(
    ("lines", "error"),
    [(None, None), (("a",), "boom")],
)
def test_outcome_requires_exactly_one_field(lines, error) -> None:
    """Outcomes with both or neither field set should be rejected."""
    with pytest.raises(ValueError):
        TransformOutcome(lines=lines, error=error)
