"""Integration tests for the ingest, transform, and emit flow."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Sequence

import chewer


class _PrefixTransform:
    """Caller-supplied transform used through the SDK surface."""

    def __init__(self, prefix: str) -> None:
        self._prefix = prefix

    def process(self, lines: Sequence[str]) -> list[str]:
        if not lines:
            raise chewer.ChewerTransformError("nothing to prefix")
        return [f"{self._prefix}{line}" for line in lines]


def test_identity_round_trip_over_many_files(tmp_path: Path) -> None:
    """Identity over split files should reproduce the concatenated content."""
    expected = ["first", "", "  padded  ", "last"]
    paths = []
    for index, chunk in enumerate((expected[:2], expected[2:3], [], expected[3:])):
        path = tmp_path / f"part{index}.txt"
        path.write_text("".join(f"{line}\n" for line in chunk), encoding="utf-8")
        paths.append(str(path))
    stdout, stderr = io.StringIO(), io.StringIO()

    chewer.run_line_pipeline(
        paths, chewer.build_transform("identity"), stdout=stdout, stderr=stderr
    )

    assert stdout.getvalue().split("\n")[:-1] == expected and stderr.getvalue() == ""


def test_custom_transform_through_sdk() -> None:
    """Caller transforms should plug into the pipeline without registration."""
    lines = chewer.ingest_lines([], stdin=io.StringIO("a\nb\n"))
    outcome = chewer.chew(lines, _PrefixTransform("> "))
    stdout = io.StringIO()

    chewer.spit(outcome, stdout=stdout)

    assert stdout.getvalue() == "> a\n> b\n"


def test_custom_transform_failure_through_sdk() -> None:
    """Caller transform failures should surface as one error line."""
    stdout, stderr = io.StringIO(), io.StringIO()

    outcome = chewer.run_line_pipeline(
        [],
        _PrefixTransform("> "),
        stdin=io.StringIO(""),
        stdout=stdout,
        stderr=stderr,
    )

    assert chewer.exit_code_for(outcome) == 1
    assert stdout.getvalue() == "" and stderr.getvalue() == "Error: nothing to prefix\n"
