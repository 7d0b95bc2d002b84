"""Unit tests for built-in transforms."""

from __future__ import annotations

import pytest

from core.errors import ChewerTransformError
from transforms.builtin import build_transform, build_transform_chain, supported_transforms

_SAMPLE = ["beta", "", "  Alpha ", "beta", "gamma"]


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("identity", ["beta", "", "  Alpha ", "beta", "gamma"]),
        ("upper", ["BETA", "", "  ALPHA ", "BETA", "GAMMA"]),
        ("lower", ["beta", "", "  alpha ", "beta", "gamma"]),
        ("strip", ["beta", "", "Alpha", "beta", "gamma"]),
        ("nonempty", ["beta", "  Alpha ", "beta", "gamma"]),
        ("dedupe", ["beta", "", "  Alpha ", "gamma"]),
        ("sort", ["", "  Alpha ", "beta", "beta", "gamma"]),
        ("reverse", ["gamma", "beta", "  Alpha ", "", "beta"]),
        ("number", ["1\tbeta", "2\t", "3\t  Alpha ", "4\tbeta", "5\tgamma"]),
    ],
)
def test_builtin_transform_output(name: str, expected: list[str]) -> None:
    """Each built-in transform should produce its documented output."""
    assert build_transform(name).process(_SAMPLE) == expected


def test_build_transform_ignores_case_and_whitespace() -> None:
    """Transform names should resolve case-insensitively."""
    assert build_transform(" UPPER ").process(["a"]) == ["A"]


def test_build_transform_raises_for_unknown_name() -> None:
    """Unknown names should list the supported transforms."""
    with pytest.raises(ChewerTransformError, match="Choose one of: identity"):
        build_transform("shout")


def test_build_transform_chain_preserves_order() -> None:
    """Chains built from names should apply transforms in order."""
    chain = build_transform_chain(["nonempty", "dedupe", "number"])

    assert chain.process(_SAMPLE) == ["1\tbeta", "2\t  Alpha ", "3\tgamma"]


def test_supported_transforms_includes_identity() -> None:
    """The identity transform should always be available."""
    assert "identity" in supported_transforms()
