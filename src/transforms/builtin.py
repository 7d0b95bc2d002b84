"""Stock line transforms.

This module provides named transforms selectable from the CLI and SDK.
Each transform is pure and keeps input order unless it exists to reorder.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.constants import NUMBERED_LINE_SEPARATOR
from core.errors import ChewerTransformError
from transforms.base import FunctionTransform, LineFunction, LineTransform, TransformChain


def _identity(lines: Sequence[str]) -> list[str]:
    return list(lines)


def _upper(lines: Sequence[str]) -> list[str]:
    return [line.upper() for line in lines]


def _lower(lines: Sequence[str]) -> list[str]:
    return [line.lower() for line in lines]


def _strip(lines: Sequence[str]) -> list[str]:
    return [line.strip() for line in lines]


def _nonempty(lines: Sequence[str]) -> list[str]:
    return [line for line in lines if line.strip()]


def _dedupe(lines: Sequence[str]) -> list[str]:
    """Drop repeated lines, keeping the first occurrence."""
    unique_lines: list[str] = []
    seen: set[str] = set()
    for line in lines:
        if line in seen:
            continue
        seen.add(line)
        unique_lines.append(line)
    return unique_lines


def _sort(lines: Sequence[str]) -> list[str]:
    return sorted(lines)


def _reverse(lines: Sequence[str]) -> list[str]:
    return list(reversed(lines))


def _number(lines: Sequence[str]) -> list[str]:
    """Prefix each line with its one-based position."""
    return [f"{index}{NUMBERED_LINE_SEPARATOR}{line}" for index, line in enumerate(lines, 1)]


_BUILTIN_TRANSFORMS: dict[str, LineFunction] = {
    "identity": _identity,
    "upper": _upper,
    "lower": _lower,
    "strip": _strip,
    "nonempty": _nonempty,
    "dedupe": _dedupe,
    "sort": _sort,
    "reverse": _reverse,
    "number": _number,
}


def supported_transforms() -> tuple[str, ...]:
    """Return supported built-in transform names."""
    return tuple(_BUILTIN_TRANSFORMS)


def build_transform(name: str) -> LineTransform:
    """Resolve a built-in transform by name.

    Args:
        name: Transform name, case-insensitive.

    Returns:
        Transform instance.

    Raises:
        ChewerTransformError: If the name is unsupported.
    """
    normalized_name = name.lower().strip()
    fn = _BUILTIN_TRANSFORMS.get(normalized_name)
    if fn is None:
        supported = ", ".join(supported_transforms())
        raise ChewerTransformError(
            f"Unsupported transform '{name}'. Choose one of: {supported}."
        )
    return FunctionTransform(normalized_name, fn)


def build_transform_chain(names: Iterable[str]) -> TransformChain:
    """Resolve several built-in transforms into an ordered chain."""
    return TransformChain(build_transform(name) for name in names)
