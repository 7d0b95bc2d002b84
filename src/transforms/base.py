"""Transform capability contract.

This module defines the single-method line transform protocol,
small adapters around it, and the invocation step used by the pipeline.
"""

from __future__ import annotations

from typing import Callable, Iterable, Protocol, Sequence, runtime_checkable

from core.errors import ChewerTransformError
from core.logging_config import get_logger
from core.types import TransformOutcome

_LOGGER = get_logger(__name__)

LineFunction = Callable[[Sequence[str]], Sequence[str]]


@runtime_checkable
class LineTransform(Protocol):
    """Maps a complete line sequence onto a new line sequence.

    Implementations signal failure by raising ``ChewerTransformError``.
    """

    def process(self, lines: Sequence[str]) -> list[str]:
        """Transform the full ingested line sequence."""
        ...


class FunctionTransform:
    """Adapt a plain callable to the ``LineTransform`` protocol."""

    def __init__(self, name: str, fn: LineFunction) -> None:
        self.name = name
        self._fn = fn

    def process(self, lines: Sequence[str]) -> list[str]:
        return _validate_result(self, self._fn(lines))

    def __repr__(self) -> str:
        return f"FunctionTransform({self.name!r})"


class TransformChain:
    """Apply several transforms in order as one capability.

    An empty chain returns its input unchanged. The first failing
    transform aborts the chain.
    """

    def __init__(self, transforms: Iterable[LineTransform]) -> None:
        self._transforms = tuple(transforms)

    @property
    def transforms(self) -> tuple[LineTransform, ...]:
        """Return chained transforms in application order."""
        return self._transforms

    def process(self, lines: Sequence[str]) -> list[str]:
        current = list(lines)
        for transform in self._transforms:
            current = _validate_result(transform, transform.process(current))
        return current

    def __repr__(self) -> str:
        return f"TransformChain({list(self._transforms)!r})"


def chew(lines: Sequence[str], transform: LineTransform) -> TransformOutcome:
    """Run a transform once over the complete line sequence.

    Args:
        lines: Full ingested line sequence.
        transform: Transform capability to invoke.

    Returns:
        Success outcome with transformed lines, or failure outcome whose
        description is the transform error message.
    """
    try:
        result = _validate_result(transform, transform.process(list(lines)))
    except ChewerTransformError as error:
        return TransformOutcome.failure(str(error))
    _LOGGER.debug("transform_completed", input_count=len(lines), output_count=len(result))
    return TransformOutcome.success(result)


def _validate_result(transform: LineTransform, result: object) -> list[str]:
    """Check a transform result is a sequence of strings.

    Raises:
        ChewerTransformError: If the result has the wrong shape.
    """
    if isinstance(result, (str, bytes)) or not isinstance(result, Sequence):
        raise ChewerTransformError(
            f"transform {transform!r} returned {type(result).__name__}, "
            "expected a sequence of strings"
        )
    for index, line in enumerate(result):
        if not isinstance(line, str):
            raise ChewerTransformError(
                f"transform {transform!r} returned {type(line).__name__} "
                f"at index {index}, expected str"
            )
    return list(result)
