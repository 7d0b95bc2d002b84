"""Caller-supplied transform loader.

This module loads user-provided Python transform files.
A file must define build_transform() or a callable process(lines).
"""

from __future__ import annotations

import importlib.util
from pathlib import Path
from typing import Any, Sequence

from core.constants import PLUGIN_BUILDER_NAME, PLUGIN_MODULE_NAME, PLUGIN_PROCESS_NAME
from core.errors import ChewerTransformError
from transforms.base import FunctionTransform, LineTransform


class PluginTransform:
    """Run user transform code, reporting any exception as a transform failure."""

    def __init__(self, inner: LineTransform) -> None:
        self._inner = inner

    def process(self, lines: Sequence[str]) -> list[str]:
        try:
            return self._inner.process(lines)
        except ChewerTransformError:
            raise
        except Exception as error:
            raise ChewerTransformError(str(error)) from error

    def __repr__(self) -> str:
        return f"PluginTransform({self._inner!r})"


def load_transform_file(transform_path: str) -> LineTransform:
    """Load a transform from a Python file.

    Args:
        transform_path: Path to the Python transform file.

    Returns:
        Loaded transform.

    Raises:
        ChewerTransformError: If the file is missing, fails to import,
            or defines no usable entry point.
    """
    resolved_path = Path(transform_path).expanduser().resolve()
    if not resolved_path.is_file():
        raise ChewerTransformError(
            f"Transform file not found at {resolved_path}. "
            "Provide a valid --transform-file path."
        )
    module = _load_python_module(resolved_path)
    builder = getattr(module, PLUGIN_BUILDER_NAME, None)
    if callable(builder):
        return PluginTransform(_build_from_factory(resolved_path, builder))
    process_fn = getattr(module, PLUGIN_PROCESS_NAME, None)
    if callable(process_fn):
        return PluginTransform(FunctionTransform(resolved_path.stem, process_fn))
    raise ChewerTransformError(
        f"Invalid transform file at {resolved_path}: "
        f"missing callable {PLUGIN_BUILDER_NAME}() or {PLUGIN_PROCESS_NAME}(lines)."
    )


def _build_from_factory(module_path: Path, builder: Any) -> LineTransform:
    """Call a plugin factory and check the returned transform."""
    try:
        transform = builder()
    except Exception as error:
        raise ChewerTransformError(
            f"Failed to build transform from {module_path}: {error}"
        ) from error
    if not isinstance(transform, LineTransform):
        raise ChewerTransformError(
            f"Invalid transform file at {module_path}: "
            f"{PLUGIN_BUILDER_NAME}() returned {type(transform).__name__} "
            "without a process(lines) method."
        )
    return transform


def _load_python_module(module_path: Path) -> Any:
    """Load Python module from file path."""
    spec = importlib.util.spec_from_file_location(PLUGIN_MODULE_NAME, str(module_path))
    if spec is None or spec.loader is None:
        raise ChewerTransformError(
            f"Failed to load transform module at {module_path}. Verify the file path and syntax."
        )
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as error:
        raise ChewerTransformError(
            f"Failed to import transform module at {module_path}: {error}"
        ) from error
    return module
