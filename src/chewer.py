"""Public SDK surface for Chewer.

This module provides a stable import path for library users.
It re-exports the pipeline stages and transform building blocks.
"""

from __future__ import annotations

from core.config import ChewerConfig
from core.errors import ChewerError, ChewerIngestError, ChewerTransformError
from core.types import TransformOutcome
from emit.stream_writer import spit
from ingest.line_reader import ingest_lines
from pipeline.line_pipeline import exit_code_for, run_line_pipeline
from transforms.base import FunctionTransform, LineTransform, TransformChain, chew
from transforms.builtin import build_transform, build_transform_chain, supported_transforms
from transforms.plugin_loader import load_transform_file

__all__ = [
    "ChewerConfig",
    "ChewerError",
    "ChewerIngestError",
    "ChewerTransformError",
    "FunctionTransform",
    "LineTransform",
    "TransformChain",
    "TransformOutcome",
    "build_transform",
    "build_transform_chain",
    "chew",
    "exit_code_for",
    "ingest_lines",
    "load_transform_file",
    "run_line_pipeline",
    "spit",
    "supported_transforms",
]
