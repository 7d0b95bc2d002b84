"""Chewer CLI entry points.
This module maps command-line arguments onto the line pipeline.
It resolves transforms, runs one pass, and returns an exit code.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from core.config import ChewerConfig
from core.constants import DEFAULT_TRANSFORM_NAME, EXIT_FAILURE, EXIT_SUCCESS
from core.errors import ChewerConfigError, ChewerTransformError
from emit.stream_writer import format_error_line
from pipeline.line_pipeline import exit_code_for, run_line_pipeline
from transforms.base import LineTransform, TransformChain
from transforms.builtin import build_transform_chain, supported_transforms
from transforms.plugin_loader import load_transform_file


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="chewer",
        description="Read lines from files or stdin, transform them, and print the result",
    )
    parser.add_argument("files", nargs="*", help="Input files; stdin is read when omitted")
    parser.add_argument(
        "-t",
        "--transform",
        action="append",
        dest="transforms",
        metavar="NAME",
        help="Built-in transform to apply; repeat to chain in order",
    )
    parser.add_argument(
        "--transform-file",
        help="Python file defining build_transform() or process(lines)",
    )
    parser.add_argument(
        "--list-transforms",
        action="store_true",
        help="Print built-in transform names and exit",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Chewer CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.list_transforms:
        for name in supported_transforms():
            print(name)
        return EXIT_SUCCESS
    try:
        config = ChewerConfig.from_env()
        transform = _resolve_transform(args)
    except (ChewerConfigError, ChewerTransformError) as error:
        sys.stderr.write(format_error_line(str(error)))
        return EXIT_FAILURE
    outcome = run_line_pipeline(args.files, transform, config)
    return exit_code_for(outcome)


def _resolve_transform(args: argparse.Namespace) -> LineTransform:
    """Build the transform chain requested on the command line.

    Args:
        args: Parsed CLI args.

    Returns:
        Chained transform, identity when nothing was requested.
    """
    names = args.transforms or [DEFAULT_TRANSFORM_NAME]
    chain = build_transform_chain(names)
    if args.transform_file is None:
        return chain
    return TransformChain((*chain.transforms, load_transform_file(args.transform_file)))
