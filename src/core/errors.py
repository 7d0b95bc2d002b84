"""Chewer exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class ChewerError(Exception):
    """Base exception for all Chewer failures."""


class ChewerConfigError(ChewerError):
    """Raised for invalid runtime configuration."""


class ChewerIngestError(ChewerError):
    """Raised for standard input and file read failures."""


class ChewerTransformError(ChewerError):
    """Raised for transform failures and invalid transform plugins."""
