"""Core constants used across Chewer modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in stage logic.
"""

from __future__ import annotations

DEFAULT_ENCODING = "utf-8"
DEFAULT_MAX_LINE_LENGTH = 0
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
ERROR_MARKER = "Error:"
STDIN_SOURCE_NAME = "stdin"
DEFAULT_TRANSFORM_NAME = "identity"
PLUGIN_BUILDER_NAME = "build_transform"
PLUGIN_PROCESS_NAME = "process"
PLUGIN_MODULE_NAME = "chewer_user_transform"
NUMBERED_LINE_SEPARATOR = "\t"
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
