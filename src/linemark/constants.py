#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for linemark.

Constants are organized by category:
1. Type Definitions
2. CLI Defaults
3. Configuration Discovery
4. Exit Codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

EmitFormat = Literal["html", "tokens", "tree"]

EMIT_FORMATS: tuple[str, ...] = ("html", "tokens", "tree")

# =============================================================================
# CLI Defaults
# =============================================================================

DEFAULT_EMIT_FORMAT: EmitFormat = "html"
DEFAULT_DOCUMENT_TITLE = "Document"
DEFAULT_DOCUMENT_LANGUAGE = "en"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_JSON_INDENT = 2

# =============================================================================
# Configuration Discovery
# =============================================================================

CONFIG_ENV_VAR = "LINEMARK_CONFIG"
CONFIG_FILENAMES: tuple[str, ...] = (".linemark.toml", ".linemark.yaml", ".linemark.yml", ".linemark.json")
PYPROJECT_TOOL_SECTION = "linemark"

# Keys a configuration file may set; each mirrors a CLI option.
CONFIG_KEYS: frozenset[str] = frozenset({"emit", "standalone", "title", "log_level", "log_file", "trace"})

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
