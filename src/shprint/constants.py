#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the shprint library.

This module centralizes the default rendering settings and the names used
for configuration file discovery. Keeping them in one place lets the options
dataclasses, the config loader and the tests agree on the same values.

Constants are organized by category:
1. Rendering Defaults - Default values for ShellRendererOptions
2. Configuration Discovery - Config file names and pyproject table name
3. AST Interchange - JSON schema version for serialized ASTs
"""

from __future__ import annotations

# =============================================================================
# Rendering Defaults
# =============================================================================

# Indentation width in spaces; 0 means one tab per level
DEFAULT_INDENT = 0
DEFAULT_BINARY_NEXT_LINE = False
DEFAULT_SWITCH_CASE_INDENT = False
DEFAULT_KEEP_PADDING = False
DEFAULT_MINIFY = False

# =============================================================================
# Configuration Discovery
# =============================================================================

DEDICATED_CONFIG_FILENAMES = [".shprint.toml", ".shprint.yaml", ".shprint.yml", ".shprint.json"]
PYPROJECT_TOOL_SECTION = "shprint"
CONFIG_ENV_VAR = "SHPRINT_CONFIG"

# =============================================================================
# AST Interchange
# =============================================================================

AST_JSON_SCHEMA_VERSION = 1
