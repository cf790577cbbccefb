#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2typ.

This module centralizes the hardcoded values used across md2typ: directive
comment markers, Typst fragments, option defaults and dependency
specifications.

Constants are organized by category:
1. Directive Markers - Comment prefixes recognized in the Markdown source
2. Typst Output - Fixed fragments emitted by the renderer
3. Renderer and Parser Defaults - Default option values
4. Dependency Specifications - Packages checked by @requires_dependencies
"""

from __future__ import annotations

# =============================================================================
# Directive Markers
# =============================================================================

BEGIN_EXCLUDE_MARKER = "<!--typst-begin-exclude"
END_EXCLUDE_MARKER = "<!--typst-end-exclude"
TABLE_META_MARKER = "<!--typst-table"
IMAGE_META_MARKER = "<!--typst-image"
RAW_TYPST_MARKER = "<!--raw-typst"
COMMENT_CLOSE = "-->"

TABLE_META_KEYS = frozenset({"caption", "placement", "columns", "align", "label"})
IMAGE_META_KEYS = frozenset({"label"})

# =============================================================================
# Typst Output
# =============================================================================

HEADING_MARKER = "="
TABLE_PLACEHOLDER = "#table( ... )\n"
FIGURE_PLACEHOLDER = '#figure( image: "{path}" )\n'

TABLE_TEMPLATE_NAME = "table.typ.jinja2"
FIGURE_TEMPLATE_NAME = "figure.typ.jinja2"
HEADER_TEMPLATE_NAME = "header.typ.jinja2"

# =============================================================================
# Renderer and Parser Defaults
# =============================================================================

DEFAULT_HEADING_OFFSET = 1
DEFAULT_TABLE_PLACEMENT = "none"
DEFAULT_FIGURE_PLACEMENT = "none"
DEFAULT_TABLE_COLUMNS = 1
DEFAULT_REPORT_TEMPLATE = "../../typst-templates/report/report.typ"
DEFAULT_FAIL_ON_RESOURCE_ERRORS = False

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_MATH = True
DEFAULT_PARSE_FRONTMATTER = True
DEFAULT_PARSE_INCLUDES = True
DEFAULT_MAX_INCLUDE_DEPTH = 8

MARKDOWN_EXTENSION = ".md"
TYPST_EXTENSION = ".typ"

# =============================================================================
# Dependency Specifications for @requires_dependencies decorator
# =============================================================================
# Each spec is a list of tuples: (pip_package, import_name, version_constraint)

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_YAML = [("pyyaml", "yaml", ">=6.0")]
DEPS_JINJA = [("jinja2", "jinja2", ">=3.1.0")]
