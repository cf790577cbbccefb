#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing."""
# src/md2typ/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from md2typ.constants import (
    DEFAULT_MAX_INCLUDE_DEPTH,
    DEFAULT_PARSE_FRONTMATTER,
    DEFAULT_PARSE_INCLUDES,
    DEFAULT_PARSE_MATH,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
)
from md2typ.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_math : bool, default True
        Whether to parse inline ($...$) and block ($$...$$) math.
    parse_frontmatter : bool, default True
        Whether to split off a leading YAML front matter block.
    parse_includes : bool, default True
        Whether to expand ``{{ path }}`` include lines with the named file.
    base_dir : str, Path or None, default None
        Directory that include paths are resolved against. Defaults to the
        directory of the input file, or the working directory for text input.
    max_include_depth : int, default 8
        Maximum nesting of included files.

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "cli_name": "no-parse-tables", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={
            "help": "Parse strikethrough syntax (~~text~~)",
            "cli_name": "no-parse-strikethrough",
            "importance": "core",
        },
    )
    parse_math: bool = field(
        default=DEFAULT_PARSE_MATH,
        metadata={
            "help": "Parse inline and block math ($...$ and $$...$$)",
            "cli_name": "no-parse-math",
            "importance": "core",
        },
    )
    parse_frontmatter: bool = field(
        default=DEFAULT_PARSE_FRONTMATTER,
        metadata={
            "help": "Parse YAML front matter at the start of the document",
            "cli_name": "no-parse-frontmatter",
            "importance": "core",
        },
    )
    parse_includes: bool = field(
        default=DEFAULT_PARSE_INCLUDES,
        metadata={
            "help": "Replace lines of the form {{ path }} with the content of that file",
            "cli_name": "no-parse-includes",
            "importance": "core",
        },
    )
    base_dir: Optional[Union[str, Path]] = field(
        default=None,
        metadata={"help": "Directory that include paths are resolved against", "importance": "advanced"},
    )
    max_include_depth: int = field(
        default=DEFAULT_MAX_INCLUDE_DEPTH,
        metadata={"help": "Maximum nesting depth of included files", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for parser options.

        Raises
        ------
        ValueError
            If max_include_depth is negative.

        """
        super().__post_init__()
        if self.max_include_depth < 0:
            raise ValueError(f"max_include_depth must be non-negative, got {self.max_include_depth}")
