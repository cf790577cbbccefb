#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2typ parsing and rendering.

Every options class is a frozen dataclass; use ``create_updated`` to derive a
modified copy.
"""

from md2typ.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2typ.options.markdown import MarkdownParserOptions
from md2typ.options.typst import TypstRendererOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "MarkdownParserOptions",
    "TypstRendererOptions",
]
