#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that build the md2typ AST from source documents."""

from md2typ.parsers.base import BaseParser
from md2typ.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
