#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2typ/renderers/__init__.py
"""AST renderers for producing Typst source.

Available renderers:
- TypstRenderer: Walk the AST and emit Typst markup
- TemplateRenderer: Render tables, figures and the report header from Jinja2 templates (requires jinja2)

Examples
--------
Render a parsed document:

    >>> from md2typ.parsers import markdown_to_ast
    >>> from md2typ.renderers import TypstRenderer
    >>> doc = markdown_to_ast("# Title")
    >>> TypstRenderer().render_to_string(doc)
    '\\n= Title\\n'

"""

from md2typ.renderers.base import BaseRenderer
from md2typ.renderers.templates import FigureData, TableData, TemplateRenderer
from md2typ.renderers.typst import RenderState, TypstRenderer, resolve_table_columns

__all__ = [
    "BaseRenderer",
    "FigureData",
    "RenderState",
    "TableData",
    "TemplateRenderer",
    "TypstRenderer",
    "resolve_table_columns",
]
