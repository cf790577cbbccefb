"""md2typ - convert Markdown reports to Typst.

md2typ parses CommonMark/GFM Markdown into a small document tree and walks
it depth-first to emit Typst markup. Authors steer the output with HTML
comment directives that Markdown renderers ignore:

- ``<!--typst-begin-exclude-->`` / ``<!--typst-end-exclude-->`` drop a range
  of the document from the Typst output
- ``<!--raw-typst-->`` passes the next code block through verbatim
- ``<!--typst-table caption: "..." label: "..." columns: "..." -->`` styles
  the next table
- ``<!--typst-image label: "..." -->`` labels the next image

YAML front matter (title, course, date, authors, bibliography, toc) becomes
a ``#show: report.with(...)`` header.

Requirements
------------
- Python 3.10+
- mistune, Jinja2 and PyYAML

Examples
--------
Convert Markdown text:

    >>> from md2typ import markdown_to_typst
    >>> markdown_to_typst("**bold** and *italic*")
    '#strong[bold] and #emph[italic]\\n\\n'

Convert a file, writing ``report.typ`` next to it:

    >>> from md2typ import convert
    >>> convert("report.md")
    PosixPath('report.typ')

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from md2typ.api import convert, derive_output_path, document_to_typst, markdown_to_typst
from md2typ.exceptions import (
    DependencyError,
    Md2TypError,
    ParsingError,
    RenderingError,
    TemplateRenderError,
)
from md2typ.options import MarkdownParserOptions, TypstRendererOptions

__all__ = [
    "__version__",
    "convert",
    "derive_output_path",
    "document_to_typst",
    "markdown_to_typst",
    "MarkdownParserOptions",
    "TypstRendererOptions",
    "Md2TypError",
    "DependencyError",
    "ParsingError",
    "RenderingError",
    "TemplateRenderError",
]
