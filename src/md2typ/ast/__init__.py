#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/ast/__init__.py
"""Abstract Syntax Tree (AST) module for md2typ.

This module provides the document tree built by the Markdown parser and
walked by the Typst renderer, together with the visitor base class and the
enter/exit traversal used to drive rendering.

Core Components
---------------
- nodes: AST node class definitions
- visitors: Enter/exit visitor base class
- walk: Depth-first traversal, WalkStatus and tree search helpers

Examples
--------
Build a simple AST and render it:

    >>> from md2typ.ast import Document, Heading, Paragraph, Text, Strong
    >>> from md2typ.renderers.typst import TypstRenderer
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[
    ...         Text(content="This is "),
    ...         Strong(content=[Text(content="bold")]),
    ...         Text(content=" text.")
    ...     ])
    ... ])
    >>> print(TypstRenderer().render_to_string(doc))

"""

from md2typ.ast.nodes import (
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    MathBlock,
    MathInline,
    Node,
    Paragraph,
    SourceLocation,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
    ThematicBreak,
    get_node_children,
)
from md2typ.ast.visitors import NodeVisitor
from md2typ.ast.walk import WalkStatus, count_cells, find_first, walk

__all__ = [
    # Base classes
    "Node",
    "SourceLocation",
    "Alignment",
    # Block nodes
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "Table",
    "TableHeader",
    "TableRow",
    "TableCell",
    "ThematicBreak",
    "HTMLBlock",
    "MathBlock",
    # Inline nodes
    "Text",
    "Emphasis",
    "Strong",
    "Strikethrough",
    "Code",
    "Link",
    "Image",
    "LineBreak",
    "HTMLInline",
    "MathInline",
    # Traversal
    "NodeVisitor",
    "WalkStatus",
    "walk",
    "find_first",
    "count_cells",
    "get_node_children",
]
