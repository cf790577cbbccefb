#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used to process AST nodes. A
visitor is called twice per node by :func:`md2typ.ast.walk.walk`: with
``entering=True`` before the node's children and ``entering=False`` after
them. Each visit method may return a :class:`~md2typ.ast.walk.WalkStatus` to
steer the walk; returning ``None`` continues normally.

"""

from __future__ import annotations

from typing import Any

from md2typ.ast.nodes import (
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
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
    ThematicBreak,
)


class NodeVisitor:
    """Base class for enter/exit AST node visitors.

    Subclasses override the visit_* methods for the node types they care
    about. Every method not overridden falls through to :meth:`generic_visit`,
    which does nothing, so unknown or uninteresting nodes are ignored while
    the walk still descends into their children.

    Examples
    --------
    Visitor that collects text on the way down:

        >>> class TextCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.parts = []
        ...
        ...     def visit_text(self, node, entering):
        ...         if entering:
        ...             self.parts.append(node.content)
        ...
        >>> collector = TextCollector()
        >>> walk(document, collector)
        >>> "".join(collector.parts)

    """

    def visit(self, node: Node, entering: bool) -> Any:
        """Dispatch ``node`` to its visit_* method.

        Parameters
        ----------
        node : Node
            Node being visited
        entering : bool
            True before the children are walked, False after

        Returns
        -------
        Any
            Result of the node-specific visit method

        """
        return node.accept(self, entering)

    def visit_document(self, node: Document, entering: bool) -> Any:
        """Visit a Document node."""
        return self.generic_visit(node, entering)

    def visit_heading(self, node: Heading, entering: bool) -> Any:
        """Visit a Heading node."""
        return self.generic_visit(node, entering)

    def visit_paragraph(self, node: Paragraph, entering: bool) -> Any:
        """Visit a Paragraph node."""
        return self.generic_visit(node, entering)

    def visit_code_block(self, node: CodeBlock, entering: bool) -> Any:
        """Visit a CodeBlock node."""
        return self.generic_visit(node, entering)

    def visit_block_quote(self, node: BlockQuote, entering: bool) -> Any:
        """Visit a BlockQuote node."""
        return self.generic_visit(node, entering)

    def visit_list(self, node: List, entering: bool) -> Any:
        """Visit a List node."""
        return self.generic_visit(node, entering)

    def visit_list_item(self, node: ListItem, entering: bool) -> Any:
        """Visit a ListItem node."""
        return self.generic_visit(node, entering)

    def visit_table(self, node: Table, entering: bool) -> Any:
        """Visit a Table node."""
        return self.generic_visit(node, entering)

    def visit_table_header(self, node: TableHeader, entering: bool) -> Any:
        """Visit a TableHeader node."""
        return self.generic_visit(node, entering)

    def visit_table_row(self, node: TableRow, entering: bool) -> Any:
        """Visit a TableRow node."""
        return self.generic_visit(node, entering)

    def visit_table_cell(self, node: TableCell, entering: bool) -> Any:
        """Visit a TableCell node."""
        return self.generic_visit(node, entering)

    def visit_thematic_break(self, node: ThematicBreak, entering: bool) -> Any:
        """Visit a ThematicBreak node."""
        return self.generic_visit(node, entering)

    def visit_html_block(self, node: HTMLBlock, entering: bool) -> Any:
        """Visit an HTMLBlock node."""
        return self.generic_visit(node, entering)

    def visit_math_block(self, node: MathBlock, entering: bool) -> Any:
        """Visit a MathBlock node."""
        return self.generic_visit(node, entering)

    def visit_text(self, node: Text, entering: bool) -> Any:
        """Visit a Text node."""
        return self.generic_visit(node, entering)

    def visit_emphasis(self, node: Emphasis, entering: bool) -> Any:
        """Visit an Emphasis node."""
        return self.generic_visit(node, entering)

    def visit_strong(self, node: Strong, entering: bool) -> Any:
        """Visit a Strong node."""
        return self.generic_visit(node, entering)

    def visit_strikethrough(self, node: Strikethrough, entering: bool) -> Any:
        """Visit a Strikethrough node."""
        return self.generic_visit(node, entering)

    def visit_code(self, node: Code, entering: bool) -> Any:
        """Visit a Code node."""
        return self.generic_visit(node, entering)

    def visit_link(self, node: Link, entering: bool) -> Any:
        """Visit a Link node."""
        return self.generic_visit(node, entering)

    def visit_image(self, node: Image, entering: bool) -> Any:
        """Visit an Image node."""
        return self.generic_visit(node, entering)

    def visit_line_break(self, node: LineBreak, entering: bool) -> Any:
        """Visit a LineBreak node."""
        return self.generic_visit(node, entering)

    def visit_html_inline(self, node: HTMLInline, entering: bool) -> Any:
        """Visit an HTMLInline node."""
        return self.generic_visit(node, entering)

    def visit_math_inline(self, node: MathInline, entering: bool) -> Any:
        """Visit a MathInline node."""
        return self.generic_visit(node, entering)

    def generic_visit(self, node: Node, entering: bool) -> Any:
        """Handle nodes without a specific visit method.

        Parameters
        ----------
        node : Node
            Node being visited
        entering : bool
            Walk direction

        Returns
        -------
        Any
            None, which the walker treats as "continue"

        """
        return None
