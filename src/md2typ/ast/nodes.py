#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy produced by the Markdown parser and
consumed by the Typst renderer. Each node represents a structural or inline
element of a report and owns an ordered sequence of children.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.
Unlike a single-pass visitor, a node is visited twice during a walk: once
when the walker enters it and once when it leaves, after its children.

Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, Table, TableHeader, TableRow, TableCell
    - ThematicBreak, HTMLBlock, MathBlock

Inline nodes represent text formatting:
    - Text, Emphasis, Strong, Strikethrough, Code
    - Link, Image, LineBreak
    - HTMLInline, MathInline

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

Alignment = Literal["left", "center", "right"]


@dataclass
class SourceLocation:
    """Source location information for AST nodes.

    Parameters
    ----------
    format : str
        Source format (always 'markdown' for nodes built by md2typ)
    line : int or None, default = None
        Line number in source document
    metadata : dict, default = empty dict
        Additional location information (e.g., the include file a node came from)

    """

    format: str
    line: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node
    source_location : SourceLocation or None, default = None
        Information about where this node came from in the source

    """

    metadata: dict[str, Any]
    source_location: Optional[SourceLocation]

    @abstractmethod
    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods
        entering : bool, default = True
            True on the way down the tree, False on the way back up

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata, populated from the YAML front matter
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self, entering)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self, entering)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self, entering)


@dataclass
class CodeBlock(Node):
    """Code block node with optional language specification.

    Parameters
    ----------
    content : str
        The literal code, including its trailing newline when present
    language : str or None, default = None
        First word of the fence info string
    info_string : str or None, default = None
        Complete fence info string as written
    metadata : dict, default = empty dict
        Code block metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    language: Optional[str] = None
    info_string: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self, entering)


@dataclass
class BlockQuote(Node):
    """Block quote node containing block-level children."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self, entering)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for numbered lists, False for bullet lists
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether list items are separated without blank lines
    metadata : dict, default = empty dict
        List metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self, entering)


@dataclass
class ListItem(Node):
    """List item node containing block-level children."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self, entering)


@dataclass
class Table(Node):
    """Table node with an optional header section.

    Parameters
    ----------
    header : TableHeader or None, default = None
        Header section of the table
    rows : list of TableRow, default = empty list
        Body rows (excluding the header)
    metadata : dict, default = empty dict
        Table metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    header: Optional[TableHeader] = None
    rows: list[TableRow] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self, entering)


@dataclass
class TableHeader(Node):
    """Header section of a table, holding the header row(s)."""

    rows: list[TableRow] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this table header."""
        return visitor.visit_table_header(self, entering)


@dataclass
class TableRow(Node):
    """Table row node containing cells."""

    cells: list[TableCell] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self, entering)


@dataclass
class TableCell(Node):
    """Table cell node with optional alignment.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline content of the cell
    alignment : {'left', 'center', 'right'} or None, default = None
        Cell alignment from the delimiter row
    metadata : dict, default = empty dict
        Cell metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: list[Node] = field(default_factory=list)
    alignment: Alignment | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self, entering)


@dataclass
class ThematicBreak(Node):
    """Thematic break node (horizontal rule)."""

    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self, entering)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block node.

    Directive comments written on their own line arrive as HTML blocks.

    Parameters
    ----------
    content : str
        Raw HTML content, verbatim
    metadata : dict, default = empty dict
        HTML block metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this HTML block."""
        return visitor.visit_html_block(self, entering)


@dataclass
class MathBlock(Node):
    """Display math block node.

    Parameters
    ----------
    content : str
        The math source between the ``$$`` delimiters
    metadata : dict, default = empty dict
        Math block metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this math block."""
        return visitor.visit_math_block(self, entering)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this text node."""
        return visitor.visit_text(self, entering)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this emphasis node."""
        return visitor.visit_emphasis(self, entering)


@dataclass
class Strong(Node):
    """Strong (bold) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this strong node."""
        return visitor.visit_strong(self, entering)


@dataclass
class Strikethrough(Node):
    """Strikethrough node (GFM extension)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this strikethrough node."""
        return visitor.visit_strikethrough(self, entering)


@dataclass
class Code(Node):
    """Inline code node.

    Parameters
    ----------
    content : str
        The code literal without its backtick delimiters
    metadata : dict, default = empty dict
        Code metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this code node."""
        return visitor.visit_code(self, entering)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str
        Link destination
    content : list of Node, default = empty list
        Inline nodes for the link text
    title : str or None, default = None
        Optional link title
    metadata : dict, default = empty dict
        Link metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self, entering)


@dataclass
class Image(Node):
    """Image node.

    The alternative text is kept as inline child nodes so that the renderer
    can turn it into a figure caption.

    Parameters
    ----------
    url : str
        Image source path or URL
    content : list of Node, default = empty list
        Inline nodes for the alternative text
    title : str or None, default = None
        Optional image title
    metadata : dict, default = empty dict
        Image metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self, entering)


@dataclass
class LineBreak(Node):
    """Line break node.

    Parameters
    ----------
    soft : bool, default = False
        True for a soft break (newline in the source), False for a hard break
    metadata : dict, default = empty dict
        Line break metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self, entering)


@dataclass
class HTMLInline(Node):
    """Inline HTML node, carrying directive comments embedded in a paragraph."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this inline HTML."""
        return visitor.visit_html_inline(self, entering)


@dataclass
class MathInline(Node):
    """Inline math node.

    Parameters
    ----------
    content : str
        The math source between the ``$`` delimiters
    metadata : dict, default = empty dict
        Math metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this inline math."""
        return visitor.visit_math_inline(self, entering)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    This is a helper function for traversal code that needs the ordered
    children of any node regardless of its type.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    Examples
    --------
    >>> heading = Heading(level=1, content=[Text("Hello"), Strong(content=[Text("world")])])
    >>> children = get_node_children(heading)
    >>> len(children)
    2

    """
    # Block nodes with 'children' attribute
    if isinstance(node, (Document, BlockQuote, ListItem)):
        return list(node.children)

    # Nodes with 'content' attribute (containing inline nodes)
    if isinstance(node, (Heading, Paragraph, Emphasis, Strong, Strikethrough, Link, Image, TableCell)):
        return list(node.content)

    if isinstance(node, List):
        return list(node.items)

    # Table has header and rows
    if isinstance(node, Table):
        children: list[Node] = []
        if node.header:
            children.append(node.header)
        children.extend(node.rows)
        return children

    if isinstance(node, TableHeader):
        return list(node.rows)

    if isinstance(node, TableRow):
        return list(node.cells)

    # Leaf nodes (no children)
    return []
