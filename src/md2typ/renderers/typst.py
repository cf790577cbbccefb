#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/renderers/typst.py
"""Typst rendering from AST.

This module provides the TypstRenderer class which walks the document tree
depth-first and emits Typst source. Each node is visited on entry and on
exit; the renderer writes a fragment on either side of the node's children.

Directive comments found in raw HTML nodes steer the walk:

- an exclusion range suppresses all output until its end marker, while the
  walk keeps descending so the end marker is still seen;
- a raw marker makes the next code block pass through verbatim;
- table and image metadata wait in the render state until the next table or
  image consumes them.

Block quotes, list items, image captions and table content are produced by
capturing the rendering of their children into a separate buffer, with the
directive flags copied into a fresh state so the capture cannot disturb the
enclosing render.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Optional

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
    get_node_children,
)
from md2typ.ast.visitors import NodeVisitor
from md2typ.ast.walk import WalkStatus, count_cells, find_first, walk
from md2typ.constants import (
    DEFAULT_TABLE_COLUMNS,
    FIGURE_PLACEHOLDER,
    HEADING_MARKER,
    TABLE_PLACEHOLDER,
)
from md2typ.directives import DirectiveKind, ImageMeta, TableMeta, is_end_exclude, parse_directive
from md2typ.exceptions import TemplateRenderError
from md2typ.options.typst import TypstRendererOptions
from md2typ.renderers.base import BaseRenderer
from md2typ.renderers.templates import FigureData, TableData, TemplateRenderer
from md2typ.utils.decorators import debug_timer
from md2typ.utils.escape import escape_typst_string

logger = logging.getLogger(__name__)


@dataclass
class RenderState:
    """Mutable state of one render pass.

    Parameters
    ----------
    excluding : bool
        True between a begin-exclude and an end-exclude marker
    pending_raw : bool
        True when the next code block is raw Typst
    pending_table_meta : TableMeta or None
        Metadata waiting for the next table
    pending_image_meta : ImageMeta or None
        Metadata waiting for the next image
    output : list of str
        Output fragments owned by this state

    """

    excluding: bool = False
    pending_raw: bool = False
    pending_table_meta: Optional[TableMeta] = None
    pending_image_meta: Optional[ImageMeta] = None
    output: list[str] = field(default_factory=list)

    def fork(self) -> RenderState:
        """Copy the directive flags into a new state with an empty buffer."""
        return replace(self, output=[])

    def emit(self, text: str) -> None:
        self.output.append(text)

    def text(self) -> str:
        return "".join(self.output)


def resolve_table_columns(table: Table, meta: TableMeta) -> str:
    """Return the Typst ``columns:`` expression for a table.

    Parameters
    ----------
    table : Table
        Table being rendered
    meta : TableMeta
        Metadata announced for the table

    Returns
    -------
    str
        ``meta.columns`` verbatim when set; otherwise the number of cells in
        the first table header, or ``"1"`` when there is no header or it is empty

    """
    if meta.columns:
        return meta.columns

    header = find_first(table, lambda candidate: isinstance(candidate, TableHeader))
    count = count_cells(header) if header is not None else 0
    return str(count or DEFAULT_TABLE_COLUMNS)


class TypstRenderer(NodeVisitor, BaseRenderer):
    r"""Render AST nodes to Typst source.

    Parameters
    ----------
    options : TypstRendererOptions or None, default = None
        Typst rendering options

    Examples
    --------
    Basic usage:

        >>> from md2typ.ast import Document, Paragraph, Strong, Text
        >>> from md2typ.renderers.typst import TypstRenderer
        >>> doc = Document(children=[
        ...     Paragraph(content=[Strong(content=[Text(content="bold")])])
        ... ])
        >>> TypstRenderer().render_to_string(doc)
        '#strong[bold]\n\n'

    """

    def __init__(self, options: TypstRendererOptions | None = None):
        """Initialize the Typst renderer with options."""
        BaseRenderer._validate_options_type(options, TypstRendererOptions, "typst")
        options = options or TypstRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: TypstRendererOptions = options
        self.templates = TemplateRenderer(options.template_dir, options.report_template)
        self._state = RenderState()

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to Typst source.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Typst body text (without the report header)

        Raises
        ------
        TemplateRenderError
            If a table or figure template fails and
            ``fail_on_resource_errors`` is set

        """
        self._state = RenderState()

        with debug_timer(logger, "Rendering (typst)"):
            walk(doc, self)

        state = self._state
        if state.excluding:
            logger.debug("Exclusion range was never closed; output after it was dropped")
        if state.pending_raw or state.pending_table_meta is not None or state.pending_image_meta is not None:
            logger.debug("Discarding directive metadata that no node consumed")

        return state.text()

    # ------------------------------------------------------------------
    # Dispatch and capture
    # ------------------------------------------------------------------

    def visit(self, node: Node, entering: bool) -> Optional[WalkStatus]:
        """Dispatch ``node`` unless an exclusion range is active.

        While excluding, only a raw HTML node carrying the end marker is
        dispatched. Every other node is passed over without output, and the
        walk still descends into its children.
        """
        if self._state.excluding and not is_end_exclude(node):
            return WalkStatus.GO_TO_NEXT
        return node.accept(self, entering)

    def capture(self, nodes: Iterable[Node], trim: bool = True) -> str:
        """Render ``nodes`` into a separate buffer and return the text.

        The capture runs on a fork of the current state, so directives seen
        or consumed inside it do not affect the enclosing render.

        Parameters
        ----------
        nodes : iterable of Node
            Nodes to render, in order
        trim : bool, default True
            Strip trailing whitespace from the result

        Returns
        -------
        str
            Rendered text

        """
        saved_state = self._state
        self._state = saved_state.fork()
        try:
            for node in nodes:
                walk(node, self)
            text = self._state.text()
        finally:
            self._state = saved_state

        return text.rstrip() if trim else text

    def capture_children(self, node: Node, trim: bool = True) -> str:
        """Capture the rendering of the children of ``node``."""
        return self.capture(get_node_children(node), trim=trim)

    def _emit(self, text: str) -> None:
        self._state.emit(text)

    def _render_resource(self, render: Callable[[], str], placeholder: str, kind: str) -> str:
        """Render a table or figure template, falling back to a placeholder.

        Raises
        ------
        TemplateRenderError
            If rendering fails and ``fail_on_resource_errors`` is set

        """
        try:
            return render()
        except TemplateRenderError as e:
            if self.options.fail_on_resource_errors:
                raise
            logger.warning(f"Could not render {kind} template, emitting placeholder: {e}")
            return placeholder

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_heading(self, node: Heading, entering: bool) -> None:
        """Emit ``=`` markers shifted by the heading offset."""
        if entering:
            marker_count = node.level - 1 + self.options.heading_offset
            self._emit("\n" + HEADING_MARKER * marker_count + " ")
        else:
            self._emit("\n")

    def visit_paragraph(self, node: Paragraph, entering: bool) -> None:
        if not entering:
            self._emit("\n\n")

    def visit_block_quote(self, node: BlockQuote, entering: bool) -> Optional[WalkStatus]:
        """Emit the quote body as a single escaped string argument."""
        if not entering:
            return None
        body = escape_typst_string(self.capture_children(node))
        self._emit(f'\n#quote(block:true, "{body}")\n\n')
        return WalkStatus.SKIP_CHILDREN

    def visit_code_block(self, node: CodeBlock, entering: bool) -> None:
        """Emit a raw block, or the literal itself after a raw-typst marker."""
        if not entering:
            return

        if self._state.pending_raw:
            self._state.pending_raw = False
            self._emit(node.content)
            return

        lang = ""
        if node.language:
            lang = f' lang:"{escape_typst_string(node.language)}",'
        self._emit(f'#raw(block:true,{lang} "{escape_typst_string(node.content)}")\n')

    def visit_thematic_break(self, node: ThematicBreak, entering: bool) -> None:
        if entering:
            self._emit("#line(length:100%)\n")

    def visit_list(self, node: List, entering: bool) -> None:
        if entering:
            self._emit(f"#enum(start:{node.start}," if node.ordered else "#list(")
        else:
            self._emit(")\n\n")

    def visit_list_item(self, node: ListItem, entering: bool) -> Optional[WalkStatus]:
        if not entering:
            return None
        self._emit("[" + self.capture_children(node).strip() + "],\n")
        return WalkStatus.SKIP_CHILDREN

    def visit_table(self, node: Table, entering: bool) -> Optional[WalkStatus]:
        """Render the table through the table template.

        Pending table metadata is consumed here. Each child of the table is
        captured without trimming so that row terminators survive.
        """
        if not entering:
            return None

        meta = self._state.pending_table_meta or TableMeta()
        self._state.pending_table_meta = None

        rows = "".join(self.capture([child], trim=False) for child in get_node_children(node))
        data = TableData(
            caption=meta.caption,
            placement=meta.placement,
            columns=resolve_table_columns(node, meta),
            align=meta.align,
            label=meta.label,
            rows=rows,
        )
        self._emit(self._render_resource(lambda: self.templates.render_table(data), TABLE_PLACEHOLDER, "table"))
        return WalkStatus.SKIP_CHILDREN

    def visit_table_header(self, node: TableHeader, entering: bool) -> None:
        self._emit("table.header(" if entering else "),\n")

    def visit_table_row(self, node: TableRow, entering: bool) -> None:
        if not entering:
            self._emit("\n")

    def visit_table_cell(self, node: TableCell, entering: bool) -> None:
        self._emit("[" if entering else "],")

    def visit_html_block(self, node: HTMLBlock, entering: bool) -> None:
        if entering:
            self._apply_directive(node.content)

    def visit_math_block(self, node: MathBlock, entering: bool) -> None:
        if entering:
            self._emit(f"$ {escape_typst_string(node.content)} $\n\n")

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text, entering: bool) -> None:
        if entering:
            self._emit(node.content)

    def visit_emphasis(self, node: Emphasis, entering: bool) -> None:
        self._emit("#emph[" if entering else "]")

    def visit_strong(self, node: Strong, entering: bool) -> None:
        self._emit("#strong[" if entering else "]")

    def visit_strikethrough(self, node: Strikethrough, entering: bool) -> None:
        self._emit("#strike[" if entering else "]")

    def visit_code(self, node: Code, entering: bool) -> None:
        if entering:
            self._emit(f'#raw(block:false, "{escape_typst_string(node.content)}")')

    def visit_link(self, node: Link, entering: bool) -> None:
        if entering:
            self._emit(f'#link("{escape_typst_string(node.url)}")[')
        else:
            self._emit("]")

    def visit_image(self, node: Image, entering: bool) -> Optional[WalkStatus]:
        """Render the image as a figure captioned with its alt text.

        Pending image metadata is consumed here, whether or not it carries a label.
        """
        if not entering:
            return None

        caption = self.capture(node.content).strip()
        meta = self._state.pending_image_meta
        self._state.pending_image_meta = None

        data = FigureData(image_path=node.url, caption=caption, label=meta.label if meta else "")
        placeholder = FIGURE_PLACEHOLDER.format(path=escape_typst_string(node.url))
        self._emit(self._render_resource(lambda: self.templates.render_figure(data), placeholder, "figure"))
        return WalkStatus.SKIP_CHILDREN

    def visit_line_break(self, node: LineBreak, entering: bool) -> None:
        if entering:
            self._emit(" " if node.soft else "\\ ")

    def visit_html_inline(self, node: HTMLInline, entering: bool) -> None:
        if entering:
            self._apply_directive(node.content)

    def visit_math_inline(self, node: MathInline, entering: bool) -> None:
        if entering:
            self._emit(f"${escape_typst_string(node.content)}$")

    # ------------------------------------------------------------------
    # Directives
    # ------------------------------------------------------------------

    def _apply_directive(self, literal: str) -> None:
        """Update the render state from a directive comment; other HTML emits nothing."""
        directive = parse_directive(literal)
        if directive is None:
            return

        logger.debug(f"Directive: {directive.kind.value}")
        state = self._state
        if directive.kind is DirectiveKind.BEGIN_EXCLUDE:
            state.excluding = True
        elif directive.kind is DirectiveKind.END_EXCLUDE:
            state.excluding = False
        elif directive.kind is DirectiveKind.TABLE_META:
            state.pending_table_meta = directive.table_meta
        elif directive.kind is DirectiveKind.IMAGE_META:
            state.pending_image_meta = directive.image_meta
        elif directive.kind is DirectiveKind.RAW_TYPST:
            state.pending_raw = True


__all__ = ["RenderState", "TypstRenderer", "resolve_table_columns"]
