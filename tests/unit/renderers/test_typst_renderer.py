#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_typst_renderer.py
"""Unit tests for Typst rendering from AST.

Tests cover:
- Inline formatting
- Heading offset
- Code blocks and raw passthrough
- Exclusion ranges
- Lists and block quotes
- Tables (column inference, metadata, fallback)
- Images as figures
- Math and line breaks
- Capture isolation
- Options validation and file output

"""

from io import StringIO
from pathlib import Path

import pytest

from md2typ.ast import (
    CodeBlock,
    Document,
    HTMLBlock,
    HTMLInline,
    Image,
    List,
    ListItem,
    Paragraph,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
)
from md2typ.directives import TableMeta
from md2typ.exceptions import InvalidOptionsError, TemplateRenderError
from md2typ.options import MarkdownParserOptions, TypstRendererOptions
from md2typ.parsers.markdown import markdown_to_ast
from md2typ.renderers.typst import RenderState, TypstRenderer, resolve_table_columns

BEGIN_EXCLUDE = "<!--typst-begin-exclude-->"
END_EXCLUDE = "<!--typst-end-exclude-->"


def render_markdown(markdown: str, options: TypstRendererOptions | None = None) -> str:
    """Helper to parse Markdown and render it to Typst.

    Parameters
    ----------
    markdown : str
        Markdown source
    options : TypstRendererOptions or None
        Renderer options

    Returns
    -------
    str
        Typst output

    """
    doc = markdown_to_ast(markdown, MarkdownParserOptions(parse_includes=False))
    return TypstRenderer(options).render_to_string(doc)


def create_table(headers: list[str], rows: list[list[str]]) -> Table:
    """Helper to create a table with a single header row.

    Parameters
    ----------
    headers : list[str]
        Header cell texts; an empty list gives a header without cells
    rows : list[list[str]]
        Body cell texts

    Returns
    -------
    Table
        Table node

    """
    header = TableHeader(rows=[TableRow(cells=[TableCell(content=[Text(content=h)]) for h in headers])])
    body = [TableRow(cells=[TableCell(content=[Text(content=cell)]) for cell in row]) for row in rows]
    return Table(header=header, rows=body)


@pytest.mark.unit
class TestInlineRendering:
    """Tests for inline elements."""

    def test_strong_and_emphasis(self) -> None:
        """Test that bold and italic map to #strong and #emph."""
        assert render_markdown("**bold** and *italic*") == "#strong[bold] and #emph[italic]\n\n"

    def test_strikethrough(self) -> None:
        """Test that strikethrough maps to #strike."""
        assert render_markdown("~~gone~~") == "#strike[gone]\n\n"

    def test_inline_code_escaped(self) -> None:
        """Test that inline code is an escaped raw string."""
        assert render_markdown('`say "hi"`') == '#raw(block:false, "say \\"hi\\"")\n\n'

    def test_link(self) -> None:
        """Test that links wrap their text in #link."""
        assert render_markdown("[site](https://example.org)") == '#link("https://example.org")[site]\n\n'

    def test_inline_math(self) -> None:
        """Test that inline math is wrapped in dollars."""
        assert render_markdown("area $x^2$") == "area $x^2$\n\n"

    def test_line_breaks(self) -> None:
        """Test that soft breaks become spaces and hard breaks become Typst line breaks."""
        assert render_markdown("a\nb") == "a b\n\n"
        assert render_markdown("a  \nb") == "a\\ b\n\n"

    def test_ordinary_inline_html_dropped(self) -> None:
        """Test that HTML without a directive produces no output."""
        assert render_markdown("a <span>b</span>") == "a b\n\n"


@pytest.mark.unit
class TestHeadingRendering:
    """Tests for heading rendering."""

    def test_default_offset(self) -> None:
        """Test that a level-one heading gets one marker with the default offset."""
        assert render_markdown("# Title") == "\n= Title\n"
        assert render_markdown("## Section") == "\n== Section\n"

    def test_custom_offset(self) -> None:
        """Test that the heading offset shifts every level."""
        options = TypstRendererOptions(heading_offset=2)
        assert render_markdown("# Title", options) == "\n== Title\n"
        assert render_markdown("### Deep", options) == "\n==== Deep\n"

    def test_heading_with_formatting(self) -> None:
        """Test that inline formatting inside headings is rendered."""
        assert render_markdown("# A *b*") == "\n= A #emph[b]\n"


@pytest.mark.unit
class TestCodeBlockRendering:
    """Tests for code blocks and raw passthrough."""

    def test_code_block_with_language(self) -> None:
        """Test that a fenced block becomes an escaped raw block with its language."""
        result = render_markdown('```python\nprint("hi")\n```')
        assert result == '#raw(block:true, lang:"python", "print(\\"hi\\")\n")\n'

    def test_code_block_without_language(self) -> None:
        """Test that the lang argument is omitted without an info string."""
        assert render_markdown("```\nplain\n```") == '#raw(block:true, "plain\n")\n'

    def test_raw_passthrough(self) -> None:
        """Test that the code block after a raw marker is emitted verbatim."""
        result = render_markdown("<!--raw-typst-->\n```typst\n#set page(width: 10cm)\n```")
        assert result == "#set page(width: 10cm)\n"

    def test_raw_flag_consumed_once(self) -> None:
        """Test that only the next code block is passed through."""
        result = render_markdown("<!--raw-typst-->\n\n```\n#a\n```\n\n```\nb\n```")
        assert result == '#a\n#raw(block:true, "b\n")\n'

    def test_raw_literal_unmodified(self) -> None:
        """Test that a raw literal is emitted exactly as written, without a newline added."""
        doc = Document(children=[HTMLBlock(content="<!--raw-typst-->"), CodeBlock(content="#pagebreak()")])
        assert TypstRenderer().render_to_string(doc) == "#pagebreak()"

    def test_empty_raw_block_emits_nothing(self) -> None:
        """Test that an empty raw block contributes no output."""
        doc = Document(children=[HTMLBlock(content="<!--raw-typst-->"), CodeBlock(content="")])
        assert TypstRenderer().render_to_string(doc) == ""


@pytest.mark.unit
class TestExclusion:
    """Tests for exclusion ranges."""

    def test_range_dropped(self) -> None:
        """Test that everything between the markers is dropped."""
        markdown = (
            "Keep\n\n"
            "<!--typst-begin-exclude-->\n\n"
            "# Gone\n\n"
            "Drop *me*\n\n"
            "| A |\n|---|\n| 1 |\n\n"
            "<!--typst-end-exclude-->\n\n"
            "Also keep"
        )
        assert render_markdown(markdown) == "Keep\n\nAlso keep\n\n"

    def test_unclosed_range_drops_rest(self) -> None:
        """Test that a range without an end marker runs to the end of the document."""
        assert render_markdown("Keep\n\n<!--typst-begin-exclude-->\n\nDrop") == "Keep\n\n"

    def test_inline_end_marker_inside_excluded_paragraph(self) -> None:
        """Test that an inline end marker is found while its paragraph is being skipped."""
        markdown = "<!--typst-begin-exclude-->\n\nhidden <!--typst-end-exclude--> shown"
        assert render_markdown(markdown) == " shown\n\n"

    def test_directives_ignored_while_excluding(self) -> None:
        """Test that a raw marker inside an excluded range is not applied."""
        markdown = (
            "<!--typst-begin-exclude-->\n\n"
            "<!--raw-typst-->\n\n"
            "<!--typst-end-exclude-->\n\n"
            "```\ncode\n```"
        )
        assert render_markdown(markdown) == '#raw(block:true, "code\n")\n'

    def test_ranges_do_not_nest(self) -> None:
        """Test that the first end marker closes the range."""
        markdown = (
            "<!--typst-begin-exclude-->\n\n"
            "<!--typst-begin-exclude-->\n\n"
            "a\n\n"
            "<!--typst-end-exclude-->\n\n"
            "b\n\n"
            "<!--typst-end-exclude-->\n\n"
            "c"
        )
        assert render_markdown(markdown) == "b\n\nc\n\n"

    def test_end_marker_inside_block_quote(self) -> None:
        """Test that a quote whose end marker is nested inside it is not captured on exit."""
        markdown = "<!--typst-begin-exclude-->\n\n> hidden\n>\n> <!--typst-end-exclude-->\n>\n> shown\n"
        result = render_markdown(markdown)

        assert "hidden" not in result
        assert result.count("shown") == 1
        assert "#quote" not in result
        assert result == "shown\n\n"

    def test_end_marker_inside_list_item(self) -> None:
        """Test that a list item whose end marker is nested inside it is not captured on exit."""
        item = ListItem(
            children=[
                Paragraph(content=[Text(content="hidden")]),
                HTMLBlock(content=END_EXCLUDE),
                Paragraph(content=[Text(content="shown")]),
            ]
        )
        doc = Document(children=[HTMLBlock(content=BEGIN_EXCLUDE), List(ordered=False, items=[item])])
        result = TypstRenderer().render_to_string(doc)

        assert "hidden" not in result
        assert result.count("shown") == 1
        assert "[" not in result

    def test_end_marker_inside_table_cell(self) -> None:
        """Test that a table whose end marker sits in a cell is neither rendered nor consumes metadata."""
        cell = TableCell(content=[Text(content="hidden"), HTMLInline(content=END_EXCLUDE), Text(content="shown")])
        table = Table(header=TableHeader(rows=[TableRow(cells=[cell])]), rows=[])
        doc = Document(
            children=[
                HTMLBlock(content="<!--typst-table\nlabel: t\n-->"),
                HTMLBlock(content=BEGIN_EXCLUDE),
                table,
                create_table(["A"], [["1"]]),
            ]
        )
        result = TypstRenderer().render_to_string(doc)

        assert "hidden" not in result
        assert result.count("shown") == 1
        assert result.count("#figure(") == 1
        assert result.endswith(") <tab:t>\n")

    def test_end_marker_inside_image_alt_text(self) -> None:
        """Test that an image whose end marker sits in its alt text is not rendered on exit."""
        image = Image(
            url="cat.png",
            content=[Text(content="hidden "), HTMLInline(content=END_EXCLUDE), Text(content=" alt")],
        )
        doc = Document(children=[HTMLBlock(content=BEGIN_EXCLUDE), Paragraph(content=[image])])
        result = TypstRenderer().render_to_string(doc)

        assert "hidden" not in result
        assert "#figure" not in result
        assert result == " alt\n\n"


@pytest.mark.unit
class TestListAndQuoteRendering:
    """Tests for lists and block quotes."""

    def test_bullet_list(self) -> None:
        """Test that a bullet list becomes #list with trimmed items."""
        assert render_markdown("- a\n- *b*") == "#list([a],\n[#emph[b]],\n)\n\n"

    def test_ordered_list_start(self) -> None:
        """Test that an ordered list becomes #enum with its start number."""
        assert render_markdown("3. x\n4. y") == "#enum(start:3,[x],\n[y],\n)\n\n"

    def test_nested_list(self) -> None:
        """Test that a nested list is captured inside its parent item."""
        result = render_markdown("- outer\n  - inner")
        assert result == "#list([outer\n\n#list([inner],\n)],\n)\n\n"

    def test_block_quote_capture(self) -> None:
        """Test that the quote body is rendered, trimmed and embedded as a string."""
        assert render_markdown("> Hello *world*") == '\n#quote(block:true, "Hello #emph[world]")\n\n'

    def test_block_quote_escaped(self) -> None:
        """Test that quotes in the quote body are escaped."""
        assert '#quote(block:true, "say \\"hi\\"")' in render_markdown('> say "hi"')

    def test_thematic_break(self) -> None:
        """Test that a horizontal rule becomes a full-width line."""
        assert "#line(length:100%)\n" in render_markdown("a\n\n***\n\nb")


@pytest.mark.unit
class TestTableRendering:
    """Tests for table rendering."""

    def test_table_layout(self) -> None:
        """Test the complete figure emitted for a simple table."""
        doc = Document(children=[create_table(["A", "B"], [["1", "2"]])])
        result = TypstRenderer().render_to_string(doc)

        assert result == (
            "#figure(\n"
            "  placement: none,\n"
            "  table(\n"
            "    columns: 2,\n"
            "    table.header([A],[B],\n"
            "    ),\n"
            "    [1],[2],\n"
            "  ),\n"
            ")\n"
        )

    def test_columns_inferred_from_header(self) -> None:
        """Test that the column count is the number of header cells."""
        result = render_markdown("| A | B | C |\n|---|---|---|\n| 1 | 2 | 3 |")
        assert "columns: 3," in result

    def test_columns_default_without_header_cells(self) -> None:
        """Test that a table without header cells gets one column."""
        doc = Document(children=[Table(rows=[TableRow(cells=[TableCell(content=[Text(content="x")])])])])
        assert "columns: 1," in TypstRenderer().render_to_string(doc)

    def test_table_metadata(self) -> None:
        """Test that table metadata sets caption, columns, alignment and label."""
        markdown = (
            "<!--typst-table\n"
            'caption: "Measured values"\n'
            "placement: top\n"
            "columns: (1fr, 2fr)\n"
            "align: (left, right)\n"
            "label: res\n"
            "-->\n\n"
            "| A | B |\n|---|---|\n| 1 | 2 |"
        )
        result = render_markdown(markdown)

        assert "  caption: [Measured values],\n" in result
        assert "  placement: top,\n" in result
        assert "    columns: (1fr, 2fr),\n" in result
        assert "    align: (left, right),\n" in result
        assert result.endswith(") <tab:res>\n")

    def test_table_metadata_consumed_once(self) -> None:
        """Test that metadata applies only to the next table."""
        markdown = (
            "<!--typst-table\ncaption: First\n-->\n\n"
            "| A |\n|---|\n| 1 |\n\n"
            "text\n\n"
            "| B |\n|---|\n| 2 |"
        )
        result = render_markdown(markdown)
        assert result.count("caption:") == 1

    def test_unconsumed_metadata_discarded(self) -> None:
        """Test that metadata with no following table produces no output."""
        assert render_markdown("<!--typst-table\ncaption: x\n-->\n\ntext") == "text\n\n"

    def test_cell_formatting(self) -> None:
        """Test that inline formatting inside cells is rendered."""
        result = render_markdown("| **A** |\n|---|\n| `x` |")
        assert "table.header([#strong[A]]," in result
        assert '[#raw(block:false, "x")],' in result

    def test_missing_template_falls_back(self, tmp_path: Path) -> None:
        """Test that a missing table template yields the placeholder."""
        options = TypstRendererOptions(template_dir=tmp_path)
        doc = Document(children=[create_table(["A"], [["1"]])])
        assert TypstRenderer(options).render_to_string(doc) == "#table( ... )\n"

    def test_missing_template_strict(self, tmp_path: Path) -> None:
        """Test that strict mode raises instead of falling back."""
        options = TypstRendererOptions(template_dir=tmp_path, fail_on_resource_errors=True)
        doc = Document(children=[create_table(["A"], [["1"]])])
        with pytest.raises(TemplateRenderError):
            TypstRenderer(options).render_to_string(doc)


@pytest.mark.unit
class TestResolveTableColumns:
    """Tests for resolve_table_columns()."""

    def test_meta_columns_verbatim(self) -> None:
        """Test that explicit columns win over inference."""
        table = create_table(["A", "B"], [])
        assert resolve_table_columns(table, TableMeta(columns="(auto, 1fr)")) == "(auto, 1fr)"

    def test_header_cell_count(self) -> None:
        """Test inference from the header cells."""
        table = create_table(["A", "B", "C", "D"], [["1", "2", "3", "4"]])
        assert resolve_table_columns(table, TableMeta()) == "4"

    def test_empty_header(self) -> None:
        """Test that an empty header gives one column."""
        assert resolve_table_columns(create_table([], [["1", "2"]]), TableMeta()) == "1"

    def test_no_header(self) -> None:
        """Test that a table without a header gives one column."""
        assert resolve_table_columns(Table(), TableMeta()) == "1"


@pytest.mark.unit
class TestImageRendering:
    """Tests for images rendered as figures."""

    def test_image_with_label(self) -> None:
        """Test that image metadata labels the figure and alt text becomes the caption."""
        result = render_markdown("<!--typst-image\nlabel: fig1\n-->\n\n![a cat](cat.png)")
        assert result == '#figure(\n  placement: none,\n  image("cat.png"),\n  caption: [a cat],\n) <fig:fig1>\n\n\n'

    def test_image_without_alt_text(self) -> None:
        """Test that an image without alt text has no caption."""
        result = render_markdown("![](plot.svg)")
        assert "caption" not in result
        assert 'image("plot.svg"),' in result

    def test_image_label_consumed_once(self) -> None:
        """Test that the label applies only to the next image."""
        result = render_markdown("<!--typst-image\nlabel: one\n-->\n\n![a](a.png)\n\n![b](b.png)")
        assert result.count("<fig:") == 1
        assert "<fig:one>" in result

    def test_image_path_escaped(self) -> None:
        """Test that the image path is escaped."""
        doc = Document(children=[Paragraph(content=[Image(url="dir\\a\".png")])])
        result = TypstRenderer().render_to_string(doc)
        assert 'image("dir\\\\a\\".png"),' in result

    def test_missing_template_falls_back(self, tmp_path: Path) -> None:
        """Test that a missing figure template yields the placeholder."""
        options = TypstRendererOptions(template_dir=tmp_path)
        result = render_markdown("![a cat](cat.png)", options)
        assert result == '#figure( image: "cat.png" )\n\n\n'


@pytest.mark.unit
class TestMathRendering:
    """Tests for display math."""

    def test_block_math(self) -> None:
        """Test that display math is spaced inside dollars."""
        assert render_markdown("$$\nx^2\n$$") == "$ x^2 $\n\n"


@pytest.mark.unit
class TestCaptureIsolation:
    """Tests for state handling across captured children."""

    def test_fork_copies_flags_with_fresh_buffer(self) -> None:
        """Test that a forked state shares flags by value and not the buffer."""
        state = RenderState(pending_raw=True, pending_table_meta=TableMeta(label="t"))
        state.emit("parent")

        child = state.fork()
        child.pending_raw = False
        child.emit("child")

        assert state.pending_raw is True
        assert child.pending_table_meta == TableMeta(label="t")
        assert state.text() == "parent"
        assert child.text() == "child"

    def test_directive_consumed_in_capture_stays_pending(self) -> None:
        """Test that a raw flag consumed inside a list item is still set for the parent."""
        doc = Document(
            children=[
                HTMLBlock(content="<!--raw-typst-->"),
                List(ordered=False, items=[ListItem(children=[CodeBlock(content="x\n")])]),
                CodeBlock(content="y\n"),
            ]
        )
        assert TypstRenderer().render_to_string(doc) == "#list([x],\n)\n\ny\n"

    def test_directive_set_in_capture_not_leaked(self) -> None:
        """Test that a directive seen inside a list item does not reach the parent."""
        doc = Document(
            children=[
                List(ordered=False, items=[ListItem(children=[HTMLBlock(content="<!--raw-typst-->")])]),
                CodeBlock(content="z\n"),
            ]
        )
        assert TypstRenderer().render_to_string(doc) == '#list([],\n)\n\n#raw(block:true, "z\n")\n'

    def test_renderer_reusable(self) -> None:
        """Test that state does not carry over between renders."""
        renderer = TypstRenderer()
        excluded = Document(children=[HTMLBlock(content="<!--typst-begin-exclude-->")])
        plain = Document(children=[Paragraph(content=[Text(content="ok")])])

        assert renderer.render_to_string(excluded) == ""
        assert renderer.render_to_string(plain) == "ok\n\n"


@pytest.mark.unit
class TestRendererOptions:
    """Tests for options validation and output."""

    def test_wrong_options_type(self) -> None:
        """Test that parser options are rejected by the renderer."""
        with pytest.raises(InvalidOptionsError):
            TypstRenderer(MarkdownParserOptions())  # type: ignore[arg-type]

    def test_render_to_stream(self) -> None:
        """Test rendering into a text stream."""
        doc = Document(children=[Paragraph(content=[Text(content="hi")])])
        buffer = StringIO()
        TypstRenderer().render(doc, buffer)
        assert buffer.getvalue() == "hi\n\n"

    def test_render_to_file(self, tmp_path: Path) -> None:
        """Test rendering into a file path."""
        doc = Document(children=[Paragraph(content=[Text(content="hi")])])
        target = tmp_path / "out.typ"
        TypstRenderer().render(doc, target)
        assert target.read_text(encoding="utf-8") == "hi\n\n"
