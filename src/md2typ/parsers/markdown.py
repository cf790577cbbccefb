#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/parsers/markdown.py
"""Markdown to AST converter.

This module converts Markdown reports to the md2typ AST using the mistune
parser with the table, strikethrough and math plugins. Before the Markdown
itself is parsed, a leading YAML front matter block is split off and
``{{ path }}`` include lines are replaced with the content of the named file.

"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import IO, Any, Optional, Union

from md2typ.ast import (
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
from md2typ.constants import DEPS_MARKDOWN, DEPS_YAML
from md2typ.exceptions import Md2TypError, ParsingError
from md2typ.options.markdown import MarkdownParserOptions
from md2typ.parsers.base import BaseParser
from md2typ.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"
INCLUDE_PATTERN = re.compile(r"^\s*\{\{\s*(?P<path>[^{}]+?)\s*\}\}\s*$")


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    Parsing a file, with includes resolved next to it:

        >>> doc = MarkdownToAstConverter().parse(Path("report/main.md"))

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Markdown input into AST Document.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Markdown input to parse. A str is the Markdown text itself; a
            Path is read as a UTF-8 file.

        Returns
        -------
        Document
            AST document node whose metadata holds the front matter mapping

        Raises
        ------
        ParsingError
            If the front matter is not valid YAML or mistune fails

        """
        markdown_content = self._load_text_content(input_data)
        base_dir = self._resolve_base_dir(input_data)

        frontmatter: dict[str, Any] = {}
        if self.options.parse_frontmatter:
            markdown_content, frontmatter = self._extract_frontmatter(markdown_content)

        if self.options.parse_includes:
            markdown_content = self._expand_includes(markdown_content, base_dir, depth=0)

        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_math:
            plugins.append("math")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        try:
            with debug_timer(logger, "Parsing (markdown)"):
                tokens, _state = markdown.parse(markdown_content)
                children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        except Md2TypError:
            raise
        except Exception as e:
            raise ParsingError(
                f"Failed to parse Markdown: {e}", parsing_stage="markdown_parsing", original_error=e
            ) from e

        return Document(children=children, metadata=frontmatter)

    def _resolve_base_dir(self, input_data: Any) -> Path:
        """Return the directory include paths are resolved against."""
        if self.options.base_dir is not None:
            return Path(self.options.base_dir)
        if isinstance(input_data, Path):
            return input_data.parent
        return Path.cwd()

    # ------------------------------------------------------------------
    # Front matter and includes
    # ------------------------------------------------------------------

    @requires_dependencies("frontmatter", DEPS_YAML)
    def _extract_frontmatter(self, content: str) -> tuple[str, dict[str, Any]]:
        """Split a leading YAML front matter block off the content.

        The block starts with a first line consisting of ``---`` and runs to
        the next such line, or to the end of the content when unterminated.

        Parameters
        ----------
        content : str
            Markdown content

        Returns
        -------
        tuple[str, dict]
            (remaining_content, front matter mapping); the mapping is empty
            when no front matter is present

        Raises
        ------
        ParsingError
            If the block is not valid YAML or is not a mapping

        """
        lines = content.split("\n")
        if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
            return content, {}

        end_index = len(lines)
        for i in range(1, len(lines)):
            if lines[i].strip() == FRONTMATTER_DELIMITER:
                end_index = i
                break

        yaml_content = "\n".join(lines[1:end_index])
        remaining_content = "\n".join(lines[end_index + 1 :])

        import yaml

        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ParsingError(
                f"Invalid YAML front matter: {e}", parsing_stage="frontmatter", original_error=e
            ) from e

        if data is None:
            return remaining_content, {}
        if not isinstance(data, dict):
            raise ParsingError(
                f"YAML front matter must be a mapping, got {type(data).__name__}", parsing_stage="frontmatter"
            )

        logger.debug(f"Extracted front matter keys: {sorted(data)}")
        return remaining_content, data

    def _expand_includes(self, content: str, base_dir: Path, depth: int) -> str:
        """Replace ``{{ path }}`` lines with the content of the named files.

        Included files are expanded recursively, relative to their own
        directory. Missing or unreadable files are logged and dropped.

        Parameters
        ----------
        content : str
            Markdown content
        base_dir : Path
            Directory relative paths are resolved against
        depth : int
            Current include nesting depth

        Returns
        -------
        str
            Content with include lines expanded

        """
        if "{{" not in content:
            return content

        output: list[str] = []
        for line in content.split("\n"):
            match = INCLUDE_PATTERN.match(line)
            if not match:
                output.append(line)
                continue

            include_path = base_dir / match.group("path")
            if depth >= self.options.max_include_depth:
                logger.warning(
                    f"Include depth limit ({self.options.max_include_depth}) reached, skipping: {include_path}"
                )
                continue

            try:
                included = include_path.read_text(encoding="utf-8-sig")
            except OSError as e:
                logger.warning(f"Could not include {include_path}: {e}")
                continue

            logger.debug(f"Including {include_path}")
            output.append(self._expand_includes(included.rstrip("\n"), include_path.parent, depth + 1))

        return "\n".join(output)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes.

        Parameters
        ----------
        tokens : list of dict
            Mistune token dictionaries

        Returns
        -------
        list of Node
            AST nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune block token into an AST node."""
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))
        elif token_type == "block_math":
            return MathBlock(content=token.get("raw", "").strip())

        # blank_line and anything unknown
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token."""
        attrs = token.get("attrs") or {}
        level = attrs.get("level", 1)
        if not isinstance(level, int) or not 1 <= level <= 6:
            level = 1

        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs'

        Returns
        -------
        CodeBlock
            Code block AST node; ``language`` is the first word of the info string

        """
        attrs = token.get("attrs") or {}
        info_string = (attrs.get("info") or "").strip()
        parts = info_string.split(maxsplit=1)
        language = parts[0] if parts else None

        return CodeBlock(
            content=token.get("raw", ""),
            language=language,
            info_string=info_string or None,
        )

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'tight' and 'attrs' (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs") or {}
        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        tight = token.get("tight", attrs.get("tight", True))

        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in token.get("children", [])
            if child.get("type") == "list_item"
        ]

        return List(ordered=ordered, items=items, start=start, tight=tight)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        Mistune places the header cells directly under ``table_head``; they
        are wrapped in a single TableRow inside a TableHeader.

        Parameters
        ----------
        token : dict
            Table token with 'table_head' and 'table_body' children

        Returns
        -------
        Table
            Table AST node

        """
        header = None
        rows: list[TableRow] = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                cells = self._process_table_cells(section.get("children", []))
                header = TableHeader(rows=[TableRow(cells=cells)])
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    rows.append(TableRow(cells=self._process_table_cells(row_token.get("children", []))))

        return Table(header=header, rows=rows)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        cells = []
        for cell_token in cell_tokens:
            if cell_token.get("type") != "table_cell":
                continue
            attrs = cell_token.get("attrs") or {}
            cells.append(
                TableCell(
                    content=self._process_inline_tokens(cell_token.get("children", [])),
                    alignment=attrs.get("align"),
                )
            )
        return cells

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(content=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = token.get("attrs") or {}
        return Link(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title"),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token; the alt text stays as inline children."""
        attrs = token.get("attrs") or {}
        return Image(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title"),
        )

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=True)

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _handle_inline_math_token(self, token: dict[str, Any]) -> MathInline:
        return MathInline(content=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Optional[Node]:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node, or None for unknown token types

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "strikethrough": self._handle_strikethrough_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "inline_html": self._handle_inline_html_token,
            "inline_math": self._handle_inline_math_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug(f"Ignoring unsupported inline token: {token_type}")
        return None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown string to AST.

    This is a convenience function that creates a converter and parses
    the markdown in one step.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from md2typ.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    converter = MarkdownToAstConverter(options)
    return converter.parse(markdown_content)
