#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/directives.py
"""Directive comments embedded in Markdown reports.

Authors steer the Typst output with HTML comments that a Markdown viewer
hides. Five forms are recognized:

``<!--typst-begin-exclude-->`` / ``<!--typst-end-exclude-->``
    Drop everything between the two markers from the output.
``<!--raw-typst-->``
    Emit the next fenced code block verbatim as Typst source.
``<!--typst-table ... -->``
    Caption, placement, columns, alignment and label of the next table.
``<!--typst-image ... -->``
    Label of the next image.

The metadata forms carry newline-delimited ``key: value`` pairs, for example::

    <!--typst-table
    caption: "Measured values"
    columns: (1fr, 2fr)
    label: results
    -->

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from md2typ.ast.nodes import HTMLBlock, HTMLInline, Node
from md2typ.constants import (
    BEGIN_EXCLUDE_MARKER,
    COMMENT_CLOSE,
    DEFAULT_TABLE_PLACEMENT,
    END_EXCLUDE_MARKER,
    IMAGE_META_KEYS,
    IMAGE_META_MARKER,
    RAW_TYPST_MARKER,
    TABLE_META_KEYS,
    TABLE_META_MARKER,
)

logger = logging.getLogger(__name__)


class DirectiveKind(Enum):
    """Kind of a recognized directive comment."""

    BEGIN_EXCLUDE = "begin_exclude"
    END_EXCLUDE = "end_exclude"
    TABLE_META = "table_meta"
    IMAGE_META = "image_meta"
    RAW_TYPST = "raw_typst"


@dataclass(frozen=True)
class TableMeta:
    """Table metadata announced by a ``<!--typst-table`` comment.

    Empty strings mean "infer" (columns) or "omit" (caption, align, label).

    Parameters
    ----------
    caption : str
        Figure caption for the table
    placement : str
        Typst figure placement, ``none`` unless given
    columns : str
        Typst ``columns:`` expression, emitted verbatim
    align : str
        Typst ``align:`` expression, emitted verbatim
    label : str
        Reference label, emitted as ``<tab:label>``

    """

    caption: str = ""
    placement: str = DEFAULT_TABLE_PLACEMENT
    columns: str = ""
    align: str = ""
    label: str = ""


@dataclass(frozen=True)
class ImageMeta:
    """Image metadata announced by a ``<!--typst-image`` comment."""

    label: str = ""


@dataclass(frozen=True)
class Directive:
    """A recognized directive comment.

    Parameters
    ----------
    kind : DirectiveKind
        Which directive was found
    table_meta : TableMeta or None
        Parsed metadata for TABLE_META directives
    image_meta : ImageMeta or None
        Parsed metadata for IMAGE_META directives

    """

    kind: DirectiveKind
    table_meta: Optional[TableMeta] = None
    image_meta: Optional[ImageMeta] = None


def _comment_body(literal: str, marker: str) -> str:
    """Return the text between ``marker`` and the next closing ``-->``.

    An unterminated comment extends to the end of the literal.
    """
    start = literal.find(marker) + len(marker)
    end = literal.find(COMMENT_CLOSE, start)
    if end == -1:
        return literal[start:]
    return literal[start:end]


def parse_key_values(body: str, allowed_keys: frozenset[str]) -> dict[str, str]:
    """Parse newline-delimited ``key: value`` pairs.

    Each line is split on its first colon; key and value are stripped and
    surrounding double quotes are removed from the value. Blank lines, lines
    without a colon and keys outside ``allowed_keys`` are ignored. When a key
    repeats, the last value wins.

    Parameters
    ----------
    body : str
        Comment body to parse
    allowed_keys : frozenset of str
        Keys to keep

    Returns
    -------
    dict
        Recognized keys mapped to their values

    Examples
    --------
        >>> parse_key_values('caption: "Results"\\nfoo: bar', frozenset({"caption"}))
        {'caption': 'Results'}

    """
    values: dict[str, str] = {}
    for raw_line in body.splitlines():
        line = raw_line.strip()
        if not line or ":" not in line:
            continue
        key, _, value = line.partition(":")
        key = key.strip()
        if key not in allowed_keys:
            logger.debug(f"Ignoring unknown directive key: {key!r}")
            continue
        values[key] = value.strip().strip('"')
    return values


def parse_table_meta(body: str) -> TableMeta:
    """Parse the body of a ``<!--typst-table`` comment into TableMeta."""
    return TableMeta(**parse_key_values(body, TABLE_META_KEYS))


def parse_image_meta(body: str) -> ImageMeta:
    """Parse the body of a ``<!--typst-image`` comment into ImageMeta."""
    return ImageMeta(**parse_key_values(body, IMAGE_META_KEYS))


def parse_directive(literal: str) -> Optional[Directive]:
    """Recognize a directive in the literal text of a raw HTML node.

    Markers are matched as substrings, in priority order: begin-exclude,
    end-exclude, table metadata, image metadata, raw passthrough. A marker
    inside an otherwise unrelated comment is therefore still recognized.

    Parameters
    ----------
    literal : str
        Verbatim content of an HTMLInline or HTMLBlock node

    Returns
    -------
    Directive or None
        The recognized directive, or None for ordinary HTML

    Examples
    --------
        >>> parse_directive("<!--typst-image\\nlabel: fig1\\n-->").image_meta
        ImageMeta(label='fig1')
        >>> parse_directive("<br>") is None
        True

    """
    if BEGIN_EXCLUDE_MARKER in literal:
        return Directive(DirectiveKind.BEGIN_EXCLUDE)
    if END_EXCLUDE_MARKER in literal:
        return Directive(DirectiveKind.END_EXCLUDE)
    if TABLE_META_MARKER in literal:
        return Directive(
            DirectiveKind.TABLE_META, table_meta=parse_table_meta(_comment_body(literal, TABLE_META_MARKER))
        )
    if IMAGE_META_MARKER in literal:
        return Directive(
            DirectiveKind.IMAGE_META, image_meta=parse_image_meta(_comment_body(literal, IMAGE_META_MARKER))
        )
    if RAW_TYPST_MARKER in literal:
        return Directive(DirectiveKind.RAW_TYPST)
    return None


def is_end_exclude(node: Node) -> bool:
    """Return True if ``node`` is raw HTML carrying the end-exclude marker."""
    if isinstance(node, (HTMLInline, HTMLBlock)):
        return END_EXCLUDE_MARKER in node.content
    return False


__all__ = [
    "DirectiveKind",
    "TableMeta",
    "ImageMeta",
    "Directive",
    "parse_key_values",
    "parse_table_meta",
    "parse_image_meta",
    "parse_directive",
    "is_end_exclude",
]
