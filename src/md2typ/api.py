"""The major exported API functions for Markdown to Typst conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2typ/api.py
import logging
from pathlib import Path
from typing import Optional, Union

from md2typ.ast.nodes import Document
from md2typ.exceptions import FileNotFoundError as Md2TypFileNotFoundError
from md2typ.exceptions import OutputWriteError
from md2typ.options.markdown import MarkdownParserOptions
from md2typ.options.typst import TypstRendererOptions
from md2typ.parsers.markdown import MarkdownToAstConverter
from md2typ.renderers.typst import TypstRenderer
from md2typ.utils.io_utils import derive_output_path, write_content
from md2typ.utils.metadata import ReportMetadata

logger = logging.getLogger(__name__)


def document_to_typst(
    doc: Document,
    renderer_options: Optional[TypstRendererOptions] = None,
    include_header: bool = True,
) -> str:
    """Render a parsed document to Typst source.

    Parameters
    ----------
    doc : Document
        Parsed document; its metadata holds the front matter mapping
    renderer_options : TypstRendererOptions, optional
        Rendering options
    include_header : bool, default True
        Prepend the report header when the document has front matter

    Returns
    -------
    str
        Typst source

    Raises
    ------
    TemplateRenderError
        If the header template fails, or a table or figure template fails
        with ``fail_on_resource_errors`` set

    """
    renderer = TypstRenderer(renderer_options)
    body = renderer.render_to_string(doc)

    if not include_header or not doc.metadata:
        return body

    metadata = ReportMetadata.from_dict(doc.metadata)
    header = renderer.templates.render_header(metadata)
    return header + "\n" + body


def markdown_to_typst(
    text: str,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[TypstRendererOptions] = None,
    include_header: bool = True,
) -> str:
    """Convert Markdown text to Typst source.

    Parameters
    ----------
    text : str
        Markdown source, optionally starting with YAML front matter
    parser_options : MarkdownParserOptions, optional
        Parsing options
    renderer_options : TypstRendererOptions, optional
        Rendering options
    include_header : bool, default True
        Prepend the report header when front matter is present

    Returns
    -------
    str
        Typst source

    Examples
    --------
        >>> markdown_to_typst("**bold** and *italic*")
        '#strong[bold] and #emph[italic]\\n\\n'

    """
    doc = MarkdownToAstConverter(parser_options).parse(text)
    return document_to_typst(doc, renderer_options, include_header)


def convert(
    input_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[TypstRendererOptions] = None,
    include_header: bool = True,
) -> Path:
    """Convert a Markdown file to a Typst file.

    Include directives are resolved relative to the input file unless
    ``parser_options.base_dir`` is set.

    Parameters
    ----------
    input_path : str or Path
        Markdown file to read
    output_path : str or Path, optional
        Typst file to write; derived from ``input_path`` when omitted
    parser_options : MarkdownParserOptions, optional
        Parsing options
    renderer_options : TypstRendererOptions, optional
        Rendering options
    include_header : bool, default True
        Prepend the report header when front matter is present

    Returns
    -------
    Path
        Path of the written Typst file

    Raises
    ------
    FileNotFoundError
        If the input file does not exist
    OutputWriteError
        If the output file cannot be written

    """
    source = Path(input_path)
    if not source.is_file():
        raise Md2TypFileNotFoundError(str(source))

    target = Path(output_path) if output_path is not None else derive_output_path(source)
    logger.info(f"Converting {source} -> {target}")

    doc = MarkdownToAstConverter(parser_options).parse(source)
    typst = document_to_typst(doc, renderer_options, include_header)

    try:
        write_content(typst, target)
    except OSError as e:
        raise OutputWriteError(str(target), original_error=e) from e

    return target


__all__ = ["convert", "document_to_typst", "markdown_to_typst", "derive_output_path"]
