#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/utils/io_utils.py
"""I/O utilities for reading Markdown sources and writing Typst output."""

from __future__ import annotations

import io
from io import StringIO
from pathlib import Path
from typing import IO, Union

from md2typ.constants import MARKDOWN_EXTENSION, TYPST_EXTENSION


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str], None]) -> Union[StringIO, None]:
    """Write Typst text to an output destination or return it as a file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], IO[str], or None
        Output destination. Can be:
        - None: Returns content as StringIO
        - str or Path: Writes content to file at that path (UTF-8)
        - IO[bytes]: Writes UTF-8 encoded content to a binary file-like object
        - IO[str]: Writes content to a text file-like object

    Returns
    -------
    StringIO or None
        StringIO if output is None, otherwise None after writing

    Raises
    ------
    TypeError
        If output type is not supported

    Examples
    --------
        >>> write_content("= Title\\n", "report.typ")
        >>> Path("report.typ").read_text()
        '= Title\\n'

    """
    if output is None:
        return StringIO(content)

    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return None

    if hasattr(output, "write"):
        if isinstance(output, StringIO) or isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        if is_binary_mode:
            output.write(content.encode("utf-8"))  # type: ignore[arg-type]
        else:
            output.write(content)  # type: ignore[arg-type]
        return None

    raise TypeError(f"Unsupported output type: {type(output)}")


def derive_output_path(input_path: Union[str, Path]) -> Path:
    """Derive the default Typst output path for a Markdown input path.

    A trailing ``.md`` extension (matched case-insensitively) is replaced with
    ``.typ``; any other name gets ``.typ`` appended.

    Parameters
    ----------
    input_path : str or Path
        Path of the Markdown source

    Returns
    -------
    Path
        Output path next to the input

    Examples
    --------
        >>> derive_output_path("notes/Report.MD")
        PosixPath('notes/Report.typ')
        >>> derive_output_path("notes/report.txt")
        PosixPath('notes/report.txt.typ')

    """
    path = Path(input_path)
    name = path.name
    if name.lower().endswith(MARKDOWN_EXTENSION):
        name = name[: -len(MARKDOWN_EXTENSION)]
    return path.with_name(name + TYPST_EXTENSION)


__all__ = ["write_content", "derive_output_path"]
