#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/utils/escape.py
"""Typst text escaping utilities.

Literal text that the renderer embeds inside a quoted Typst string (inline
code, code blocks, math, link and image destinations, captions, quote bodies)
must not terminate or corrupt the string. Structural text emitted directly as
Typst syntax is never escaped.

"""

from __future__ import annotations


def escape_typst_string(text: str) -> str:
    r"""Escape text for use inside a double-quoted Typst string literal.

    Every backslash and every double quote is prefixed with a backslash. All
    other characters, including raw newlines, pass through unchanged.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe to place between double quotes

    Notes
    -----
    The function is not idempotent: escaping an already escaped string
    doubles the backslashes again.

    Examples
    --------
        >>> escape_typst_string('say "hi"')
        'say \\"hi\\"'
        >>> escape_typst_string("C:\\temp")
        'C:\\\\temp'

    """
    if not text:
        return text

    # Backslash first so the escapes added for quotes are not doubled
    return text.replace("\\", "\\\\").replace('"', '\\"')


__all__ = ["escape_typst_string"]
