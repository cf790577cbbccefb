#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility modules for md2typ."""

from md2typ.utils.escape import escape_typst_string
from md2typ.utils.io_utils import derive_output_path, write_content
from md2typ.utils.metadata import Author, ReportMetadata

__all__ = [
    "escape_typst_string",
    "derive_output_path",
    "write_content",
    "Author",
    "ReportMetadata",
]
