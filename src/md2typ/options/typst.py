#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/options/typst.py
"""Configuration options for Typst rendering.

This module defines options for rendering the document tree to Typst source.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from md2typ.constants import DEFAULT_HEADING_OFFSET, DEFAULT_REPORT_TEMPLATE
from md2typ.options.base import BaseRendererOptions


@dataclass(frozen=True)
class TypstRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-Typst rendering.

    Parameters
    ----------
    heading_offset : int, default 1
        Number added to ``level - 1`` to get the count of ``=`` markers. With
        the default, a level-1 Markdown heading becomes a level-1 Typst heading.
    template_dir : str, Path or None, default None
        Directory holding ``table.typ.jinja2``, ``figure.typ.jinja2`` and
        ``header.typ.jinja2``. None uses the templates shipped with md2typ.
    report_template : str, default "../../typst-templates/report/report.typ"
        Path of the Typst report template imported by the generated header.

    Examples
    --------
    Shift every heading one level down:
        >>> options = TypstRendererOptions(heading_offset=2)

    """

    heading_offset: int = field(
        default=DEFAULT_HEADING_OFFSET,
        metadata={"help": "Number of '=' markers for a level-1 heading", "type": int, "importance": "core"},
    )
    template_dir: Optional[Union[str, Path]] = field(
        default=None,
        metadata={"help": "Directory with table/figure/header Jinja2 templates", "importance": "advanced"},
    )
    report_template: str = field(
        default=DEFAULT_REPORT_TEMPLATE,
        metadata={"help": "Typst report template imported by the header", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for Typst renderer options.

        Raises
        ------
        ValueError
            If heading_offset is negative.

        """
        if self.heading_offset < 0:
            raise ValueError(f"heading_offset must be non-negative, got {self.heading_offset}")
