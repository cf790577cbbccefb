#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/renderers/templates.py
"""Jinja2 templates for Typst tables, figures and the report header.

Tables, figures and the report preamble have a fixed Typst shape with a few
optional fields. They are produced from Jinja2 templates so that a report
pipeline can restyle them by pointing ``template_dir`` at its own copies of
``table.typ.jinja2``, ``figure.typ.jinja2`` and ``header.typ.jinja2``.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from jinja2 import Environment

from md2typ.constants import (
    DEFAULT_FIGURE_PLACEMENT,
    DEFAULT_REPORT_TEMPLATE,
    DEFAULT_TABLE_PLACEMENT,
    DEPS_JINJA,
    FIGURE_TEMPLATE_NAME,
    HEADER_TEMPLATE_NAME,
    TABLE_TEMPLATE_NAME,
)
from md2typ.exceptions import TemplateRenderError
from md2typ.utils.decorators import requires_dependencies
from md2typ.utils.escape import escape_typst_string
from md2typ.utils.metadata import ReportMetadata

logger = logging.getLogger(__name__)

PACKAGE_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


@dataclass(frozen=True)
class TableData:
    """Fields handed to the table template.

    Parameters
    ----------
    caption : str
        Figure caption, omitted when empty
    placement : str
        Typst figure placement
    columns : str
        Typst ``columns:`` expression
    align : str
        Typst ``align:`` expression, omitted when empty
    label : str
        Reference label, omitted when empty
    rows : str
        Pre-rendered table content (header and body rows)

    """

    caption: str = ""
    placement: str = DEFAULT_TABLE_PLACEMENT
    columns: str = ""
    align: str = ""
    label: str = ""
    rows: str = ""

    def as_context(self) -> dict[str, str]:
        """Return the fields as a flat template context."""
        return asdict(self)


@dataclass(frozen=True)
class FigureData:
    """Fields handed to the figure template.

    Parameters
    ----------
    image_path : str
        Image destination, escaped by the template
    caption : str
        Figure caption taken from the image alt text, omitted when empty
    label : str
        Reference label, omitted when empty
    placement : str
        Typst figure placement

    """

    image_path: str
    caption: str = ""
    label: str = ""
    placement: str = DEFAULT_FIGURE_PLACEMENT

    def as_context(self) -> dict[str, str]:
        """Return the fields as a flat template context."""
        return asdict(self)


class TemplateRenderer:
    """Render Typst snippets from Jinja2 templates.

    Parameters
    ----------
    template_dir : str, Path or None, default None
        Directory holding the templates; None uses the packaged templates
    report_template : str
        Typst report template path imported by the header

    Examples
    --------
        >>> renderer = TemplateRenderer()
        >>> print(renderer.render_figure(FigureData(image_path="cat.png", caption="a cat")))
        #figure(
          placement: none,
          image("cat.png"),
          caption: [a cat],
        )

    """

    def __init__(
        self,
        template_dir: Optional[Union[str, Path]] = None,
        report_template: str = DEFAULT_REPORT_TEMPLATE,
    ):
        """Initialize the template renderer; the Jinja2 environment is built lazily."""
        self.template_dir = Path(template_dir) if template_dir is not None else PACKAGE_TEMPLATE_DIR
        self.report_template = report_template
        self._env: Environment | None = None

    def _get_env(self) -> Environment:
        """Create the Jinja2 environment on first use."""
        if self._env is None:
            from jinja2 import Environment, FileSystemLoader

            logger.debug(f"Loading Typst templates from {self.template_dir}")
            # Typst output is not HTML, so nothing is auto-escaped
            # nosemgrep: python.flask.security.xss.audit.direct-use-of-jinja2.direct-use-of-jinja2
            self._env = Environment(  # nosec B701
                loader=FileSystemLoader(str(self.template_dir)),
                autoescape=False,
                trim_blocks=True,
                lstrip_blocks=True,
                keep_trailing_newline=True,
            )
            self._env.filters["typst_escape"] = escape_typst_string
        return self._env

    def _render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render ``template_name`` with ``context``.

        Raises
        ------
        TemplateRenderError
            If the template is missing or fails to render

        """
        from jinja2 import TemplateError

        try:
            template = self._get_env().get_template(template_name)
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(template_name, original_error=e) from e

    @requires_dependencies("templates", DEPS_JINJA)
    def render_table(self, data: TableData) -> str:
        """Render a table figure.

        Parameters
        ----------
        data : TableData
            Table fields

        Returns
        -------
        str
            Typst ``#figure(... table(...))`` source

        """
        return self._render(TABLE_TEMPLATE_NAME, data.as_context())

    @requires_dependencies("templates", DEPS_JINJA)
    def render_figure(self, data: FigureData) -> str:
        """Render an image figure.

        Parameters
        ----------
        data : FigureData
            Figure fields

        Returns
        -------
        str
            Typst ``#figure(image(...))`` source

        """
        return self._render(FIGURE_TEMPLATE_NAME, data.as_context())

    @requires_dependencies("templates", DEPS_JINJA)
    def render_header(self, metadata: ReportMetadata) -> str:
        """Render the report preamble.

        Parameters
        ----------
        metadata : ReportMetadata
            Front matter fields

        Returns
        -------
        str
            Typst ``#import`` and ``#show: report.with(...)`` preamble, plus an
            outline when ``metadata.toc`` is set

        """
        context = metadata.to_dict()
        context["report_template"] = self.report_template
        return self._render(HEADER_TEMPLATE_NAME, context)


__all__ = ["TableData", "FigureData", "TemplateRenderer", "PACKAGE_TEMPLATE_DIR"]
