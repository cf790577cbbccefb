"""Command-line interface for the md2typ Markdown to Typst converter.

Examples
--------
Convert a report, writing ``report.typ`` next to it:
    $ md2typ report.md

Specify the output file:
    $ md2typ report.md build/report.typ

Keep level-one headings at the top Typst level:
    $ md2typ report.md --heading-offset 0

Use customised table and figure templates:
    $ md2typ report.md --template-dir ./typst-snippets

Fail instead of emitting placeholders when a template breaks:
    $ md2typ report.md --strict-templates
"""

import argparse
import sys
from typing import Optional

from md2typ import __version__
from md2typ.api import convert, derive_output_path
from md2typ.constants import DEFAULT_HEADING_OFFSET, DEFAULT_REPORT_TEMPLATE
from md2typ.exceptions import DependencyError, Md2TypError
from md2typ.logging_utils import configure_logging
from md2typ.options.markdown import MarkdownParserOptions
from md2typ.options.typst import TypstRendererOptions


def non_negative_int(value: str) -> int:
    """Validate non-negative integer for argparse."""
    try:
        ivalue = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value} is not a valid integer")
    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"{value} is not a non-negative integer")
    return ivalue


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="md2typ",
        description="Convert Markdown reports with typst directive comments to Typst source.",
    )

    parser.add_argument("input", help="Markdown file to convert")
    parser.add_argument(
        "output",
        nargs="?",
        help="Typst file to write (default: INPUT with .md replaced by .typ)",
    )

    parser.add_argument(
        "--heading-offset",
        type=non_negative_int,
        default=DEFAULT_HEADING_OFFSET,
        help=f"Number of levels added to every heading (default: {DEFAULT_HEADING_OFFSET})",
    )

    parser.add_argument(
        "--template-dir",
        help="Directory holding table.typ.jinja2, figure.typ.jinja2 and header.typ.jinja2",
    )

    parser.add_argument(
        "--report-template",
        default=DEFAULT_REPORT_TEMPLATE,
        help=f"Typst report template imported by the header (default: {DEFAULT_REPORT_TEMPLATE})",
    )

    parser.add_argument(
        "--no-header",
        action="store_true",
        help="Do not emit the report header even when front matter is present",
    )

    parser.add_argument(
        "--strict-templates",
        action="store_true",
        help="Fail when a table or figure template cannot be rendered instead of emitting a placeholder",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )

    parser.add_argument("--log-file", help="Also write log output to this file")

    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log with timestamps and logger names",
    )

    parser.add_argument("--version", "-v", action="version", version=f"md2typ {__version__}")

    return parser


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    output_path = parsed_args.output or derive_output_path(parsed_args.input)

    try:
        renderer_options = TypstRendererOptions(
            heading_offset=parsed_args.heading_offset,
            template_dir=parsed_args.template_dir,
            report_template=parsed_args.report_template,
            fail_on_resource_errors=parsed_args.strict_templates,
        )
        written = convert(
            parsed_args.input,
            output_path,
            parser_options=MarkdownParserOptions(),
            renderer_options=renderer_options,
            include_header=not parsed_args.no_header,
        )
    except DependencyError as e:
        print(f"Missing dependency: {e}", file=sys.stderr)
        return 1
    except Md2TypError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"success: {parsed_args.input} -> {written}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
