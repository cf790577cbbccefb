#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli.py
"""Unit tests for the md2typ command-line interface."""

import logging
from pathlib import Path

import pytest

from md2typ.cli import create_parser, main


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the root logger configuration done by main()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
@pytest.mark.cli
class TestArgumentParsing:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        """Test default argument values."""
        args = create_parser().parse_args(["report.md"])

        assert args.input == "report.md"
        assert args.output is None
        assert args.heading_offset == 1
        assert args.template_dir is None
        assert not args.no_header
        assert not args.strict_templates
        assert args.log_level == "WARNING"

    def test_negative_heading_offset_is_usage_error(self) -> None:
        """Test that a negative heading offset exits with status 2."""
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["report.md", "--heading-offset", "-1"])
        assert exc_info.value.code == 2

    def test_missing_input_is_usage_error(self) -> None:
        """Test that omitting the input exits with status 2."""
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the --version flag."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "md2typ" in capsys.readouterr().out


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Tests for main()."""

    def test_convert_default_output(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test converting with the derived output path."""
        source = tmp_path / "report.md"
        source.write_text("# Title\n", encoding="utf-8")

        assert main([str(source)]) == 0

        target = tmp_path / "report.typ"
        assert target.read_text(encoding="utf-8") == "\n= Title\n"
        assert capsys.readouterr().out.strip() == f"success: {source} -> {target}"

    def test_convert_explicit_output_and_offset(self, tmp_path: Path) -> None:
        """Test the output argument and --heading-offset."""
        source = tmp_path / "report.md"
        source.write_text("# Title\n", encoding="utf-8")
        target = tmp_path / "build.typ"

        assert main([str(source), str(target), "--heading-offset", "2"]) == 0
        assert target.read_text(encoding="utf-8") == "\n== Title\n"

    def test_no_header(self, tmp_path: Path) -> None:
        """Test that --no-header drops the report preamble."""
        source = tmp_path / "report.md"
        source.write_text("---\ntitle: T\n---\nBody\n", encoding="utf-8")

        assert main([str(source), "--no-header"]) == 0
        assert (tmp_path / "report.typ").read_text(encoding="utf-8") == "Body\n\n"

    def test_report_template(self, tmp_path: Path) -> None:
        """Test that --report-template changes the imported template."""
        source = tmp_path / "report.md"
        source.write_text("---\ntitle: T\n---\nBody\n", encoding="utf-8")

        assert main([str(source), "--report-template", "lib/report.typ"]) == 0
        assert (tmp_path / "report.typ").read_text(encoding="utf-8").startswith('#import "lib/report.typ":*')

    def test_strict_templates(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that --strict-templates turns a missing template into a failure."""
        source = tmp_path / "report.md"
        source.write_text("![cat](cat.png)\n", encoding="utf-8")
        empty_dir = tmp_path / "templates"
        empty_dir.mkdir()

        assert main([str(source), "--template-dir", str(empty_dir), "--strict-templates"]) == 1
        assert "figure.typ.jinja2" in capsys.readouterr().err

    def test_missing_input_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a missing input file returns status 1."""
        assert main([str(tmp_path / "absent.md")]) == 1
        assert "Input file not found" in capsys.readouterr().err

    def test_log_file(self, tmp_path: Path) -> None:
        """Test that --log-file receives log output."""
        source = tmp_path / "report.md"
        source.write_text("text\n", encoding="utf-8")
        log_file = tmp_path / "md2typ.log"

        assert main([str(source), "--log-level", "INFO", "--log-file", str(log_file)]) == 0
        assert "Converting" in log_file.read_text(encoding="utf-8")
