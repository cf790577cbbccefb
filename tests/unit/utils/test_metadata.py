#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_metadata.py
"""Unit tests for report metadata built from front matter."""

from datetime import date

import pytest

from md2typ.utils.metadata import Author, ReportMetadata


@pytest.mark.unit
class TestReportMetadata:
    """Tests for ReportMetadata."""

    def test_from_dict_full(self) -> None:
        """Test building metadata from a complete front matter mapping."""
        data = {
            "title": "Lab Report",
            "course": "Physics 101",
            "date": date(2024, 3, 1),
            "authors": [
                {"name": "Ada", "department": "Maths", "organization": "UCL", "email": "ada@example.org"},
                {"name": "Charles"},
            ],
            "bibliography": "refs.bib",
            "toc": True,
        }
        metadata = ReportMetadata.from_dict(data)

        assert metadata.title == "Lab Report"
        assert metadata.date == "2024-03-01"
        assert metadata.authors == [
            Author(name="Ada", department="Maths", organization="UCL", email="ada@example.org"),
            Author(name="Charles"),
        ]
        assert metadata.bibliography == "refs.bib"
        assert metadata.toc is True

    def test_from_dict_empty(self) -> None:
        """Test that missing front matter gives empty metadata."""
        assert ReportMetadata.from_dict(None) == ReportMetadata()
        assert ReportMetadata.from_dict({}) == ReportMetadata()

    def test_single_author_mapping(self) -> None:
        """Test that a single author mapping is accepted."""
        metadata = ReportMetadata.from_dict({"authors": {"name": "Solo"}})
        assert metadata.authors == [Author(name="Solo")]

    def test_non_mapping_authors_skipped(self) -> None:
        """Test that author entries that are not mappings are ignored."""
        metadata = ReportMetadata.from_dict({"authors": ["plain string", {"name": "Kept"}]})
        assert metadata.authors == [Author(name="Kept")]

    @pytest.mark.parametrize("value,expected", [("yes", True), ("false", False), (1, True), (None, False)])
    def test_toc_coercion(self, value: object, expected: bool) -> None:
        """Test that toc accepts YAML-ish truthy strings."""
        assert ReportMetadata.from_dict({"toc": value}).toc is expected

    def test_to_dict(self) -> None:
        """Test conversion to a flat template context."""
        metadata = ReportMetadata(title="T", authors=[Author(name="A", email="a@x")])
        context = metadata.to_dict()

        assert context["title"] == "T"
        assert context["authors"] == [{"name": "A", "department": "", "organization": "", "email": "a@x"}]
        assert context["toc"] is False
