"""Pytest configuration and shared fixtures for the md2typ test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def report_dir(tmp_path: Path) -> Path:
    """Provide a directory holding a small report with an included chapter.

    Returns
    -------
    Path
        Directory containing ``report.md`` and ``chapters/intro.md``

    """
    chapters = tmp_path / "chapters"
    chapters.mkdir()
    (chapters / "intro.md").write_text("## Introduction\n\nIncluded *text*.\n", encoding="utf-8")
    (tmp_path / "report.md").write_text(
        "---\n"
        "title: Lab Report\n"
        "course: Physics 101\n"
        "authors:\n"
        "  - name: Ada Lovelace\n"
        "    email: ada@example.org\n"
        "---\n"
        "# Overview\n"
        "\n"
        "{{ chapters/intro.md }}\n",
        encoding="utf-8",
    )
    return tmp_path
