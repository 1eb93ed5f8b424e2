"""Pytest configuration and shared fixtures for the md2medium test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by hypothesis")


@pytest.fixture
def sample_markdown() -> str:
    """Markdown document exercising every construct Medium needs special handling for."""
    return (
        "# Release Notes\n"
        "\n"
        "Install with `pip install md2medium` and run it.\n"
        "\n"
        "| Feature | Status |\n"
        "|---------|--------|\n"
        "| Tables  | ✅     |\n"
        "| Code    | done   |\n"
        "\n"
        "```python\n"
        "def main():\n"
        "\n"
        "    return 0\n"
        "```\n"
    )


@pytest.fixture
def markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    """Write ``sample_markdown`` to a temporary file."""
    path = tmp_path / "post.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path
