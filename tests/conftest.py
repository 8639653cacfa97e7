"""Pytest configuration and shared fixtures for the linemark test suite."""

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
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def sample_markdown() -> str:
    """Markdown document touching every block kind."""
    return "\n".join(
        [
            "# Title",
            "Intro with **bold** and *italic*",
            "> quoted *text*",
            "---",
            "```python",
            "print('**not bold**')",
            "```",
            "| Name | Age | City |",
            "|---|---|---|",
            "| Ann | 31 | Oslo |",
            "| Bob | 42 | Rome |",
            "* first",
            "* second with [link](http://example.com)",
        ]
    )


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run a test inside an empty directory with no config discovery leaks."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("LINEMARK_CONFIG", raising=False)
    monkeypatch.chdir(work)
    return work
