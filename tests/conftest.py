"""
Pytest configuration and shared fixtures.
"""

import shutil
from pathlib import Path

import pytest

from svg_components.config import build_config


@pytest.fixture
def fixtures_dir():
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def svg_fixtures(fixtures_dir):
    """Return path to the SVG fixture directory."""
    return fixtures_dir / "svg"


@pytest.fixture
def input_dir(tmp_path, svg_fixtures):
    """Return a temporary input directory holding the well-formed fixtures."""
    directory = tmp_path / "icons"
    directory.mkdir()
    for name in ("arrow.svg", "badge.svg", "gradient.svg"):
        shutil.copy(svg_fixtures / name, directory / name)
    return directory


@pytest.fixture
def output_dir(tmp_path):
    """Return an empty temporary output directory."""
    directory = tmp_path / "out"
    directory.mkdir()
    return directory


@pytest.fixture
def make_config(input_dir, output_dir):
    """Return a factory for GeneratorConfig pointing at the temp directories."""

    def factory(**options):
        return build_config(input_dir, output_dir, **options)

    return factory
