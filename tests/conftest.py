"""Shared pytest fixtures."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from boolquery.text.normalizer import BasicTermNormalizer

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""[display]
colored_output = false

[normalizer]
lowercase = false
strip_pattern = "[^A-Za-z]"
""")
    return config_path


@pytest.fixture
def missing_config(temp_dir: Path) -> Path:
    """Path to a config file that does not exist."""
    return temp_dir / "nonexistent.toml"


@pytest.fixture
def normalizer() -> BasicTermNormalizer:
    return BasicTermNormalizer()


@pytest.fixture
def empty_config(temp_dir: Path) -> Path:
    """An existing config file with every setting left at its default."""
    config_path = temp_dir / "empty.toml"
    config_path.write_text("")
    return config_path
