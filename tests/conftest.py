"""Pytest configuration and fixtures for test suite."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def identifiers_file() -> Path:
    """Text file with a mix of valid, invalid and non-identifier values."""
    return FIXTURES_DIR / "identifiers.txt"


@pytest.fixture
def schemas_dir() -> Path:
    """Path to bundled JSON schemas."""
    return SCHEMAS_DIR
