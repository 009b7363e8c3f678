"""Shared test configuration and fixtures."""

import json
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def carrier_rates_text() -> str:
    """Semicolon-delimited carrier export with BOM, CRLF line endings and a blank line."""
    return (DATA_DIR / "carrier_rates.csv").read_text(encoding="utf-8")


@pytest.fixture
def nested_quote() -> dict:
    """Quote response with the options under data.quotes and one errored option."""
    return json.loads((DATA_DIR / "quote_nested.json").read_text(encoding="utf-8"))


@pytest.fixture
def packages_quote() -> dict:
    """Quote response whose options are split across the elements of a packages array."""
    return json.loads((DATA_DIR / "packages.json").read_text(encoding="utf-8"))
