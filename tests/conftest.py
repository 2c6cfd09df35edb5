"""Shared test fixtures for the TypeID test suite."""

from pathlib import Path

import pytest
import yaml

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# 16 bytes 0x00..0x0f and its encoding
SEQUENCE_BYTES = bytes(range(16))
SEQUENCE_SUFFIX = "00041061050r3gg28a1c60t3gf"

UUIDV7_TEXT = "01889c89-df6b-7f1c-a388-91396ec314bc"
UUIDV7_SUFFIX = "01h2e8kqvbfwea724h75qc655w"


def load_vectors(name: str) -> list[dict]:
    """Load a list of test vectors from tests/fixtures/{name}.yaml."""
    with open(FIXTURES_DIR / f"{name}.yaml", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, list):
        raise ValueError(f"Invalid vector file {name}.yaml: expected a YAML list")
    return data


@pytest.fixture
def prefix_limit(monkeypatch):
    """Temporarily change the configured maximum prefix length."""
    from typeid.core.config import settings

    def _set(limit: int) -> None:
        monkeypatch.setattr(settings, "max_prefix_length", limit)

    return _set
