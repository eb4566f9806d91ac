"""Shared fixtures for secretrecon tests."""

import json
import random
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent.parent / 'data'


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def write_shares(tmp_path):
    """Write a share document (dict or raw text) to a temp file, return its path."""
    def _write(doc, name='shares.json'):
        path = tmp_path / name
        if isinstance(doc, str):
            path.write_text(doc)
        else:
            path.write_text(json.dumps(doc))
        return str(path)
    return _write


@pytest.fixture
def line_doc():
    """y = 3x + 1 through x=1,2."""
    return {
        "keys": {"n": 2, "k": 2},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "10", "value": "7"},
    }
