"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import pytest

from json_value import JsonValue


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_document():
    """Sample document mixing every JSON variant."""
    return {
        "name": "Alice",
        "age": 30,
        "score": 97.5,
        "active": True,
        "nickname": None,
        "tags": ["admin", "ops"],
        "address": {
            "city": "Lyon",
            "zip_code": "69001"
        },
        "history": []
    }


@pytest.fixture
def sample_value(sample_document):
    """Sample document as a JsonValue tree."""
    return JsonValue.of(sample_document)


@pytest.fixture
def sample_json_file(temp_dir, sample_document):
    """Sample document written to a JSON file."""
    path = temp_dir / "sample.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


@pytest.fixture
def people_value():
    """Array of person objects."""
    return JsonValue.of([
        {"name": "Alice", "age": 30, "tags": ["admin"]},
        {"name": "Bob", "age": 25, "tags": []},
    ])
