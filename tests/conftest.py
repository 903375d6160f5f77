"""
Pytest configuration and fixtures for item matcher tests.

Provides temporary item directories and id files shared by the loader,
matcher and CLI tests.
"""

import json
import logging
import tempfile
from pathlib import Path

import pytest

from config.models import ItemRecord, LookupConfig


def write_json(path: Path, data) -> Path:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    return path


@pytest.fixture
def temp_dir():
    """Create an empty temporary directory."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def items_dir(temp_dir):
    """Create a directory with three item files and one unrelated file."""
    directory = temp_dir / "item_definitions"
    directory.mkdir()

    test_items = {
        "1.json": {"id": 1, "name": "sword", "description": "A sharp blade"},
        "2.json": {"id": 2, "name": "shield", "description": None, "stackable": False},
        "3.json": {"id": 3, "name": None},
    }
    for filename, item_data in test_items.items():
        write_json(directory / filename, item_data)

    (directory / "README.txt").write_text("not an item", encoding="utf-8")

    return directory


@pytest.fixture
def config(items_dir):
    """Lookup settings pointing at the test items without a progress bar."""
    return LookupConfig(items_path=str(items_dir), worker_threads=2, chunk_size=1, show_progress=False)


@pytest.fixture
def id_list_file(temp_dir):
    return write_json(temp_dir / "ids.json", [3])


@pytest.fixture
def id_name_file(temp_dir):
    return write_json(temp_dir / "pairs.json", [[2, "shield"]])


@pytest.fixture
def json_file():
    """Helper that writes a value to a JSON file."""
    return write_json


@pytest.fixture
def sample_items():
    return [
        ItemRecord(id=1, name="sword"),
        ItemRecord(id=2, name="shield"),
        ItemRecord(id=3),
    ]


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove the stderr handler the CLI installs."""
    yield
    from core import log

    if log._handler is not None:
        logging.getLogger().removeHandler(log._handler)
        log._handler = None
