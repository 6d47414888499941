"""
Shared test fixtures and configuration for json-server tests.
"""
import json
import random
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from json_server import create_app
from json_server.config import TestConfig
from json_server.storage import JsonDocument, JsonStore, ResourceKind


SAMPLE_DB = {
    "books": [
        {"id": "1", "title": "A", "author": "Ann"},
        {"id": "2", "title": "B", "author": "Bob"},
    ],
    "authors": [],
    "settings": 42,
    "profile": {"name": "typicode"},
}


def write_db(path: Path, content) -> Path:
    path.write_text(json.dumps(content, indent=2), encoding="utf-8")
    return path


def read_db(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    """Create a temporary backing file with sample data."""
    return write_db(tmp_path / "db.json", SAMPLE_DB)


@pytest.fixture
def app(db_file: Path) -> Flask:
    """Create and configure a test Flask application instance."""
    app = create_app(TestConfig, DB_FILE=str(db_file))
    yield app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def runner(app: Flask):
    """Create a Flask CLI test runner."""
    return app.test_cli_runner()


@pytest.fixture
def document(db_file: Path) -> JsonDocument:
    return JsonDocument(db_file)


@pytest.fixture
def books_store(document: JsonDocument) -> JsonStore:
    """A store over the 'books' key with a seeded id generator."""
    return JsonStore(document, "books", ResourceKind.PLURAL, rng=random.Random(7))


@pytest.fixture
def settings_store(document: JsonDocument) -> JsonStore:
    return JsonStore(document, "settings", ResourceKind.SINGULAR)
