"""
Pytest configuration and shared fixtures for dpjoins tests.
"""

import json
from pathlib import Path
from typing import Any

import pytest

from dpjoins.input import DescriptorConverter
from dpjoins.typing import Schema


def _resource(name: str, fields: list[str], foreign_keys: list[tuple[str, str, str]] | None = None):
    """Descriptor resource with (local field, referenced resource, referenced field) keys."""
    resource: dict[str, Any] = {
        "name": name,
        "schema": {"fields": [{"name": field} for field in fields]},
    }
    if foreign_keys:
        resource["foreignKeys"] = [
            {"fields": local, "reference": {"resource": target, "fields": target_field}}
            for local, target, target_field in foreign_keys
        ]
    return resource


@pytest.fixture
def books_descriptor() -> dict[str, Any]:
    """Categories and books linked by books.category_id."""
    return {
        "resources": [
            _resource("categories", ["id", "label"]),
            _resource(
                "books",
                ["title", "category_id", "publication_year"],
                [("category_id", "categories", "id")],
            ),
        ]
    }


@pytest.fixture
def multi_pivot_descriptor() -> dict[str, Any]:
    """Authors and books linked through book_authors; books also in book sets."""
    return {
        "resources": [
            _resource("authors", ["id", "name"]),
            _resource("books", ["id", "title"]),
            _resource(
                "book_authors",
                ["book_id", "author_id"],
                [("book_id", "books", "id"), ("author_id", "authors", "id")],
            ),
            _resource(
                "book_set_pivots",
                ["book_set_id", "book_id"],
                [("book_set_id", "book_sets", "id"), ("book_id", "books", "id")],
            ),
            _resource("book_sets", ["id", "label"]),
        ]
    }


@pytest.fixture
def chain_descriptor() -> dict[str, Any]:
    """tableA <- tableB <- tableC, with tableD also referencing tableB."""
    return {
        "resources": [
            _resource("tableA", ["id"]),
            _resource("tableB", ["id", "tableA_id"], [("tableA_id", "tableA", "id")]),
            _resource("tableC", ["id", "tableB_id"], [("tableB_id", "tableB", "id")]),
            _resource("tableD", ["id", "tableB_id"], [("tableB_id", "tableB", "id")]),
        ]
    }


@pytest.fixture
def books_schema(books_descriptor) -> Schema:
    return DescriptorConverter().convert(books_descriptor)


@pytest.fixture
def multi_pivot_schema(multi_pivot_descriptor) -> Schema:
    return DescriptorConverter().convert(multi_pivot_descriptor)


@pytest.fixture
def chain_schema(chain_descriptor) -> Schema:
    return DescriptorConverter().convert(chain_descriptor)


@pytest.fixture
def write_descriptor(tmp_path):
    """Write a descriptor dict as JSON and return its path."""

    def _write(descriptor: dict[str, Any], name: str = "datapackage.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(descriptor), encoding="utf-8")
        return path

    return _write


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "/cli/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
