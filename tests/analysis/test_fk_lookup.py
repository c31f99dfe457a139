"""
Unit tests for ForeignKeyLocator.
"""

import pytest

from dpjoins.analysis import ForeignKeyLocator
from dpjoins.shared.exceptions import ResourceNotFoundError
from dpjoins.typing import ForeignKeyRef, NotFound, Resource, Schema


class TestForeignKeyLocator:
    """Test cases for foreign key field lookup."""

    @pytest.fixture
    def locator(self):
        return ForeignKeyLocator()

    def test_finds_local_field(self, locator, books_schema):
        assert locator.find_local_fk_field(books_schema, "categories", "id", "books") == "category_id"

    def test_no_matching_key(self, locator, books_schema):
        result = locator.find_local_fk_field(books_schema, "categories", "label", "books")

        assert result is NotFound.NO_FOREIGN_KEY

    def test_unknown_linked_table(self, locator, books_schema):
        with pytest.raises(ResourceNotFoundError) as exc_info:
            locator.find_local_fk_field(books_schema, "categories", "id", "publishers")

        assert exc_info.value.resource_name == "publishers"

    def test_scans_linked_table_whatever_its_position(self, locator):
        """The linked table comes first; the last table holds a different key."""
        schema = Schema(
            [
                Resource("books", foreign_keys=[ForeignKeyRef("category_id", "categories", "id")]),
                Resource("categories"),
                Resource("reviews", foreign_keys=[ForeignKeyRef("book_ref", "categories", "id")]),
            ]
        )

        assert locator.find_local_fk_field(schema, "categories", "id", "books") == "category_id"
        assert locator.find_local_fk_field(schema, "categories", "id", "reviews") == "book_ref"
