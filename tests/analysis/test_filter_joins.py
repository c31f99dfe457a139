"""
Unit tests for FilterJoinBuilder.
"""

import pytest

from dpjoins.analysis import FilterJoinBuilder
from dpjoins.shared.exceptions import NoDirectLinkToMainError
from dpjoins.typing import Field, ForeignKeyRef, Resource, Schema


class TestFilterJoinBuilder:
    """Test cases for filter driven joins."""

    @pytest.fixture
    def builder(self):
        return FilterJoinBuilder()

    def test_filter_on_related_table(self, builder, books_schema):
        plan = builder.build_joins(books_schema, "categories", {"books.publication_year"})

        assert plan.to_dict() == {"books": {"on": ["categories.id=books.category_id"]}}

    def test_filter_mapping_keys_are_used(self, builder, books_schema):
        plan = builder.build_joins(books_schema, "categories", {"books.publication_year": 2018})

        assert list(plan) == ["books"]

    def test_filter_on_main_table_needs_no_join(self, builder, books_schema):
        plan = builder.build_joins(books_schema, "categories", ["categories.label"])

        assert len(plan) == 0

    def test_several_fields_of_one_table_give_one_clause(self, builder, books_schema):
        plan = builder.build_joins(
            books_schema, "categories", ["books.title", "books.publication_year"]
        )

        assert plan["books"].on == ("categories.id=books.category_id",)

    def test_unknown_fields_are_ignored(self, builder, books_schema):
        plan = builder.build_joins(books_schema, "categories", ["books.isbn", "authors.name"])

        assert len(plan) == 0

    def test_every_key_to_main_becomes_a_clause(self, builder):
        schema = Schema(
            [
                Resource("people", [Field("id")]),
                Resource(
                    "loans",
                    [Field("borrower_id"), Field("lender_id"), Field("amount")],
                    [
                        ForeignKeyRef("borrower_id", "people", "id"),
                        ForeignKeyRef("lender_id", "people", "id"),
                    ],
                ),
            ]
        )

        plan = builder.build_joins(schema, "people", ["loans.amount"])

        assert plan["loans"].on == ("people.id=loans.borrower_id", "people.id=loans.lender_id")

    def test_table_without_key_to_main_fails(self, builder, multi_pivot_schema):
        with pytest.raises(NoDirectLinkToMainError) as exc_info:
            builder.build_joins(multi_pivot_schema, "authors", ["books.title"])

        assert exc_info.value.resource_name == "books"
        assert exc_info.value.main_name == "authors"
        assert exc_info.value.field_names == ["books.title"]

    def test_no_fallback_to_multi_hop(self, builder, multi_pivot_schema):
        """book_authors links authors to books, but only single hops are used."""
        plan = builder.build_joins(multi_pivot_schema, "authors", ["book_authors.book_id"])

        assert plan.to_dict() == {"book_authors": {"on": ["authors.id=book_authors.author_id"]}}
        with pytest.raises(NoDirectLinkToMainError):
            builder.build_joins(
                multi_pivot_schema, "authors", ["book_authors.book_id", "books.title"]
            )
