"""
Tests for JoinPlanner and the functional shortcuts.
"""

import pytest

from dpjoins import (
    JoinPlanner,
    NotFound,
    PlannerConfig,
    SchemaGraph,
    build_joins_for_filter,
    find_local_fk_field,
    find_path,
    find_path_with_required,
)
from dpjoins.shared.exceptions import NoDirectLinkToMainError, UnreachableRequiredResourceError


class TestJoinPlanner:
    """Test cases for the planner facade."""

    @pytest.fixture
    def planner(self, chain_schema):
        return JoinPlanner(chain_schema)

    def test_find_path(self, planner):
        assert list(planner.find_path("tableA", "tableC")) == ["tableB", "tableC"]

    def test_find_path_with_required_names_delegates(self, planner):
        plan = planner.find_path("tableA", "tableC", "tableD")

        assert list(plan) == ["tableB", "tableC", "tableD"]

    def test_empty_required_names_still_extends(self, planner):
        assert list(planner.find_path("tableA", "tableC", [])) == ["tableB", "tableC"]

    def test_config_is_applied(self, chain_schema):
        planner = JoinPlanner(chain_schema, PlannerConfig(max_joins=1))

        assert planner.find_path("tableA", "tableC") is NotFound.NO_PATH

    def test_accepts_graph_view(self, chain_schema):
        graph = SchemaGraph(chain_schema)

        assert JoinPlanner(graph).graph is graph

    def test_build_joins_for_filter(self, chain_schema):
        planner = JoinPlanner(chain_schema)

        plan = planner.build_joins_for_filter("tableB", ["tableC.id", "tableD.id"])

        assert plan.to_dict() == {
            "tableC": {"on": ["tableB.id=tableC.tableB_id"]},
            "tableD": {"on": ["tableB.id=tableD.tableB_id"]},
        }

    def test_find_local_fk_field(self, planner):
        assert planner.find_local_fk_field("tableB", "id", "tableD") == "tableB_id"


class TestFunctionalShortcuts:
    """Scenario checks through the module level functions."""

    def test_filter_scenario(self, books_schema):
        plan = build_joins_for_filter(books_schema, "categories", {"books.publication_year"})

        assert plan.to_dict() == {"books": {"on": ["categories.id=books.category_id"]}}

    def test_pivot_scenario(self, multi_pivot_schema):
        plan = find_path(multi_pivot_schema, "authors", "books")

        assert plan.to_dict() == {
            "book_authors": {"on": ["authors.id=book_authors.author_id"]},
            "books": {"on": ["books.id=book_authors.book_id"]},
        }

    def test_required_scenario(self, chain_schema):
        assert find_path_with_required(chain_schema, "tableA", "tableC", "tableB") == find_path(
            chain_schema, "tableA", "tableC"
        )
        plan = find_path_with_required(chain_schema, "tableA", "tableC", "tableD")
        assert plan["tableD"].on == ("tableB.id=tableD.tableB_id",)

    def test_fk_field_scenario(self, books_schema):
        assert find_local_fk_field(books_schema, "categories", "id", "books") == "category_id"
        assert find_local_fk_field(books_schema, "categories", "title", "books") is NotFound.NO_FOREIGN_KEY

    def test_hard_failures(self, multi_pivot_schema):
        with pytest.raises(UnreachableRequiredResourceError):
            find_path_with_required(multi_pivot_schema, "authors", "books", "book_sets")
        with pytest.raises(NoDirectLinkToMainError):
            build_joins_for_filter(multi_pivot_schema, "authors", ["book_sets.label"])
