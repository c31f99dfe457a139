"""
High-level entry point for join planning.
"""

import logging
from collections.abc import Iterable

from dpjoins.analysis import (
    FilterJoinBuilder,
    ForeignKeyLocator,
    JoinPathFinder,
    RequiredResourceExtender,
    SchemaGraph,
)
from dpjoins.config import PlannerConfig
from dpjoins.shared.types import FilterKeys
from dpjoins.typing.plan import JoinPlan, NotFound
from dpjoins.typing.schema import Schema

logger = logging.getLogger(__name__)


class JoinPlanner:
    """
    Join operations over one schema.

    The graph view is built once and shared by every call; calls keep no
    state between them.
    """

    def __init__(self, schema: Schema | SchemaGraph, config: PlannerConfig | None = None) -> None:
        """
        Initialize the planner.

        Args:
            schema: Schema (or an already built graph view) to plan joins on
            config: Optional planner configuration
        """
        self.config = config or PlannerConfig()
        self.graph = SchemaGraph.from_schema(schema)

        # Initialize components
        self.path_finder = JoinPathFinder(max_joins=self.config.max_joins)
        self.extender = RequiredResourceExtender(self.path_finder)
        self.filter_builder = FilterJoinBuilder()
        self.fk_locator = ForeignKeyLocator()

        logger.debug(f"Initialized JoinPlanner with {len(self.graph)} resources")

    def find_path(
        self,
        from_name: str,
        to_name: str,
        required_names: str | Iterable[str] | None = None,
    ) -> JoinPlan | NotFound:
        """Joins linking two tables, through the required tables when given."""
        if required_names is not None:
            return self.find_path_with_required(from_name, to_name, required_names)
        return self.path_finder.find_path(self.graph, from_name, to_name)

    def find_path_with_required(
        self, from_name: str, to_name: str, required_names: str | Iterable[str]
    ) -> JoinPlan | NotFound:
        return self.extender.find_path_with_required(self.graph, from_name, to_name, required_names)

    def build_joins_for_filter(self, main_name: str, filter_keys: FilterKeys) -> JoinPlan:
        return self.filter_builder.build_joins(self.graph, main_name, filter_keys)

    def find_local_fk_field(
        self, main_name: str, main_field_name: str, linked_name: str
    ) -> str | NotFound:
        return self.fk_locator.find_local_fk_field(
            self.graph, main_name, main_field_name, linked_name
        )


def find_path(schema: Schema | SchemaGraph, from_name: str, to_name: str) -> JoinPlan | NotFound:
    """
    Find the shortest join path between two tables.

    Args:
        schema: Schema to search
        from_name: Name of the starting table
        to_name: Name of the table to reach

    Returns:
        JoinPlan, or NotFound when ``from_name`` is unknown or no path exists
    """
    return JoinPlanner(schema).find_path(from_name, to_name)


def find_path_with_required(
    schema: Schema | SchemaGraph,
    from_name: str,
    to_name: str,
    required_names: str | Iterable[str],
) -> JoinPlan | NotFound:
    """
    Find the join path between two tables, forcing extra tables into it.

    Raises:
        UnreachableRequiredResourceError: If a required table cannot be linked by one hop
    """
    return JoinPlanner(schema).find_path_with_required(from_name, to_name, required_names)


def build_joins_for_filter(
    schema: Schema | SchemaGraph, main_name: str, filter_keys: FilterKeys
) -> JoinPlan:
    """
    Find the joins needed to filter ``main_name`` on qualified fields of other tables.

    Raises:
        NoDirectLinkToMainError: If a filtered table has no foreign key to the main table
    """
    return JoinPlanner(schema).build_joins_for_filter(main_name, filter_keys)


def find_local_fk_field(
    schema: Schema | SchemaGraph, main_name: str, main_field_name: str, linked_name: str
) -> str | NotFound:
    """
    Find the field of ``linked_name`` that references ``main_name.main_field_name``.

    Raises:
        ResourceNotFoundError: If ``linked_name`` is not described
    """
    return JoinPlanner(schema).find_local_fk_field(main_name, main_field_name, linked_name)
