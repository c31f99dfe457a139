"""
Extension of a join path with additionally required resources.
"""

import logging
from collections.abc import Iterable

from dpjoins.analysis.path_finder import JoinPathFinder
from dpjoins.analysis.schema_graph import SchemaGraph
from dpjoins.shared.exceptions import UnreachableRequiredResourceError
from dpjoins.typing.plan import JoinPlan, NotFound
from dpjoins.typing.schema import Schema

logger = logging.getLogger(__name__)


class RequiredResourceExtender:
    """Attaches required resources to a join path by a single hop."""

    def __init__(self, path_finder: JoinPathFinder | None = None):
        self.path_finder = path_finder or JoinPathFinder()

    def find_path_with_required(
        self,
        schema: Schema | SchemaGraph,
        from_name: str,
        to_name: str,
        required_names: str | Iterable[str],
    ) -> JoinPlan | NotFound:
        """
        Find the join path between two tables and add the required tables to it.

        Each required table is linked through a foreign key (in either
        direction) with a table already in the plan, including required
        tables attached before it. The search is never transitive.

        Args:
            schema: Schema or graph view to search
            from_name: Name of the starting table
            to_name: Name of the table to reach
            required_names: A table name or several table names that must be joined

        Returns:
            The extended JoinPlan, or the NotFound of the base path search

        Raises:
            UnreachableRequiredResourceError: If a required table has no
                direct link with the plan
        """
        graph = SchemaGraph.from_schema(schema)
        if isinstance(required_names, str):
            required_names = [required_names]

        plan = self.path_finder.find_path(graph, from_name, to_name)
        if isinstance(plan, NotFound):
            return plan

        for required_name in required_names:
            if required_name == from_name or required_name in plan:
                continue

            clause = self._find_link(graph, plan, required_name)
            if clause is None:
                raise UnreachableRequiredResourceError(required_name, from_name, to_name)

            logger.debug(f"Required resource '{required_name}' joined on {clause}")
            plan = plan.with_clause(required_name, clause)

        return plan

    def _find_link(self, graph: SchemaGraph, plan: JoinPlan, required_name: str) -> str | None:
        """Return the clause of the first single-hop link between the plan and ``required_name``."""
        required = graph.get(required_name)
        for member_name in plan:
            member = graph.get(member_name)
            if member is not None:
                fk = next(member.references_to(required_name), None)
                if fk is not None:
                    return fk.on_clause(member_name)

            if required is not None:
                fk = next(required.references_to(member_name), None)
                if fk is not None:
                    return fk.on_clause(required_name)

        return None
