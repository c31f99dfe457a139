"""
Shortest join path search over the foreign key graph.
"""

import logging
from collections.abc import Iterator

from dpjoins.analysis.schema_graph import SchemaGraph
from dpjoins.typing.plan import JoinPlan, NotFound
from dpjoins.typing.schema import Schema

logger = logging.getLogger(__name__)


class JoinPathFinder:
    """
    Finds the smallest set of joins linking two resources.

    The search walks foreign keys in both directions (a table referencing
    another, or being referenced by it) with backtracking. Each branch gets
    its own graph view, with the table it departs from hidden, and its own
    copy of the joins found so far, so branches never see each other's
    partial work.
    """

    def __init__(self, max_joins: int | None = None):
        """
        Initialize the path finder.

        Args:
            max_joins: Optional upper bound on the number of joined tables;
                longer paths are treated as not found
        """
        self.max_joins = max_joins

    def find_path(
        self, schema: Schema | SchemaGraph, from_name: str, to_name: str
    ) -> JoinPlan | NotFound:
        """
        Find the joins needed to reach ``to_name`` starting from ``from_name``.

        Args:
            schema: Schema or graph view to search
            from_name: Name of the starting table (never part of the result)
            to_name: Name of the table to reach

        Returns:
            The shortest JoinPlan (first found on ties),
            NotFound.UNKNOWN_RESOURCE if ``from_name`` is not described,
            NotFound.NO_PATH if no chain of foreign keys links the tables
        """
        graph = SchemaGraph.from_schema(schema)

        if from_name not in graph:
            logger.debug(f"Resource '{from_name}' is not described in the schema")
            return NotFound.UNKNOWN_RESOURCE

        if from_name == to_name:
            return JoinPlan()

        plan = self._search(graph, from_name, to_name, JoinPlan())
        if plan is None:
            logger.debug(f"No join path from '{from_name}' to '{to_name}'")
            return NotFound.NO_PATH

        logger.debug(f"Join path from '{from_name}' to '{to_name}': {list(plan)}")
        return plan

    def _search(
        self, graph: SchemaGraph, current: str, goal: str, joins: JoinPlan
    ) -> JoinPlan | None:
        # A single hop is always the shortest
        clause = self._direct_clause(graph, current, goal)
        if clause is not None:
            return joins.with_clause(goal, clause)

        # Any longer path adds at least a neighbour and the goal
        lower_bound = len(joins) + 2
        if self.max_joins is not None and lower_bound > self.max_joins:
            return None

        remaining = graph.without(current)
        best: JoinPlan | None = None
        for neighbour, clause in self._neighbours(graph, current, joins):
            if best is not None and len(best) <= lower_bound:
                break
            found = self._search(remaining, neighbour, goal, joins.with_clause(neighbour, clause))
            if found is not None and (best is None or len(found) < len(best)):
                best = found
        return best

    def _direct_clause(self, graph: SchemaGraph, current: str, goal: str) -> str | None:
        for fk in graph.outgoing(current):
            if fk.resource == goal:
                return fk.on_clause(current)
        for resource, fk in graph.incoming(current):
            if resource.name == goal:
                return fk.on_clause(resource.name)
        return None

    def _neighbours(
        self, graph: SchemaGraph, current: str, joins: JoinPlan
    ) -> Iterator[tuple[str, str]]:
        """Yield (neighbour, clause) candidates: outgoing keys first, then incoming."""
        for fk in graph.outgoing(current):
            if fk.resource == current or fk.resource in joins or fk.resource not in graph:
                continue
            yield fk.resource, fk.on_clause(current)

        for resource, fk in graph.incoming(current):
            if resource.name == current or resource.name in joins:
                continue
            yield resource.name, fk.on_clause(resource.name)
