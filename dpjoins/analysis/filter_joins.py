"""
Joins required by a filter on qualified field names.
"""

import logging

from dpjoins.analysis.schema_graph import SchemaGraph
from dpjoins.shared.exceptions import NoDirectLinkToMainError
from dpjoins.shared.types import FilterKeys
from dpjoins.typing.plan import JoinPlan
from dpjoins.typing.schema import Schema

logger = logging.getLogger(__name__)


class FilterJoinBuilder:
    """Builds the joins needed to filter a main table on fields of other tables."""

    def build_joins(
        self, schema: Schema | SchemaGraph, main_name: str, filter_keys: FilterKeys
    ) -> JoinPlan:
        """
        Return the joins needed to apply a filter starting from ``main_name``.

        Only tables with a foreign key pointing directly at the main table
        can be joined.

        Args:
            schema: Schema or graph view
            main_name: Name of the main table
            filter_keys: Qualified field names (``table.field``) being filtered on;
                a filter mapping can be passed as is, its values are ignored

        Returns:
            JoinPlan with one entry per filtered table other than the main one

        Raises:
            NoDirectLinkToMainError: If a filtered table has no foreign key to the main table
        """
        graph = SchemaGraph.from_schema(schema)
        wanted = {filter_keys} if isinstance(filter_keys, str) else set(filter_keys)

        filtered: dict[str, list[str]] = {}
        for resource, qualified_name in graph.qualified_field_names():
            if qualified_name in wanted and resource.name != main_name:
                filtered.setdefault(resource.name, []).append(qualified_name)

        plan = JoinPlan()
        for resource_name, field_names in filtered.items():
            resource = graph.get(resource_name)
            clauses = [fk.on_clause(resource_name) for fk in resource.references_to(main_name)]
            if not clauses:
                raise NoDirectLinkToMainError(resource_name, main_name, field_names)
            for clause in clauses:
                plan = plan.with_clause(resource_name, clause)

        logger.debug(f"Filter on {sorted(wanted)} from '{main_name}' joins {list(plan)}")
        return plan
