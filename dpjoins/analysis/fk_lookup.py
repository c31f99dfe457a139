"""
Foreign key field lookup.
"""

from dpjoins.analysis.schema_graph import SchemaGraph
from dpjoins.shared.exceptions import ResourceNotFoundError
from dpjoins.typing.plan import NotFound
from dpjoins.typing.schema import Schema


class ForeignKeyLocator:
    """Finds which field of a linked table points at a field of the main table."""

    def find_local_fk_field(
        self,
        schema: Schema | SchemaGraph,
        main_name: str,
        main_field_name: str,
        linked_name: str,
    ) -> str | NotFound:
        """
        Return the field of ``linked_name`` referencing ``main_name.main_field_name``.

        Args:
            schema: Schema or graph view
            main_name: Name of the main table
            main_field_name: Name of the referenced field in the main table
            linked_name: Name of the table holding the foreign key

        Returns:
            The local field name, or NotFound.NO_FOREIGN_KEY

        Raises:
            ResourceNotFoundError: If ``linked_name`` is not described
        """
        graph = SchemaGraph.from_schema(schema)
        linked = graph.get(linked_name)
        if linked is None:
            raise ResourceNotFoundError(linked_name)

        for fk in linked.references_to(main_name):
            if fk.reference_field == main_field_name:
                return fk.field

        return NotFound.NO_FOREIGN_KEY
