"""
Read-only graph view over a table schema.
"""

from collections.abc import Iterator

from dpjoins.typing.schema import ForeignKeyRef, Resource, Schema


class SchemaGraph:
    """
    Lookup-friendly view of a schema's resources and foreign keys.

    Edges are foreign keys and can be walked both ways: outgoing (a resource
    references another) and incoming (other resources reference it). The view
    never changes once built; ``without()`` returns a new view hiding one more
    resource and shares the underlying indexes with its parent.
    """

    __slots__ = ("_resources", "_incoming", "_order", "_excluded")

    def __init__(self, schema: Schema):
        self._resources: dict[str, Resource] = {r.name: r for r in schema.resources}
        self._order: tuple[str, ...] = tuple(r.name for r in schema.resources)
        incoming: dict[str, list[tuple[Resource, ForeignKeyRef]]] = {}
        for resource in schema.resources:
            for fk in resource.foreign_keys:
                incoming.setdefault(fk.resource, []).append((resource, fk))
        self._incoming = {name: tuple(refs) for name, refs in incoming.items()}
        self._excluded: frozenset[str] = frozenset()

    @classmethod
    def from_schema(cls, schema: "Schema | SchemaGraph") -> "SchemaGraph":
        if isinstance(schema, SchemaGraph):
            return schema
        return cls(schema)

    def without(self, resource_name: str) -> "SchemaGraph":
        """Return a view in which ``resource_name`` is no longer visible."""
        view = object.__new__(SchemaGraph)
        view._resources = self._resources
        view._incoming = self._incoming
        view._order = self._order
        view._excluded = self._excluded | {resource_name}
        return view

    def __contains__(self, resource_name: object) -> bool:
        return resource_name in self._resources and resource_name not in self._excluded

    def __len__(self) -> int:
        return sum(1 for _ in self.resource_names())

    def get(self, resource_name: str) -> Resource | None:
        if resource_name in self._excluded:
            return None
        return self._resources.get(resource_name)

    def resource_names(self) -> Iterator[str]:
        """Visible resource names in schema order."""
        for name in self._order:
            if name not in self._excluded:
                yield name

    def resources(self) -> Iterator[Resource]:
        for name in self.resource_names():
            yield self._resources[name]

    def outgoing(self, resource_name: str) -> tuple[ForeignKeyRef, ...]:
        """Foreign keys declared by ``resource_name``."""
        resource = self.get(resource_name)
        return resource.foreign_keys if resource else ()

    def incoming(self, resource_name: str) -> Iterator[tuple[Resource, ForeignKeyRef]]:
        """(resource, foreign key) pairs of visible resources referencing ``resource_name``."""
        for resource, fk in self._incoming.get(resource_name, ()):
            if resource.name not in self._excluded:
                yield resource, fk

    def qualified_field_names(self) -> Iterator[tuple[Resource, str]]:
        """(resource, qualified field name) pairs in schema order."""
        for resource in self.resources():
            for qualified_name in resource.qualified_field_names():
                yield resource, qualified_name
