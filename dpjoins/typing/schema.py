"""
Type definitions for table schemas.

A schema is an ordered collection of resources (tables). Each resource lists
its fields and the foreign keys it declares towards other resources. Only
single-column foreign keys are modelled.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field as dataclass_field

from dpjoins.shared.naming import format_clause, qualify


@dataclass(frozen=True)
class Field:
    """A column of a resource."""

    name: str


@dataclass(frozen=True)
class ForeignKeyRef:
    """A reference from a local field to a field of another resource."""

    field: str
    resource: str
    reference_field: str

    def on_clause(self, local_resource: str) -> str:
        """Join clause for this foreign key declared on ``local_resource``."""
        return format_clause(self.resource, self.reference_field, local_resource, self.field)


@dataclass(frozen=True)
class Resource:
    """A named table with its fields and foreign keys."""

    name: str
    fields: tuple[Field, ...] = dataclass_field(default=())
    foreign_keys: tuple[ForeignKeyRef, ...] = dataclass_field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "foreign_keys", tuple(self.foreign_keys))

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def qualified_field_names(self) -> list[str]:
        return [qualify(self.name, f.name) for f in self.fields]

    def references_to(self, resource_name: str) -> Iterator[ForeignKeyRef]:
        """Yield the foreign keys of this resource pointing at ``resource_name``."""
        for fk in self.foreign_keys:
            if fk.resource == resource_name:
                yield fk


@dataclass(frozen=True)
class Schema:
    """An ordered collection of resources with unique names."""

    resources: tuple[Resource, ...] = dataclass_field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "resources", tuple(self.resources))

    @property
    def resource_names(self) -> list[str]:
        return [r.name for r in self.resources]
