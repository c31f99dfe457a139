"""
Descriptor to Schema converter.

Normalizes the loose shapes a data package descriptor may take into the
typed Schema model:

- foreign keys declared in ``schema.foreignKeys`` or at resource level,
- ``fields`` given as a string or a one-element list,
- an empty ``reference.resource`` meaning a reference to the same resource.
"""

import logging
from typing import Any

from dpjoins.shared.exceptions import DescriptorError
from dpjoins.shared.types import Descriptor
from dpjoins.typing.schema import Field, ForeignKeyRef, Resource, Schema

logger = logging.getLogger(__name__)


class DescriptorConverter:
    """Converts raw descriptors to Schema."""

    def convert(self, descriptor: Descriptor) -> Schema:
        """
        Convert a descriptor to a Schema.

        Args:
            descriptor: Descriptor dictionary with a ``resources`` list

        Returns:
            Schema with resources in descriptor order

        Raises:
            DescriptorError: If the descriptor is malformed, repeats a resource
                name or declares a composite foreign key
        """
        if not isinstance(descriptor, dict):
            raise DescriptorError("Descriptor must be a mapping")

        resources_data = descriptor.get("resources")
        if not isinstance(resources_data, list):
            raise DescriptorError("Descriptor must contain a 'resources' list")

        resources = []
        seen_names = set()
        for idx, resource_data in enumerate(resources_data):
            resource = self._convert_resource(resource_data, idx)
            if resource.name in seen_names:
                raise DescriptorError(f"Duplicate resource name '{resource.name}'")
            seen_names.add(resource.name)
            resources.append(resource)

        return Schema(tuple(resources))

    def _convert_resource(self, data: Any, idx: int) -> Resource:
        if not isinstance(data, dict):
            raise DescriptorError(f"Resource #{idx} must be a mapping")

        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise DescriptorError(f"Resource #{idx} has no name")

        schema = data.get("schema") or {}
        if isinstance(schema, str):
            # Remote or file schema references are not followed
            logger.warning(f"Resource '{name}' uses an external schema ({schema}), fields skipped")
            schema = {}
        if not isinstance(schema, dict):
            raise DescriptorError(f"Resource '{name}' has an invalid schema")

        fields = tuple(
            Field(self._field_name(field_data, name)) for field_data in schema.get("fields") or []
        )

        fk_data = list(schema.get("foreignKeys") or []) + list(data.get("foreignKeys") or [])
        foreign_keys = tuple(self._convert_foreign_key(fk, name) for fk in fk_data)

        return Resource(name=name, fields=fields, foreign_keys=foreign_keys)

    def _field_name(self, data: Any, resource_name: str) -> str:
        name = data.get("name") if isinstance(data, dict) else None
        if not isinstance(name, str) or not name:
            raise DescriptorError(f"Resource '{resource_name}' has a field without a name")
        return name

    def _convert_foreign_key(self, data: Any, resource_name: str) -> ForeignKeyRef:
        if not isinstance(data, dict):
            raise DescriptorError(f"Resource '{resource_name}' has an invalid foreign key")

        local_field = self._single_field(data.get("fields"), resource_name, "fields")

        reference = data.get("reference")
        if not isinstance(reference, dict) or "resource" not in reference:
            raise DescriptorError(
                f"Foreign key '{resource_name}.{local_field}' has no reference resource"
            )

        target = reference["resource"] or resource_name
        reference_field = self._single_field(
            reference.get("fields"), resource_name, "reference.fields"
        )
        return ForeignKeyRef(field=local_field, resource=target, reference_field=reference_field)

    def _single_field(self, value: Any, resource_name: str, key: str) -> str:
        if isinstance(value, list):
            if len(value) > 1:
                raise DescriptorError(
                    f"Composite foreign key on '{resource_name}' ({key}: {value}) is not supported"
                )
            value = value[0] if value else None
        if not isinstance(value, str) or not value:
            raise DescriptorError(f"Foreign key on '{resource_name}' has an invalid '{key}'")
        return value
