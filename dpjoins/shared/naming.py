"""
Qualified names and join clause formatting.
"""

from .constants import CLAUSE_SEPARATOR, QUALIFIER_SEPARATOR


def qualify(resource_name: str, field_name: str) -> str:
    """Return the qualified field name, e.g. ``books.category_id``."""
    return f"{resource_name}{QUALIFIER_SEPARATOR}{field_name}"


def split_qualified(qualified_name: str) -> tuple[str, str]:
    """
    Split a qualified field name into (resource, field).

    The field is the part after the last separator so resource names
    containing dots (``schema.table``) are kept whole.

    Raises:
        ValueError: If the name is not qualified
    """
    resource_name, sep, field_name = qualified_name.rpartition(QUALIFIER_SEPARATOR)
    if not sep or not resource_name or not field_name:
        raise ValueError(f"Not a qualified field name: '{qualified_name}'")
    return resource_name, field_name


def format_clause(
    referenced_resource: str,
    referenced_field: str,
    local_resource: str,
    local_field: str,
) -> str:
    """Format an "on" clause: referenced side first, no whitespace."""
    return (
        f"{qualify(referenced_resource, referenced_field)}"
        f"{CLAUSE_SEPARATOR}"
        f"{qualify(local_resource, local_field)}"
    )
