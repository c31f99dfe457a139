"""
Custom exceptions for join planning.
"""


class JoinError(Exception):
    """Base exception for all join planning errors."""

    pass


class UnreachableRequiredResourceError(JoinError):
    """Raised when a required resource has no direct link to the join path."""

    def __init__(self, resource_name: str, from_name: str, to_name: str):
        self.resource_name = resource_name
        self.from_name = from_name
        self.to_name = to_name
        super().__init__(
            f"Required resource '{resource_name}' has no direct foreign key link to any "
            f"table on the join path from '{from_name}' to '{to_name}'"
        )


class NoDirectLinkToMainError(JoinError):
    """Raised when a filtered table has no foreign key to the main table."""

    def __init__(self, resource_name: str, main_name: str, field_names: list[str]):
        self.resource_name = resource_name
        self.main_name = main_name
        self.field_names = field_names
        super().__init__(
            f"Unable to build ON clause: '{resource_name}' has no foreign key to "
            f"'{main_name}' (filtered on {', '.join(field_names)})"
        )


class ResourceNotFoundError(JoinError):
    """Raised when a named resource is not described in the schema."""

    def __init__(self, resource_name: str):
        self.resource_name = resource_name
        super().__init__(f"Resource '{resource_name}' not found in schema")


class JoinPlanError(JoinError):
    """Raised when a join plan cannot be ordered for execution."""

    pass


class DescriptorError(JoinError):
    """Raised when a data package descriptor cannot be read or converted."""

    pass
