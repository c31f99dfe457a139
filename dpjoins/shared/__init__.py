"""
Shared utilities and common types for join planning.
"""

from .types import *
from .exceptions import *
from .constants import *
from .naming import format_clause, qualify, split_qualified

__all__ = [
    # Types
    "ResourceName",
    "FieldName",
    "QualifiedFieldName",
    "JoinClause",
    "FilterKeys",
    "Descriptor",
    "FilePath",
    # Exceptions
    "JoinError",
    "UnreachableRequiredResourceError",
    "NoDirectLinkToMainError",
    "ResourceNotFoundError",
    "JoinPlanError",
    "DescriptorError",
    # Constants
    "QUALIFIER_SEPARATOR",
    "CLAUSE_SEPARATOR",
    "DEFAULT_DESCRIPTOR_FILE",
    # Utilities
    "format_clause",
    "qualify",
    "split_qualified",
]
