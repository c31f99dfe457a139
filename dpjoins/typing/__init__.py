"""
Type definitions for dpjoins.

Schema model and join plan value types.
"""

from .plan import Join, JoinPlan, NotFound
from .schema import Field, ForeignKeyRef, Resource, Schema

__all__ = [
    "Field",
    "ForeignKeyRef",
    "Resource",
    "Schema",
    "Join",
    "JoinPlan",
    "NotFound",
]
