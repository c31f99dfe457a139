"""
dpjoins

Join path resolution over data package table schemas: the joins needed to
link two tables, to force extra tables into a path, or to filter a main table
on fields of related tables.
"""

from .analysis import SchemaGraph
from .config import PlannerConfig, load_planner_config
from .core import (
    JoinPlanner,
    build_joins_for_filter,
    find_local_fk_field,
    find_path,
    find_path_with_required,
)
from .input import load_schema
from .shared import (
    DescriptorError,
    JoinError,
    JoinPlanError,
    NoDirectLinkToMainError,
    ResourceNotFoundError,
    UnreachableRequiredResourceError,
)
from .typing import Field, ForeignKeyRef, Join, JoinPlan, NotFound, Resource, Schema

__version__ = "0.1.0"

__all__ = [
    "JoinPlanner",
    "find_path",
    "find_path_with_required",
    "build_joins_for_filter",
    "find_local_fk_field",
    "SchemaGraph",
    "PlannerConfig",
    "load_planner_config",
    "load_schema",
    "Field",
    "ForeignKeyRef",
    "Resource",
    "Schema",
    "Join",
    "JoinPlan",
    "NotFound",
    "JoinError",
    "UnreachableRequiredResourceError",
    "NoDirectLinkToMainError",
    "ResourceNotFoundError",
    "JoinPlanError",
    "DescriptorError",
]
