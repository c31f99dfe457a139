"""
Core layer: the join planner and its functional shortcuts.
"""

from .planner import (
    JoinPlanner,
    build_joins_for_filter,
    find_local_fk_field,
    find_path,
    find_path_with_required,
)

__all__ = [
    "JoinPlanner",
    "find_path",
    "find_path_with_required",
    "build_joins_for_filter",
    "find_local_fk_field",
]
