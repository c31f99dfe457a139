"""
Analysis layer: schema graph view and join resolution.
"""

from .filter_joins import FilterJoinBuilder
from .fk_lookup import ForeignKeyLocator
from .path_finder import JoinPathFinder
from .required_resources import RequiredResourceExtender
from .schema_graph import SchemaGraph

__all__ = [
    "SchemaGraph",
    "JoinPathFinder",
    "RequiredResourceExtender",
    "FilterJoinBuilder",
    "ForeignKeyLocator",
]
