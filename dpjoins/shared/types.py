"""
Common type definitions for join planning.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

# Names
ResourceName = str
FieldName = str
QualifiedFieldName = str  # "<resource>.<field>"

# Canonical "on" clause: "<refResource>.<refField>=<localResource>.<localField>"
JoinClause = str

# Filter keys: qualified field names (a filter mapping's keys work too)
FilterKeys = Iterable[QualifiedFieldName]

# Raw data package descriptor as read from JSON/YAML
Descriptor = dict[str, Any]

# File paths
FilePath = str | Path
