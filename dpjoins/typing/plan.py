"""
Join plan value types.

A join plan maps each table to join (other than the starting table) to the
"on" clauses linking it to the rest of the plan. Plans are immutable: adding
a clause returns a new plan, so a plan handed to one search branch can never
be observed changing by another.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from graphlib import CycleError, TopologicalSorter
from typing import Any

from dpjoins.shared.constants import CLAUSE_SEPARATOR
from dpjoins.shared.exceptions import JoinPlanError
from dpjoins.shared.naming import split_qualified


class NotFound(Enum):
    """Soft, non-exceptional lookup outcomes."""

    UNKNOWN_RESOURCE = "unknown_resource"  # starting resource not described
    NO_PATH = "no_path"  # resources described but not connected
    NO_FOREIGN_KEY = "no_foreign_key"  # no matching foreign key field

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Join:
    """Join entry for one table: its ordered, de-duplicated "on" clauses."""

    on: tuple[str, ...]

    def __post_init__(self) -> None:
        clauses = tuple(dict.fromkeys(self.on))
        if not clauses:
            raise ValueError("A join needs at least one ON clause")
        object.__setattr__(self, "on", clauses)

    def with_clause(self, clause: str) -> "Join":
        if clause in self.on:
            return self
        return Join(self.on + (clause,))

    def resources(self) -> set[str]:
        """Names of all resources mentioned by the clauses."""
        names = set()
        for clause in self.on:
            for side in clause.split(CLAUSE_SEPARATOR):
                names.add(split_qualified(side)[0])
        return names

    def to_dict(self) -> dict[str, list[str]]:
        return {"on": list(self.on)}


class JoinPlan(Mapping[str, Join]):
    """Ordered, immutable mapping of resource name to Join (discovery order)."""

    __slots__ = ("_joins",)

    def __init__(self, joins: Mapping[str, Join] | Iterable[tuple[str, Join]] = ()):
        self._joins: dict[str, Join] = dict(joins)

    def __getitem__(self, resource_name: str) -> Join:
        return self._joins[resource_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._joins)

    def __len__(self) -> int:
        return len(self._joins)

    def __repr__(self) -> str:
        return f"JoinPlan({self.to_dict()!r})"

    def with_clause(self, resource_name: str, clause: str) -> "JoinPlan":
        """Return a copy of this plan with ``clause`` added for ``resource_name``."""
        joins = dict(self._joins)
        existing = joins.get(resource_name)
        joins[resource_name] = existing.with_clause(clause) if existing else Join((clause,))
        return JoinPlan(joins)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {name: join.to_dict() for name, join in self._joins.items()}

    def execution_order(self, main_name: str) -> list[str]:
        """
        Order the plan's tables so each one is joined after every table its
        clauses reference.

        Args:
            main_name: The table the query starts from

        Returns:
            Resource names in joinable order (main table excluded)

        Raises:
            JoinPlanError: If a clause references a table outside the plan
                or the clauses form a cycle
        """
        position = {name: idx for idx, name in enumerate(self._joins)}
        position[main_name] = -1

        sorter: TopologicalSorter = TopologicalSorter()
        for name, join in self._joins.items():
            dependencies = join.resources() - {name}
            unknown = dependencies - position.keys()
            if unknown:
                raise JoinPlanError(
                    f"Join on '{name}' references {sorted(unknown)} outside the plan"
                )
            sorter.add(name, *sorted(dependencies, key=position.__getitem__))

        try:
            sorter.prepare()
        except CycleError as e:
            raise JoinPlanError(f"Join plan contains a cycle: {e.args[1]}") from e

        order = []
        while sorter.is_active():
            ready = sorted(sorter.get_ready(), key=position.__getitem__)
            order.extend(name for name in ready if name != main_name)
            sorter.done(*ready)
        return order
