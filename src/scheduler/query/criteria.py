# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Any, Optional

from scheduler.model.criteria import Criteria

# Clause order of a built predicate
CRITERIA_FIELDS = ("date", "time", "name", "note", "complete")


def is_empty(criteria: Criteria) -> bool:
    return all(criteria.get(field) is None for field in CRITERIA_FIELDS)


def build_predicate(criteria: Criteria) -> Optional["And"]:
    """
    Build a conjunction with one equality clause per field set in the criteria.

    Returns None when no field is set, leaving callers to decide what an
    unrestricted selection means for them.
    """
    if is_empty(criteria):
        return None

    predicate = And()
    for field in CRITERIA_FIELDS:
        value = criteria.get(field)
        if value is None:
            continue
        if field == "complete":
            value = 1 if value else 0
        predicate.add_clause(Equals(field, value))
    return predicate


class Clause(ABC):
    @abstractmethod
    def to_sql(self) -> tuple[str, list[Any]]: ...


class Equals(Clause):
    operator = "="

    def __init__(self, field: str, value: Any) -> None:
        if field not in CRITERIA_FIELDS:
            raise ValueError(f"unknown criteria field: {field}")
        self.field = field
        self.value = value

    def to_sql(self) -> tuple[str, list[Any]]:
        return f"{self.field} {self.operator} ?", [self.value]


class And(Clause):
    def __init__(self) -> None:
        self.clauses: list[Clause] = []

    def add_clause(self, clause: Clause) -> None:
        self.clauses.append(clause)

    def to_sql(self) -> tuple[str, list[Any]]:
        fragments: list[str] = []
        parameters: list[Any] = []
        for clause in self.clauses:
            fragment, clause_parameters = clause.to_sql()
            fragments.append(fragment)
            parameters += clause_parameters
        return " AND ".join(fragments), parameters
