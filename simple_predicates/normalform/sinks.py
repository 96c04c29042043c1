"""Clause sinks are the containers into which normal form extraction inserts
finished clauses. The choice of the sink is a storage policy. It does not
affect the extraction algorithm.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator

from ..expression import Expression
from ..expression.expression import λ


class ClauseSink(ABC, Generic[λ]):
    """Abstract container of clauses with a single mutating operation
    :meth:`insert`.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Expression[λ]]:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def insert(self, clause: Expression[λ]) -> None:
        ...


class ClauseSet(ClauseSink[λ]):
    """Deduplicating clause sink. Structurally equal clauses are stored once.
    The iteration order is unspecified. Literals must be hashable.

    >>> from simple_predicates.expression import Or, Var
    >>> from simple_predicates.literals.sets import Member
    >>> a, b = Var(Member(1)), Var(Member(2))
    >>> sink = ClauseSet()
    >>> sink.insert(Or(a, b))
    >>> sink.insert(Or(b, a))
    >>> len(sink)
    1
    """

    def __init__(self) -> None:
        self.clauses: set[Expression[λ]] = set()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClauseSet):
            return NotImplemented
        return self.clauses == other.clauses

    def __iter__(self) -> Iterator[Expression[λ]]:
        return iter(self.clauses)

    def __len__(self) -> int:
        return len(self.clauses)

    def insert(self, clause: Expression[λ]) -> None:
        self.clauses.add(clause)


class ClauseList(ClauseSink[λ]):
    """Order-preserving clause sink. Clauses are kept in insertion order,
    duplicates included.

    >>> from simple_predicates.expression import Or, Var
    >>> from simple_predicates.literals.sets import Member
    >>> a, b = Var(Member(1)), Var(Member(2))
    >>> sink = ClauseList()
    >>> sink.insert(Or(a, b))
    >>> sink.insert(Or(b, a))
    >>> list(sink)
    [Or(Var(Member(1)), Var(Member(2))), Or(Var(Member(2)), Var(Member(1)))]
    """

    def __init__(self) -> None:
        self.clauses: list[Expression[λ]] = []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClauseList):
            return NotImplemented
        return self.clauses == other.clauses

    def __iter__(self) -> Iterator[Expression[λ]]:
        return iter(self.clauses)

    def __len__(self) -> int:
        return len(self.clauses)

    def insert(self, clause: Expression[λ]) -> None:
        self.clauses.append(clause)
