"""Normal forms are containers of clauses. The clauses of a
:class:`ConjunctiveNormalForm` are implicitly combined with :math:`\\wedge`,
the clauses of a :class:`DisjunctiveNormalForm` with :math:`\\vee`.

Each of the two comes with two storage policies: The ``Set`` variants
deduplicate structurally equal clauses and have no defined order. The ``List``
variants keep all clauses in the order in which extraction produced them.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, ClassVar, Generic, Iterable, Iterator

from IPython.lib import pretty

from ..expression import Expression
from ..expression.expression import λ
from .extraction import cnf_extraction, dnf_extraction, NormalFormExtraction
from .sinks import ClauseList, ClauseSet, ClauseSink


class NormalForm(Generic[λ]):
    """Abstract base class of normal forms.

    A normal form is created either from a single :class:`.Expression`, which
    is converted by :attr:`extraction`, or from an iterable of expressions,
    which are taken as clauses without any check or conversion. Normal forms
    are not modified after their creation.
    """

    extraction: ClassVar[NormalFormExtraction]
    """The extraction used for converting an expression.
    """

    sink_type: ClassVar[type[ClauseSink]]
    """The storage policy.
    """

    @property
    def clauses(self) -> tuple[Expression[λ], ...]:
        """The clauses as a tuple.
        """
        return tuple(self._sink)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return False
        assert isinstance(other, NormalForm)
        return self._sink == other._sink

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, arg: Expression[λ] | Iterable[Expression[λ]] = ()) -> None:
        sink: ClauseSink[λ] = self.sink_type()
        match arg:
            case Expression():
                self.extraction(arg, sink)
            case _:
                for clause in arg:
                    sink.insert(clause)
        self._sink = sink

    def __iter__(self) -> Iterator[Expression[λ]]:
        return iter(self._sink)

    def __len__(self) -> int:
        return len(self._sink)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({list(self._sink)!r})'

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        op = self.__class__.__name__
        with p.group(len(op) + 2, op + '([', '])'):
            for idx, clause in enumerate(self._sink):
                if idx:
                    p.text(',')
                    p.breakable()
                p.pretty(clause)

    @abstractmethod
    def evaluate(self, context: Any) -> bool:
        ...

    @classmethod
    def from_clauses(cls, clauses: Iterable[Expression[λ]]) -> NormalForm[λ]:
        """Create a normal form from clauses that are already in the right
        shape. Nothing is checked.
        """
        return cls(list(clauses))

    @classmethod
    def from_expression(cls, f: Expression[λ]) -> NormalForm[λ]:
        """Create a normal form equivalent to `f`.
        """
        return cls(f)

    def is_empty(self) -> bool:
        return len(self._sink) == 0

    def to_list(self) -> list[Expression[λ]]:
        """A new list of the clauses, in iteration order.
        """
        return list(self._sink)


class ConjunctiveNormalForm(NormalForm[λ]):
    """A conjunction of clauses. The empty conjunctive normal form is true.

    >>> CnfSet().evaluate({1})
    True
    """

    extraction = cnf_extraction

    def evaluate(self, context: Any) -> bool:
        return all(clause.evaluate(context) for clause in self._sink)


class DisjunctiveNormalForm(NormalForm[λ]):
    """A disjunction of clauses. The empty disjunctive normal form is false.

    >>> DnfSet().evaluate({1})
    False
    """

    extraction = dnf_extraction

    def evaluate(self, context: Any) -> bool:
        return any(clause.evaluate(context) for clause in self._sink)


class CnfSet(ConjunctiveNormalForm[λ]):
    """A conjunctive normal form with deduplicated clauses.

    >>> from simple_predicates.expression import And, Or, Var
    >>> from simple_predicates.literals.sets import Member
    >>> a, b, c = Var(Member(1)), Var(Member(2)), Var(Member(3))
    >>> cnf = CnfSet(And(Or(a, b), And(Or(b, a), c)))
    >>> len(cnf)
    2
    >>> cnf == CnfSet([c, Or(a, b)])
    True
    >>> cnf.evaluate({1, 3}), cnf.evaluate({1, 2})
    (True, False)
    """

    sink_type = ClauseSet


class CnfList(ConjunctiveNormalForm[λ]):
    """A conjunctive normal form with clauses in extraction order.

    >>> from simple_predicates.expression import And, Or, Var
    >>> from simple_predicates.literals.sets import Member
    >>> a, b, c = Var(Member(1)), Var(Member(2)), Var(Member(3))
    >>> CnfList(And(Or(a, b), And(Or(b, a), c)))
    CnfList([Var(Member(3)), Or(Var(Member(2)), Var(Member(1))), Or(Var(Member(1)), Var(Member(2)))])
    """

    sink_type = ClauseList


class DnfSet(DisjunctiveNormalForm[λ]):
    """A disjunctive normal form with deduplicated clauses.

    >>> from simple_predicates.expression import And, Not, Or, Var
    >>> from simple_predicates.literals.sets import Member
    >>> a, b = Var(Member(1)), Var(Member(2))
    >>> dnf = DnfSet(Not(And(a, Not(b))))
    >>> dnf == DnfSet([Not(a), b])
    True
    """

    sink_type = ClauseSet


class DnfList(DisjunctiveNormalForm[λ]):
    """A disjunctive normal form with clauses in extraction order.

    >>> from simple_predicates.expression import And, Or, Var
    >>> from simple_predicates.literals.sets import Member
    >>> a, b, c = Var(Member(1)), Var(Member(2)), Var(Member(3))
    >>> DnfList(And(a, Or(b, c))).to_list()
    [And(Var(Member(1)), Var(Member(3))), And(Var(Member(1)), Var(Member(2)))]
    """

    sink_type = ClauseList


Cnf = CnfSet
"""The default conjunctive normal form.
"""

Dnf = DnfSet
"""The default disjunctive normal form.
"""
