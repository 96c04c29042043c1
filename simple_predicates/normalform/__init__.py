"""Conversion of expressions into conjunctive and disjunctive normal forms.

>>> from simple_predicates.expression import And, Or, Var
>>> from simple_predicates.literals.sets import Member
>>> a, b, c = Var(Member(1)), Var(Member(2)), Var(Member(3))
>>> f = Or(a, And(b, c))
>>> Cnf(f) == Cnf([Or(a, b), Or(a, c)])
True
>>> Dnf(f) == Dnf([a, And(b, c)])
True
"""

from .extraction import cnf_extraction, dnf_extraction, NormalFormExtraction, Options  # noqa
from .forms import (Cnf, CnfList, CnfSet, ConjunctiveNormalForm, Dnf, DnfList,  # noqa
                    DnfSet, DisjunctiveNormalForm, NormalForm)
from .sinks import ClauseList, ClauseSet, ClauseSink  # noqa

__all__ = [
    'Cnf', 'CnfList', 'CnfSet', 'ConjunctiveNormalForm',
    'Dnf', 'DnfList', 'DnfSet', 'DisjunctiveNormalForm',
    'NormalForm',

    'cnf_extraction', 'dnf_extraction', 'NormalFormExtraction', 'Options',

    'ClauseList', 'ClauseSet', 'ClauseSink'
]
