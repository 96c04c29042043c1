from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Mapping, Self

import sympy
from sympy.logic.boolalg import Boolean, BooleanAtom, BooleanFalse, BooleanTrue

from ..expression import Literal


CONSTRUCTORS: Final = {
    cls.__name__: cls for cls in (
        sympy.Add, sympy.Mul, sympy.Pow,
        sympy.Eq, sympy.Ne, sympy.Ge, sympy.Gt, sympy.Le, sympy.Lt,
        sympy.And, sympy.Or, sympy.Not)
}
"""The sympy classes of inner nodes that :meth:`Relation.from_data` accepts,
by name. Leaves are symbols, numbers, and the truth values.
"""


def _term_to_data(expr: sympy.Basic) -> Any:
    match expr:
        case sympy.Symbol():
            return {'func': 'Symbol', 'args': [expr.name]}
        case sympy.Integer():
            return {'func': 'Integer', 'args': [int(expr)]}
        case sympy.Rational():
            return {'func': 'Rational', 'args': [int(expr.p), int(expr.q)]}
        case sympy.Float():
            return {'func': 'Float', 'args': [str(expr)]}
        case BooleanTrue() | BooleanFalse():
            return {'func': 'Boolean', 'args': [bool(expr)]}
        case _ if expr.func.__name__ in CONSTRUCTORS:
            return {'func': expr.func.__name__,
                    'args': [_term_to_data(arg) for arg in expr.args]}
        case _:
            raise ValueError(f'cannot serialize {expr} of type {expr.func.__name__}')


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _term_from_data(data: Any) -> sympy.Basic:
    if not isinstance(data, dict) or set(data) != {'func', 'args'}:
        raise ValueError(f'expecting an object with keys func and args; {data!r}')
    func, args = data['func'], data['args']
    if not isinstance(args, list):
        raise ValueError(f'expecting a list of arguments; {args!r}')
    match func, args:
        case 'Symbol', [str() as name]:
            return sympy.Symbol(name)
        case 'Integer', [value] if _is_int(value):
            return sympy.Integer(value)
        case 'Rational', [p, q] if _is_int(p) and _is_int(q) and q != 0:
            return sympy.Rational(p, q)
        case 'Float', [str() as value]:
            try:
                return sympy.Float(value)
            except (TypeError, ValueError) as exc:
                raise ValueError(f'bad float {value!r}') from exc
        case 'Boolean', [bool() as value]:
            return sympy.true if value else sympy.false
        case str(), _ if func in CONSTRUCTORS:
            try:
                return CONSTRUCTORS[func](*(_term_from_data(arg) for arg in args))
            except (TypeError, ValueError) as exc:
                raise ValueError(f'cannot apply {func} to {args!r}') from exc
        case _:
            raise ValueError(f'unknown or malformed node {data!r}')


@dataclass(frozen=True)
class Relation(Literal[Mapping[Any, Any]]):
    """A literal wrapping a sympy boolean, typically a relation between sympy
    terms. The context is a substitution, which maps symbols or their names
    to numbers. Evaluation requires that the substitution yields a definite
    truth value.

    >>> x, y = sympy.symbols('x y')
    >>> r = Relation(x**2 > y)
    >>> r
    Relation(x**2 > y)
    >>> r.evaluate({x: 2, y: 3})
    True
    >>> r.evaluate({'x': 1, 'y': 3})
    False
    >>> r.evaluate({x: 1})
    Traceback (most recent call last):
    ...
    ValueError: x**2 > y is not definite with respect to {x: 1}
    """

    relation: Boolean

    def __post_init__(self) -> None:
        if not isinstance(self.relation, Boolean):
            raise ValueError(f'{self.relation!r} is not a sympy Boolean')

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.relation})'

    def __str__(self) -> str:
        return str(self.relation)

    def as_latex(self) -> str:
        r"""LaTeX representation as a string.

        >>> x = sympy.Symbol('x')
        >>> Relation(x >= 1).as_latex()
        'x \\geq 1'
        """
        return sympy.latex(self.relation)

    def evaluate(self, context: Mapping[Any, Any]) -> bool:
        value = self.relation.subs(context)
        if not isinstance(value, BooleanAtom):
            raise ValueError(f'{self} is not definite with respect to {context}')
        return bool(value)

    def to_data(self) -> Any:
        """The expression tree of the relation. Inner nodes name their sympy
        class, leaves are symbols, numbers, and truth values.

        >>> x = sympy.Symbol('x')
        >>> Relation(x > 0).to_data()
        {'func': 'StrictGreaterThan', 'args': [{'func': 'Symbol', 'args': ['x']}, {'func': 'Integer', 'args': [0]}]}
        """
        return _term_to_data(self.relation)

    @classmethod
    def from_data(cls, data: Any) -> Self:
        """Rebuild a relation from the output of :meth:`to_data`. Only the
        classes in :data:`CONSTRUCTORS` are applied. Nothing is parsed or
        evaluated as code.

        >>> x = sympy.Symbol('x')
        >>> Relation.from_data(Relation(x**2 + 1 < x / 3).to_data())
        Relation(x**2 + 1 < x/3)
        >>> Relation.from_data({'func': 'Function', 'args': []})
        Traceback (most recent call last):
        ...
        ValueError: unknown or malformed node {'func': 'Function', 'args': []}
        """
        return cls(_term_from_data(data))
