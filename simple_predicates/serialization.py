"""Structural serialization of expressions and normal forms to JSON. The
structure is the wire format. Each expression is an object with exactly one
key, which names the operator:

>>> from simple_predicates.expression import And, Not, Or, Var
>>> from simple_predicates.literals.sets import Member
>>> f = And(Or(Not(Var(Member(1))), Var(Member(2))), Or(Not(Var(Member(3))), Var(Member(4))))
>>> dumps(f)
'{"And": [{"Or": [{"Not": {"Var": 1}}, {"Var": 2}]}, {"Or": [{"Not": {"Var": 3}}, {"Var": 4}]}]}'
>>> loads(_, Member) == f
True

A normal form is the list of its clauses:

>>> from simple_predicates.normalform import CnfList
>>> dumps(CnfList(f))
'[{"Or": [{"Not": {"Var": 3}}, {"Var": 4}]}, {"Or": [{"Not": {"Var": 1}}, {"Var": 2}]}]'

There is no versioning of the format. Literals are serialized via
:meth:`.Literal.to_data` and deserialized via :meth:`.Literal.from_data`.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from .expression import And, Expression, Literal, Not, Or, Var
from .normalform import NormalForm


class DeserializationError(ValueError):
    """Raised when input data does not describe an expression or a normal
    form.
    """
    pass


def to_data(obj: Expression | NormalForm) -> Any:
    """Convert `obj` into nested lists and dictionaries suitable for
    :func:`json.dumps`.
    """
    match obj:
        case Var():
            return {'Var': obj.arg.to_data()}
        case Not():
            return {'Not': to_data(obj.arg)}
        case And() | Or():
            return {obj.op.__name__: [to_data(arg) for arg in obj.args]}
        case NormalForm():
            return [to_data(clause) for clause in obj]
        case _:
            raise TypeError(f'cannot serialize {type(obj)}')


def expression_from_data(data: Any, literal_type: type[Literal]) -> Expression:
    """Inverse of :func:`to_data` for expressions.

    >>> from simple_predicates.literals.sets import Flag
    >>> expression_from_data({'Or': [{'Var': 'x'}, {'Not': {'Var': 'y'}}]}, Flag)
    Or(Var(Flag('x')), Not(Var(Flag('y'))))
    >>> expression_from_data({'Xor': []}, Flag)
    Traceback (most recent call last):
    ...
    simple_predicates.serialization.DeserializationError: unknown operator 'Xor'
    """
    if not isinstance(data, dict) or len(data) != 1:
        raise DeserializationError(f'expecting an object with exactly one key; {data!r}')
    (key, value), = data.items()
    match key:
        case 'Var':
            try:
                literal = literal_type.from_data(value)
            except ValueError as exc:
                raise DeserializationError(f'bad literal {value!r}: {exc}') from exc
            return Var(literal)
        case 'Not':
            return Not(expression_from_data(value, literal_type))
        case 'And' | 'Or':
            if not isinstance(value, list) or len(value) != 2:
                raise DeserializationError(
                    f'expecting a list of two arguments for {key}; {value!r}')
            lhs, rhs = (expression_from_data(arg, literal_type) for arg in value)
            return And(lhs, rhs) if key == 'And' else Or(lhs, rhs)
        case _:
            raise DeserializationError(f'unknown operator {key!r}')


def normal_form_from_data(data: Any, form_type: type[NormalForm],
                          literal_type: type[Literal]) -> NormalForm:
    """Inverse of :func:`to_data` for normal forms. The clauses are inserted
    as they are, see :meth:`.NormalForm.from_clauses`.
    """
    if not isinstance(data, list):
        raise DeserializationError(f'expecting a list of clauses; {data!r}')
    return form_type.from_clauses(expression_from_data(clause, literal_type)
                                  for clause in data)


def dumps(obj: Expression | NormalForm, **kwargs: Any) -> str:
    """Serialize `obj` to a JSON string. Keyword arguments are passed on to
    :func:`json.dumps`.
    """
    return json.dumps(to_data(obj), **kwargs)


def loads(s: str | bytes, literal_type: type[Literal],
          form_type: Optional[type[NormalForm]] = None) -> Expression | NormalForm:
    """Deserialize an expression or, if `form_type` is specified, a normal
    form of that type from the JSON string `s`.

    >>> from simple_predicates.literals.sets import Member
    >>> loads('{"Not": ', Member)
    Traceback (most recent call last):
    ...
    simple_predicates.serialization.DeserializationError: invalid JSON: Expecting value: line 1 column 9 (char 8)
    """
    try:
        data = json.loads(s)
    except json.JSONDecodeError as exc:
        raise DeserializationError(f'invalid JSON: {exc}') from exc
    if form_type is None:
        return expression_from_data(data, literal_type)
    return normal_form_from_data(data, form_type, literal_type)
