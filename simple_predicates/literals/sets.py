"""Literals about membership. A :class:`Member` is true if its value is an
element of the context collection, a :class:`Flag` is true if its name is
mapped to a true value in the context mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Collection, Hashable, Mapping, Self

from ..expression import Literal

SCALARS = (int, float, str, bool, type(None))


def _value_to_data(value: Any, member_value: Any) -> Any:
    match value:
        case tuple():
            return [_value_to_data(item, member_value) for item in value]
        case _ if isinstance(value, SCALARS):
            return value
        case _:
            raise ValueError(f'{member_value!r} is not a serializable Member value')


def _value_from_data(data: Any, member_data: Any) -> Any:
    match data:
        case list():
            return tuple(_value_from_data(item, member_data) for item in data)
        case _ if isinstance(data, SCALARS):
            return data
        case _:
            raise ValueError(f'{member_data!r} is not a valid Member value')


@dataclass(frozen=True)
class Member(Literal[Collection[Any]]):
    """Membership of a fixed value in the context.

    >>> from simple_predicates.expression import Var
    >>> context = [1, 2, 4, 5, 7, 9, 10]
    >>> Var(Member(4)).evaluate(context)
    True
    >>> Var(Member(3)).evaluate(context)
    False
    >>> print(Member(3))
    3
    """

    value: Hashable

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.value!r})'

    def __str__(self) -> str:
        return str(self.value)

    def evaluate(self, context: Collection[Any]) -> bool:
        return self.value in context

    def to_data(self) -> Any:
        """The value, where tuples become lists. Other containers have no
        JSON counterpart that reads back as an equal value.

        >>> Member(4).to_data()
        4
        >>> Member((1, ('a', None))).to_data()
        [1, ['a', None]]
        >>> Member(frozenset({1})).to_data()
        Traceback (most recent call last):
        ...
        ValueError: frozenset({1}) is not a serializable Member value
        """
        return _value_to_data(self.value, self.value)

    @classmethod
    def from_data(cls, data: Any) -> Self:
        """
        >>> Member.from_data('a')
        Member('a')
        >>> Member.from_data([1, [2, 3]])
        Member((1, (2, 3)))
        >>> Member.from_data({'a': 1})
        Traceback (most recent call last):
        ...
        ValueError: {'a': 1} is not a valid Member value
        """
        return cls(_value_from_data(data, data))


@dataclass(frozen=True)
class Flag(Literal[Mapping[str, Any]]):
    """A named boolean, which is looked up in the context. Missing names raise
    :exc:`KeyError`.

    >>> Flag('x').evaluate({'x': True, 'y': False})
    True
    >>> Flag('z').evaluate({'x': True})
    Traceback (most recent call last):
    ...
    KeyError: 'z'
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ValueError(f'argument must be a string; {self.name!r} is {type(self.name)}')

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.name!r})'

    def __str__(self) -> str:
        return self.name

    def evaluate(self, context: Mapping[str, Any]) -> bool:
        return bool(context[self.name])

    def to_data(self) -> Any:
        return self.name

    @classmethod
    def from_data(cls, data: Any) -> Self:
        if not isinstance(data, str):
            raise ValueError(f'{data!r} is not a valid {cls.__name__} name')
        return cls(data)
