"""We introduce the leaves and the boolean operators of expressions as final
subclasses of :class:`.Expression`.
"""
from __future__ import annotations

from typing import final

from .expression import λ, Expression
from .literal import Literal


@final
class Var(Expression[λ]):
    """A leaf of the expression tree, which holds exactly one literal.

    >>> from simple_predicates.literals.sets import Member
    >>> Var(Member(4))
    Var(Member(4))
    >>> Var(4)
    Traceback (most recent call last):
    ...
    ValueError: 4 is not a Literal
    """

    def __init__(self, arg: λ) -> None:
        if not isinstance(arg, Literal):
            raise ValueError(f'{arg!r} is not a Literal')
        super().__init__()
        self._args = (arg, )

    @property
    def arg(self) -> λ:
        """The literal.

        .. seealso::
            * :attr:`args <.expression.Expression.args>` -- all arguments as a tuple
            * :attr:`op <.expression.Expression.op>` -- operator
        """
        return self.args[0]


def _check_expressions(*args: object) -> None:
    for arg in args:
        if not isinstance(arg, Expression):
            raise ValueError(f'{arg!r} is not an Expression')


@final
class Not(Expression[λ]):
    """A class whose instances are negated expressions in the sense that their
    toplevel operator is the boolean operator :math:`\\neg`.

    >>> from simple_predicates.literals.sets import Member
    >>> Not(Var(Member(1)))
    Not(Var(Member(1)))

    .. seealso::
        * :meth:`~, __invert__() <.expression.Expression.__invert__>` -- \
            short notation of :class:`Not`
    """

    def __init__(self, arg: Expression[λ]) -> None:
        _check_expressions(arg)
        super().__init__()
        self._args = (arg, )

    @property
    def arg(self) -> Expression[λ]:
        """The one argument of the operator :math:`\\neg`.
        """
        return self.args[0]


class _BinaryMixin:

    @property
    def lhs(self) -> Expression:
        """The left argument.
        """
        return self.args[0]

    @property
    def rhs(self) -> Expression:
        """The right argument.
        """
        return self.args[1]


@final
class Or(_BinaryMixin, Expression[λ]):
    """A class whose instances are disjunctions of exactly two expressions.
    Nested disjunctions are not flattened.

    >>> from simple_predicates.literals.sets import Member
    >>> a, b, c = Var(Member(1)), Var(Member(2)), Var(Member(3))
    >>> Or(Or(a, b), c)
    Or(Or(Var(Member(1)), Var(Member(2))), Var(Member(3)))

    .. seealso::
        * :meth:`|, __or__() <.expression.Expression.__or__>` -- \
            infix notation of :class:`Or`
    """

    def __init__(self, lhs: Expression[λ], rhs: Expression[λ]) -> None:
        _check_expressions(lhs, rhs)
        super().__init__()
        self._args = (lhs, rhs)

    @classmethod
    def dual(cls) -> type[And[λ]]:
        r"""A class method yielding the class :class:`And`, which implements
        the dual operator :math:`\wedge` of :math:`\vee`.
        """
        return And


@final
class And(_BinaryMixin, Expression[λ]):
    """A class whose instances are conjunctions of exactly two expressions.
    Nested conjunctions are not flattened.

    >>> from simple_predicates.literals.sets import Member
    >>> And(Var(Member(1)), Not(Var(Member(2))))
    And(Var(Member(1)), Not(Var(Member(2))))

    .. seealso::
        * :meth:`&, __and__() <.expression.Expression.__and__>` -- \
            infix notation of :class:`And`
    """

    def __init__(self, lhs: Expression[λ], rhs: Expression[λ]) -> None:
        _check_expressions(lhs, rhs)
        super().__init__()
        self._args = (lhs, rhs)

    @classmethod
    def dual(cls) -> type[Or[λ]]:
        r"""A class method yielding the class :class:`Or`, which implements
        the dual operator :math:`\vee` of :math:`\wedge`.
        """
        return Or


def involutive_not(arg: Expression[λ]) -> Expression[λ]:
    """Construct an expression equivalent to ``Not(arg)`` using the involutive
    law if applicable.

    >>> from simple_predicates.literals.sets import Member
    >>> involutive_not(Var(Member(1)))
    Not(Var(Member(1)))
    >>> involutive_not(Not(Var(Member(1))))
    Var(Member(1))
    """
    if isinstance(arg, Not):
        return arg.arg
    return Not(arg)
