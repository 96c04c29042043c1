from __future__ import annotations

from abc import abstractmethod
from typing import Any, Final, Generic, Iterator, Optional, Self, TypeVar, TYPE_CHECKING
from typing_extensions import TypeIs

from IPython.lib import pretty

if TYPE_CHECKING:
    from ..normalform.forms import CnfSet, DnfSet


λ = TypeVar('λ', bound='Literal')
"""A type variable denoting a type of literals with upper bound
:class:`simple_predicates.expression.literal.Literal`.
"""


class Expression(Generic[λ]):
    r"""This abstract base class implements representations of and methods on
    boolean expressions recursively built from literals using the operators
    :math:`\lnot`, :math:`\land`, and :math:`\lor`.

    The operators are implemented as final subclasses :class:`Not`,
    :class:`And`, :class:`Or`, and literals enter the tree wrapped in a leaf
    :class:`Var`. Expressions are immutable. Transformations return new
    expressions and may share unchanged subexpressions with their input.

    .. note::

        :class:`Expression` depends on a type variable :data:`.λ` for the
        type of literals. It appears in type annotations used by static type
        checkers but is not relevant for interactive use or use as a library.
    """

    _args: tuple[Any, ...]
    _hash: Optional[int]

    @property
    def op(self) -> type[Self]:
        """Operator. This property yields the respective subclass.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The arguments of an expression as a tuple. For :class:`Var` this is
        the literal, for all other operators these are expressions.
        """
        return self._args

    def __and__(self, other: Expression[λ]) -> And[λ]:
        """Override the :obj:`& <object.__and__>` operator to apply
        :class:`And`.

        >>> from simple_predicates.literals.sets import Member
        >>> Var(Member(1)) & Var(Member(2))
        And(Var(Member(1)), Var(Member(2)))
        """
        return And(self, other)

    def __eq__(self, other: object) -> bool:
        """A recursive test for structural equality of `self` and `other`. The
        two arguments of :class:`And` and :class:`Or` are compared as an
        unordered pair. There is no further canonicalization, in particular
        no associativity.

        Note that this is not a test for logical equivalence.

        >>> from simple_predicates.literals.sets import Member
        >>> a, b, c = Var(Member(1)), Var(Member(2)), Var(Member(3))
        >>> Or(a, b) == Or(b, a)
        True
        >>> Or(a, b) == And(a, b)
        False
        >>> Or(Or(a, b), c) == Or(a, Or(b, c))
        False
        """
        if self is other:
            return True
        if not isinstance(other, Expression):
            return False
        if self.op is not other.op:
            return False
        match self:
            case Var() | Not():
                return self.args[0] == other.args[0]
            case And() | Or():
                lhs, rhs = self.args
                other_lhs, other_rhs = other.args
                return ((lhs == other_lhs and rhs == other_rhs)
                        or (lhs == other_rhs and rhs == other_lhs))
            case _:
                assert False, type(self)

    def __hash__(self) -> int:
        """Hash function consistent with :meth:`__eq__`. It requires hashable
        literals.

        >>> from simple_predicates.literals.sets import Member
        >>> a, b = Var(Member(1)), Var(Member(2))
        >>> hash(And(a, b)) == hash(And(b, a))
        True
        """
        if self._hash is None:
            match self:
                case Var() | Not():
                    self._hash = hash((self.op.__name__, self.args[0]))
                case And() | Or():
                    hashes = sorted(hash(arg) for arg in self.args)
                    self._hash = hash((self.op.__name__, *hashes))
                case _:
                    assert False, type(self)
        return self._hash

    @abstractmethod
    def __init__(self, *args: object) -> None:
        """This abstract base class is not supposed to have instances itself.
        Technically this is enforced via this abstract initializer.
        """
        self._hash = None

    def __invert__(self) -> Not[λ]:
        """Override the :obj:`~ <object.__invert__>` operator to apply
        :class:`Not`.

        >>> from simple_predicates.literals.sets import Member
        >>> ~ Var(Member(1))
        Not(Var(Member(1)))
        """
        return Not(self)

    def __or__(self, other: Expression[λ]) -> Or[λ]:
        """Override the :obj:`| <object.__or__>` operator to apply :class:`Or`.

        >>> from simple_predicates.literals.sets import Member
        >>> Var(Member(1)) | ~ Var(Member(2))
        Or(Var(Member(1)), Not(Var(Member(2))))
        """
        return Or(self, other)

    def __repr__(self) -> str:
        """A representation of the :class:`Expression` `self` that is suitable
        for use as an input.
        """
        return f'{self.op.__name__}({", ".join(repr(arg) for arg in self.args)})'

    def __str__(self) -> str:
        """Representation of the expression used in printing.

        >>> from simple_predicates.literals.sets import Flag
        >>> x, y, z = Var(Flag('x')), Var(Flag('y')), Var(Flag('z'))
        >>> print(And(Or(x, Not(y)), Not(And(y, z))))
        (x or not y) and not (y and z)
        """
        SYMBOL: Final = {And: 'and', Or: 'or', Not: 'not'}
        SPACING: Final = ' '
        match self:
            case Var():
                return str(self.arg)
            case And() | Or():
                L = []
                for arg in self.args:
                    arg_as_str = str(arg)
                    if arg.op in (And, Or):
                        arg_as_str = f'({arg_as_str})'
                    L.append(arg_as_str)
                return f'{SPACING}{SYMBOL[self.op]}{SPACING}'.join(L)
            case Not():
                arg_as_str = str(self.arg)
                if self.arg.op in (And, Or):
                    arg_as_str = f'({arg_as_str})'
                return f'{SYMBOL[Not]}{SPACING}{arg_as_str}'
            case _:
                assert False, type(self)

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        op = self.__class__.__name__
        with p.group(len(op) + 1, op + '(', ')'):
            for idx, arg in enumerate(self.args):
                if idx:
                    p.text(',')
                    p.breakable()
                p.pretty(arg)

    def atoms(self) -> Iterator[λ]:
        """An iterator over all literals occurring in `self`, from left to
        right. Each literal is reported once for each occurrence.

        >>> from simple_predicates.literals.sets import Member
        >>> f = Or(And(Var(Member(1)), Var(Member(2))), Not(Var(Member(1))))
        >>> list(f.atoms())
        [Member(1), Member(2), Member(1)]
        """
        match self:
            case Var():
                yield self.arg
            case Not() | And() | Or():
                for arg in self.args:
                    yield from arg.atoms()
            case _:
                assert False, type(self)

    def depth(self) -> int:
        """The maximal length of a path from the root to a leaf of the
        expression tree. Leaves :class:`Var` have depth 0.

        >>> from simple_predicates.literals.sets import Member
        >>> Or(And(Var(Member(1)), Var(Member(2))), Not(Var(Member(1)))).depth()
        2
        """
        match self:
            case Var():
                return 0
            case Not() | And() | Or():
                return max(arg.depth() for arg in self.args) + 1
            case _:
                assert False, type(self)

    def distribute_and(self) -> Expression[λ]:
        """Distribute :class:`And` over :class:`Or` at the root of `self`.

        If `self` is ``And(a, b)`` and one of its arguments is ``Or(q, r)``,
        the result is ``Or(And(p, q), And(p, r))``, where `p` is the other
        argument. When both arguments are disjunctions, the left one is split.
        In all other cases `self` is returned unchanged. Subexpressions are not
        visited.

        >>> from simple_predicates.literals.sets import Member
        >>> p, q, r = Var(Member(1)), Var(Member(2)), Var(Member(3))
        >>> And(p, Or(q, r)).distribute_and()
        Or(And(Var(Member(1)), Var(Member(2))), And(Var(Member(1)), Var(Member(3))))
        >>> And(p, q).distribute_and()
        And(Var(Member(1)), Var(Member(2)))
        """
        match self:
            case And(args=(Or(args=(q, r)), p)) | And(args=(p, Or(args=(q, r)))):
                return Or(And(p, q), And(p, r))
            case _:
                return self

    def distribute_or(self) -> Expression[λ]:
        """Distribute :class:`Or` over :class:`And` at the root of `self`.
        This is dual to :meth:`distribute_and`.

        >>> from simple_predicates.literals.sets import Member
        >>> p, q, r = Var(Member(1)), Var(Member(2)), Var(Member(3))
        >>> Or(And(q, r), p).distribute_or()
        And(Or(Var(Member(1)), Var(Member(2))), Or(Var(Member(1)), Var(Member(3))))
        """
        match self:
            case Or(args=(And(args=(q, r)), p)) | Or(args=(p, And(args=(q, r)))):
                return And(Or(p, q), Or(p, r))
            case _:
                return self

    def eq_repr(self, other: Expression[λ]) -> bool:
        """Representational equality. Returns :obj:`True` if `self` and
        `other` apply the same operators in the same order to equal literals.
        In contrast to :meth:`__eq__`, the arguments of :class:`And` and
        :class:`Or` are compared in order.

        >>> from simple_predicates.literals.sets import Member
        >>> a, b = Var(Member(1)), Var(Member(2))
        >>> And(a, b).eq_repr(And(a, b))
        True
        >>> And(a, b).eq_repr(And(b, a))
        False
        """
        if self.op is not other.op:
            return False
        match self:
            case Var():
                return bool(self.arg == other.arg)
            case Not() | And() | Or():
                return all(arg.eq_repr(other_arg)
                           for arg, other_arg in zip(self.args, other.args))
            case _:
                assert False, type(self)

    def evaluate(self, context: Any) -> bool:
        """The truth value of `self` with respect to `context`, which is
        passed on to :meth:`.Literal.evaluate`. :class:`And` and :class:`Or`
        evaluate their arguments lazily.

        >>> from simple_predicates.literals.sets import Member
        >>> context = {1, 2, 4, 5, 7, 9, 10}
        >>> And(Var(Member(4)), Var(Member(5))).evaluate(context)
        True
        >>> And(Var(Member(3)), Var(Member(4))).evaluate(context)
        False
        """
        match self:
            case Var():
                return self.arg.evaluate(context)
            case Not():
                return not self.arg.evaluate(context)
            case Or():
                return self.lhs.evaluate(context) or self.rhs.evaluate(context)
            case And():
                return self.lhs.evaluate(context) and self.rhs.evaluate(context)
            case _:
                assert False, type(self)

    @staticmethod
    def is_and(f: Expression[λ]) -> TypeIs[And[λ]]:
        """Type narrowing :func:`isinstance` test for :class:`And`.
        """
        return isinstance(f, And)

    @staticmethod
    def is_not(f: Expression[λ]) -> TypeIs[Not[λ]]:
        """Type narrowing :func:`isinstance` test for :class:`Not`.
        """
        return isinstance(f, Not)

    @staticmethod
    def is_or(f: Expression[λ]) -> TypeIs[Or[λ]]:
        """Type narrowing :func:`isinstance` test for :class:`Or`.
        """
        return isinstance(f, Or)

    @staticmethod
    def is_var(f: Expression[λ]) -> TypeIs[Var[λ]]:
        """Type narrowing :func:`isinstance` test for :class:`Var`.
        """
        return isinstance(f, Var)

    def pushdown_not(self) -> Expression[λ]:
        """Push a :class:`Not` at the root of `self` one level down using De
        Morgan's laws, or remove it together with another :class:`Not`
        directly below it. A negated :class:`Var` and expressions that are
        not negations are returned unchanged.

        Only the root is rewritten. The negations that are moved below
        :class:`And` or :class:`Or` are not pushed any further.

        >>> from simple_predicates.literals.sets import Member
        >>> a, b = Var(Member(1)), Var(Member(2))
        >>> Not(Or(a, Not(b))).pushdown_not()
        And(Not(Var(Member(1))), Not(Not(Var(Member(2)))))
        >>> Not(Not(Not(a))).pushdown_not()
        Not(Var(Member(1)))
        """
        match self:
            case Not(arg=Var()):
                return self
            case Not(arg=Not(arg=arg)):
                return arg.pushdown_not()
            case Not(arg=Or(args=(lhs, rhs))):
                return And(Not(lhs), Not(rhs))
            case Not(arg=And(args=(lhs, rhs))):
                return Or(Not(lhs), Not(rhs))
            case _:
                return self

    def simplify(self) -> Expression[λ]:
        """A single bottom-up pass of basic simplification. The result is
        equivalent to `self`. The following simplifications are applied:

        1. Transform ``Not(Not(arg))`` into ``arg``. Any other ``Not(arg)``
           becomes ``involutive_not(arg.simplify())`` instead of
           ``Not(arg.simplify())``. This intentionally also removes double
           negations that arise from the simplification of the argument, such
           as in ``Not(And(Not(arg), Not(arg)))``, so that :meth:`simplify`
           is idempotent.

        2. Transform ``And(arg, arg)`` and ``Or(arg, arg)`` into ``arg``,
           where the arguments are compared after their simplification, up to
           :meth:`__eq__`.

        This is not a full logical simplification. In particular, there is no
        absorption and no detection of tautologies or contradictions.

        >>> from simple_predicates.literals.sets import Member
        >>> a, b = Var(Member(1)), Var(Member(2))
        >>> And(Not(Not(Or(a, b))), Or(b, a)).simplify()
        Or(Var(Member(1)), Var(Member(2)))
        >>> Or(a, Not(a)).simplify()
        Or(Var(Member(1)), Not(Var(Member(1))))
        >>> Not(And(Not(a), Not(a))).simplify()
        Var(Member(1))
        """
        match self:
            case Var():
                return self
            case Not(arg=Not(arg=arg)):
                return arg.simplify()
            case Not(arg=arg):
                return involutive_not(arg.simplify())
            case And(args=(lhs, rhs)) | Or(args=(lhs, rhs)):
                lhs_simplify = lhs.simplify()
                rhs_simplify = rhs.simplify()
                if lhs_simplify == rhs_simplify:
                    return lhs_simplify
                return self.op(lhs_simplify, rhs_simplify)
            case _:
                assert False, type(self)

    def to_cnf(self) -> CnfSet[λ]:
        """Convert to a deduplicating Conjunctive Normal Form.

        .. seealso:: :class:`.CnfSet`, :class:`.CnfList`
        """
        from ..normalform.forms import CnfSet
        return CnfSet(self)

    def to_dnf(self) -> DnfSet[λ]:
        """Convert to a deduplicating Disjunctive Normal Form.

        .. seealso:: :class:`.DnfSet`, :class:`.DnfList`
        """
        from ..normalform.forms import DnfSet
        return DnfSet(self)


# The following imports are intentionally late to avoid circularity.
from .literal import Literal  # noqa
from .boolean import And, involutive_not, Not, Or, Var  # noqa
