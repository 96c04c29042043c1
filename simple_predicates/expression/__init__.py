r"""Implementation of boolean expressions over arbitrary literals.

An abstract base class :class:`Expression` implements representations of and
methods on expression trees recursively built using the boolean operators
negation :math:`\lnot`, conjunction :math:`\land`, and disjunction
:math:`\lor`. The leaves of the trees hold literals, which are instances of
subclasses of another abstract class :class:`Literal`. The expression tree
does not know the meaning of its literals, it only asks them for their truth
value with respect to some context data.

Operators are mapped to classes as follows:

+---------------+---------------+--------------+--------------+
| literal       | :math:`\lnot` | :math:`\land`| :math:`\lor` |
+---------------+---------------+--------------+--------------+
| :class:`Var`  | :class:`Not`  | :class:`And` | :class:`Or`  |
+---------------+---------------+--------------+--------------+

:class:`And` and :class:`Or` have exactly two arguments. Structural equality
considers these two arguments an unordered pair, but nested operators are
neither flattened nor reordered:

>>> from simple_predicates.literals.sets import Member
>>> a, b, c = Var(Member(1)), Var(Member(2)), Var(Member(3))
>>> And(a, b) == And(b, a)
True
>>> And(And(a, b), c) == And(a, And(b, c))
False

Evaluation uses the semantics of the literals. The theory of
:class:`.sets.Member` interprets a literal as membership in a collection:

>>> f = And(a, Not(c))
>>> f.evaluate({1, 2})
True
>>> f.evaluate({1, 3})
False
"""

from .expression import Expression  # noqa

from .literal import Literal  # noqa

from .boolean import And, Not, Or, Var  # noqa


__all__ = [
    'Expression', 'Literal',

    'And', 'Not', 'Or', 'Var'
]
