"""An abstract class specifies the literals at the leaves of expressions. The
expression tree does not know what a literal means. It only requires that a
literal can be compared for equality and evaluated against some context data.
Literal types are supplied by users or taken from :mod:`simple_predicates.literals`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Self, TypeVar


γ = TypeVar('γ')
"""A type variable denoting the type of context data against which literals
are evaluated. Each literal type fixes one context type.
"""


class Literal(ABC, Generic[γ]):
    """This abstract class specifies the capabilities of a literal, which are
    used as black boxes within :class:`.Expression` methods:

    1. Evaluation via :meth:`evaluate`.

    2. Equality via :obj:`__eq__ <object.__eq__>`, which must be overloaded
       by subclasses. Literals are immutable, so sharing one literal between
       several expressions is as good as copying it.

    3. Optionally, hashing via :obj:`__hash__ <object.__hash__>` consistent
       with equality. Hashing is required for deduplicating clause
       collections such as :class:`.CnfSet`.

    4. Optionally, :meth:`to_data` and :meth:`from_data` for
       :mod:`simple_predicates.serialization`.

    Classes not derived from :class:`Literal` can be registered as virtual
    subclasses:

    >>> class Always:
    ...     def evaluate(self, context):
    ...         return True
    >>> _ = Literal.register(Always)
    >>> isinstance(Always(), Literal)
    True

    .. seealso::
      Derived classes: :class:`.sets.Member`, :class:`.sets.Flag`,
      :class:`.sympy.Relation`
    """

    @abstractmethod
    def evaluate(self, context: γ) -> bool:
        """The truth value of this literal with respect to `context`. The
        result must be deterministic for a fixed context and evaluation must
        not have side effects.
        """
        ...

    def to_data(self) -> Any:
        """A JSON-compatible representation of this literal. This method is
        required by :func:`.serialization.to_data`.
        """
        raise NotImplementedError()

    @classmethod
    def from_data(cls, data: Any) -> Self:
        """Reconstruct a literal from the output of :meth:`to_data`. This
        method is required by :func:`.serialization.expression_from_data`. It
        raises :exc:`ValueError` when `data` does not describe a literal of
        this class.
        """
        raise NotImplementedError()
