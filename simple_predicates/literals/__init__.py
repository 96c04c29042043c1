"""Ready-made literal types. Each module fixes the meaning of its literals and
the type of the context data they are evaluated against.
"""

from . import sets  # noqa
from . import sympy  # noqa

from .sets import Flag, Member  # noqa
from .sympy import Relation  # noqa

__all__ = ['Flag', 'Member', 'Relation']
