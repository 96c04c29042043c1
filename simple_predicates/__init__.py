__version__ = '0.4.3'

from . import expression

from .expression import And, Expression, Literal, Not, Or, Var  # noqa

from . import normalform

from .normalform import (Cnf, CnfList, CnfSet, ConjunctiveNormalForm, Dnf,  # noqa
                         DnfList, DnfSet, DisjunctiveNormalForm, NormalForm)

from . import literals  # noqa

from . import serialization  # noqa

__all__ = expression.__all__ + normalform.__all__
