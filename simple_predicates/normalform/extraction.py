"""This module :mod:`simple_predicates.normalform.extraction` implements the
extraction of clauses from an expression. A single algorithm serves both
normal forms. For disjunctive normal forms the splitting operator is
:class:`.Or` and conjunctions are distributed over disjunctions; for
conjunctive normal forms the roles of the operators are swapped.

The extraction is a rewrite system on a stack of expressions, not a single
recursive descent. One application of :meth:`.Expression.pushdown_not`
followed by a distribution flattens only the root of an expression. The
arguments of a splitting operator are therefore pushed back onto the stack
and processed again, until no splitting operator remains at the root.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import Any, Generic, Optional, TypeVar

from ..expression import And, Expression, Or
from ..expression.expression import λ
from ..support.logging import DeltaTimeFormatter, Timer
from .sinks import ClauseSink

# Create logger
delta_time_formatter = DeltaTimeFormatter(
    f'%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(delta_time_formatter)

logger = logging.getLogger(__name__)
logger.propagate = False
logger.addHandler(stream_handler)
logger.setLevel(logging.WARNING)

ς = TypeVar('ς', bound=ClauseSink)


class Options:
    """This class holds options that can be provided as keyword arguments to
    :meth:`.NormalFormExtraction.__call__`.

    >>> Options(log_level=logging.INFO)
    Options(log_level=20, log_rate=0.5)
    >>> Options(verbose=True)
    Traceback (most recent call last):
    ...
    TypeError: Options.__init__() got an unexpected keyword argument 'verbose'
    """

    log_level: int
    """The `log_level` of the logger used by :class:`.NormalFormExtraction`.
    The default :data:`logging.NOTSET` leaves the level of the logger as it is.
    """

    log_rate: float
    """The minimal timespan (in s) between two logs of periodic statistics on
    the work stack.
    """

    def __init__(self, log_level: int = logging.NOTSET, log_rate: float = 0.5) -> None:
        if log_rate < 0:
            raise ValueError(f'negative log_rate {log_rate}')
        self.log_level = log_level
        self.log_rate = log_rate

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(log_level={self.log_level}, log_rate={self.log_rate})'


@dataclass
class NormalFormExtraction(Generic[λ]):
    """A callable class that extracts the clauses of a normal form from an
    expression. Instances with `dualize=False` compute disjunctive normal
    forms, instances with `dualize=True` compute conjunctive normal forms.

    >>> from simple_predicates.expression import Var
    >>> from simple_predicates.literals.sets import Member
    >>> from simple_predicates.normalform.sinks import ClauseList
    >>> a, b, c = Var(Member(1)), Var(Member(2)), Var(Member(3))
    >>> sink = cnf_extraction(Or(a, And(b, c)), ClauseList())
    >>> list(sink)
    [Or(Var(Member(1)), Var(Member(3))), Or(Var(Member(1)), Var(Member(2)))]
    >>> cnf_extraction.num_steps, cnf_extraction.num_clauses
    (3, 2)
    """

    dualize: bool = False
    """If :obj:`True` compute a conjunctive normal form instead of a
    disjunctive one.
    """

    options: Optional[Options] = field(default=None, compare=False)
    """The options that have been passed to :meth:`.__call__`.
    """

    num_steps: int = field(default=0, compare=False)
    """The number of expressions popped from the work stack during the last
    call.
    """

    num_clauses: int = field(default=0, compare=False)
    """The number of clauses inserted into the sink during the last call.
    Deduplicating sinks may hold fewer clauses.
    """

    time_total: float = field(default=0.0, compare=False)
    """The wall time in seconds of the last call.
    """

    @property
    def splitting_op(self) -> type[And[λ]] | type[Or[λ]]:
        """The operator whose arguments are processed separately: :class:`.And`
        for conjunctive normal forms, :class:`.Or` for disjunctive ones.
        """
        return Or.dual() if self.dualize else Or

    def __call__(self, f: Expression[λ], sink: ς, **options: Any) -> ς:
        """Insert the clauses of a normal form of `f` into `sink` and return
        `sink`.

        :param f:
          The input expression.

        :param sink:
          A clause sink, typically empty. Existing clauses are kept.

        :param `**options`:
          Keyword arguments with keywords corresponding to attributes of
          :class:`.Options`.
        """
        timer = Timer()
        delta_time_formatter.timer = timer
        self.options = Options(**options)
        self.num_steps = 0
        self.num_clauses = 0
        save_level = logger.getEffectiveLevel()
        try:
            if self.options.log_level != logging.NOTSET:
                logger.setLevel(self.options.log_level)
            logger.info(f'{self.options}')
            self.extract(f, sink)
            logger.info(f'finished after {self.num_steps} steps with '
                        f'{self.num_clauses} clauses')
        finally:
            logger.setLevel(save_level)
        self.time_total = timer.get()
        return sink

    def extract(self, f: Expression[λ], sink: ClauseSink[λ]) -> None:
        assert self.options is not None
        splitting_op = self.splitting_op
        stack: list[Expression[λ]] = [f.simplify()]
        if logger.isEnabledFor(logging.INFO):
            last_log = time.time()
        while stack:
            if logger.isEnabledFor(logging.INFO):
                t = time.time()
                if t - last_log >= self.options.log_rate:
                    logger.info(f'stack={len(stack)}, steps={self.num_steps}, '
                                f'clauses={self.num_clauses}')
                    last_log = t
            g = self.rewrite(stack.pop())
            self.num_steps += 1
            if g.op is splitting_op:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(f'split {g}')
                stack.append(g.args[0])
                stack.append(g.args[1])
            else:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(f'clause {g}')
                sink.insert(g)
                self.num_clauses += 1

    def rewrite(self, f: Expression[λ]) -> Expression[λ]:
        """One rewrite step at the root of `f`: :meth:`.Expression.pushdown_not`
        followed by the distribution of the dual of the splitting operator.
        """
        if self.dualize:
            return f.pushdown_not().distribute_or()
        return f.pushdown_not().distribute_and()


dnf_extraction: NormalFormExtraction = NormalFormExtraction()
cnf_extraction: NormalFormExtraction = NormalFormExtraction(dualize=True)
