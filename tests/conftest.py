"""Shared fixtures and expression generators for the test suites."""

import itertools
import random

import pytest

from simple_predicates import And, Not, Or, Var
from simple_predicates.literals import Flag, Member

NAMES = ('x', 'y', 'z')


def v(value):
    return Var(Member(value))


def flags():
    return [Var(Flag(name)) for name in NAMES]


def assignments(names=NAMES):
    for values in itertools.product((False, True), repeat=len(names)):
        yield dict(zip(names, values))


def small_expressions():
    """All expressions over the flags x, y, z with at most two levels of
    operators below the root."""
    level0 = flags()
    level1 = level0 + [Not(f) for f in level0]
    level1 += [op(f, g) for op in (And, Or) for f in level0 for g in level0]
    level2 = [Not(f) for f in level1]
    level2 += [op(f, g) for op in (And, Or) for f in level1 for g in level1[:9]]
    return level1 + level2


def random_expression(rng, depth):
    if depth == 0 or rng.random() < 0.15:
        return Var(Flag(rng.choice(NAMES)))
    match rng.randrange(3):
        case 0:
            return Not(random_expression(rng, depth - 1))
        case 1:
            return And(random_expression(rng, depth - 1), random_expression(rng, depth - 1))
        case _:
            return Or(random_expression(rng, depth - 1), random_expression(rng, depth - 1))


def random_expressions(count=150, depth=4, seed=20230517):
    rng = random.Random(seed)
    return [random_expression(rng, depth) for _ in range(count)]


@pytest.fixture
def items():
    return [1, 2, 4, 5, 7, 9, 10]


@pytest.fixture
def three_level():
    return And(Or(And(v(1), v(2)), And(v(3), v(4))),
               And(Or(v(5), v(6)), Or(v(7), v(8))))
