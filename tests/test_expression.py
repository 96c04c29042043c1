"""Tests for the expression tree: evaluation, equality and the rewrite steps
used by normal form extraction."""

import pytest

from simple_predicates import And, Expression, Literal, Not, Or, Var
from simple_predicates.literals import Flag, Member

from conftest import assignments, random_expressions, small_expressions, v


class TestEvaluation:

    def test_literal(self, items):
        assert v(4).evaluate(items)
        assert not v(3).evaluate(items)

    def test_not(self, items):
        assert not Not(v(4)).evaluate(items)
        assert Not(v(3)).evaluate(items)

    def test_or(self, items):
        assert Or(v(4), v(5)).evaluate(items)
        assert Or(v(3), v(4)).evaluate(items)
        assert not Or(v(3), v(6)).evaluate(items)

    def test_and(self, items):
        assert And(v(4), v(5)).evaluate(items)
        assert not And(v(3), v(4)).evaluate(items)
        assert not And(v(3), v(6)).evaluate(items)

    def test_short_circuit(self):
        # Flag raises KeyError for names missing in the context.
        x, missing = Var(Flag('x')), Var(Flag('missing'))
        assert Or(x, missing).evaluate({'x': True})
        assert not And(x, missing).evaluate({'x': False})
        with pytest.raises(KeyError):
            And(x, missing).evaluate({'x': True})

    @pytest.mark.parametrize('f', small_expressions())
    def test_double_negation(self, f):
        for context in assignments():
            assert Not(Not(f)).evaluate(context) == f.evaluate(context)


class TestEquality:

    def test_commutative(self):
        a, b = v(1), v(2)
        assert Or(a, b) == Or(b, a)
        assert And(a, b) == And(b, a)
        assert Or(a, b) != And(a, b)

    def test_commutative_nested(self):
        a, b, c = v(1), v(2), v(3)
        assert And(Or(a, b), Not(c)) == And(Not(c), Or(b, a))

    def test_not_associative(self):
        a, b, c = v(1), v(2), v(3)
        assert Or(Or(a, b), c) != Or(a, Or(b, c))
        assert And(And(a, b), c) != And(a, And(b, c))

    def test_operator_and_literal_mismatch(self):
        assert v(1) != v(2)
        assert Not(v(1)) != v(1)
        assert v(1) != Member(1)

    def test_hash_consistent(self):
        a, b, c = v(1), v(2), v(3)
        assert hash(Or(And(a, b), c)) == hash(Or(c, And(b, a)))
        assert len({Or(a, b), Or(b, a), And(a, b)}) == 2

    def test_eq_repr(self):
        a, b = v(1), v(2)
        assert Or(a, Not(b)).eq_repr(Or(a, Not(b)))
        assert not Or(a, b).eq_repr(Or(b, a))
        assert not Or(a, b).eq_repr(And(a, b))
        assert not Not(a).eq_repr(Not(b))


class TestConstruction:

    def test_operators(self):
        a, b = v(1), v(2)
        assert (a & b).eq_repr(And(a, b))
        assert (a | ~b).eq_repr(Or(a, Not(b)))

    def test_rejects_non_literals(self):
        with pytest.raises(ValueError):
            Var(1)

    def test_rejects_non_expressions(self):
        with pytest.raises(ValueError):
            Not(Member(1))
        with pytest.raises(ValueError):
            And(v(1), 2)

    def test_args_are_read_only(self):
        a, b = v(1), v(2)
        f = Or(a, b)
        clauses = {f}
        with pytest.raises(AttributeError):
            f.args = (a, a)
        assert f.args == (a, b)
        assert Or(b, a) in clauses

    def test_registered_literal(self):
        class Constant:
            def __init__(self, value):
                self.value = value

            def evaluate(self, context):
                return self.value

        Literal.register(Constant)
        assert Or(Var(Constant(False)), Var(Constant(True))).evaluate(None)

    def test_accessors(self):
        a, b = v(1), v(2)
        f = And(a, Not(b))
        assert f.op is And
        assert f.lhs is a
        assert f.rhs.arg is b
        assert a.arg == Member(1)
        assert Expression.is_and(f) and not Expression.is_or(f)
        assert Expression.is_not(f.rhs) and Expression.is_var(a)

    def test_atoms_and_depth(self):
        f = Or(And(v(1), Not(v(2))), v(1))
        assert list(f.atoms()) == [Member(1), Member(2), Member(1)]
        assert f.depth() == 3

    def test_str(self):
        f = Not(Or(And(v(1), v(2)), Not(v(3))))
        assert str(f) == 'not ((1 and 2) or not 3)'


class TestSimplify:

    def test_double_negation(self):
        a = v(1)
        assert Not(Not(a)).simplify().eq_repr(a)
        assert Not(Not(Not(a))).simplify().eq_repr(Not(a))

    def test_idempotent_operators(self):
        a, b = v(1), v(2)
        assert And(Or(a, b), Or(b, a)).simplify() == Or(a, b)
        assert Or(Not(Not(a)), a).simplify().eq_repr(a)

    def test_negation_of_collapsed_argument(self):
        a = v(1)
        assert Not(And(Not(a), Not(a))).simplify().eq_repr(a)

    def test_no_absorption(self):
        a, b = v(1), v(2)
        f = Or(a, And(a, b))
        assert f.simplify().eq_repr(f)
        assert Or(a, Not(a)).simplify().eq_repr(Or(a, Not(a)))

    @pytest.mark.parametrize('f', small_expressions() + random_expressions(50))
    def test_idempotent(self, f):
        g = f.simplify()
        assert g.simplify() == g
        for context in assignments():
            assert g.evaluate(context) == f.evaluate(context)


class TestPushdownNot:

    def test_literal(self):
        f = Not(v(1))
        assert f.pushdown_not() is f

    def test_not_a_negation(self):
        f = And(Not(v(1)), v(2))
        assert f.pushdown_not() is f

    def test_double_negation(self):
        a, b = v(1), v(2)
        assert Not(Not(And(a, b))).pushdown_not().eq_repr(And(a, b))
        assert Not(Not(Not(Or(a, b)))).pushdown_not().eq_repr(And(Not(a), Not(b)))

    def test_de_morgan(self):
        a, b = v(1), v(2)
        assert Not(Or(a, b)).pushdown_not().eq_repr(And(Not(a), Not(b)))
        assert Not(And(a, b)).pushdown_not().eq_repr(Or(Not(a), Not(b)))

    def test_root_only(self):
        a, b, c = v(1), v(2), v(3)
        f = Not(Or(Not(And(a, b)), c)).pushdown_not()
        assert f.eq_repr(And(Not(Not(And(a, b))), Not(c)))


class TestDistribution:

    def test_distribute_and_right(self):
        p, q, r = v(1), v(2), v(3)
        f = And(p, Or(q, r)).distribute_and()
        assert f.eq_repr(Or(And(p, q), And(p, r)))

    def test_distribute_and_left(self):
        p, q, r = v(1), v(2), v(3)
        f = And(Or(q, r), p).distribute_and()
        assert f.eq_repr(Or(And(p, q), And(p, r)))

    def test_distribute_and_both_split_left(self):
        a, b, c, d = v(1), v(2), v(3), v(4)
        f = And(Or(a, b), Or(c, d)).distribute_and()
        assert f.eq_repr(Or(And(Or(c, d), a), And(Or(c, d), b)))

    def test_distribute_or_both_split_left(self):
        a, b, c, d = v(1), v(2), v(3), v(4)
        f = Or(And(a, b), And(c, d)).distribute_or()
        assert f.eq_repr(And(Or(And(c, d), a), Or(And(c, d), b)))

    def test_unchanged(self):
        a, b = v(1), v(2)
        for f in (And(a, b), Or(a, b), Not(Or(a, b)), a):
            assert f.distribute_and() is f
            assert f.distribute_or() is f
        g = Or(And(a, b), b)
        assert g.distribute_and() is g

    @pytest.mark.parametrize('f', small_expressions())
    def test_equivalence(self, f):
        for context in assignments():
            value = f.evaluate(context)
            assert f.pushdown_not().evaluate(context) == value
            assert f.distribute_and().evaluate(context) == value
            assert f.distribute_or().evaluate(context) == value
