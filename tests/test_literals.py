import pytest
import sympy

from simple_predicates import And, Cnf, Dnf, Expression, Literal, Not, Or, Var
from simple_predicates.literals import Flag, Member, Relation


class TestMember:

    def test_evaluate(self, items):
        f = Or(Var(Member(4)), And(Var(Member(3)), Var(Member(9))))
        assert f.evaluate(items)
        assert not f.evaluate([3, 5])
        assert f.evaluate({3, 9})

    def test_normal_forms(self, items):
        f = And(Not(Var(Member(2))), Or(Var(Member(1)), Var(Member(3))))
        for context in (items, [1], [2, 3], []):
            assert Cnf(f).evaluate(context) == f.evaluate(context)
            assert Dnf(f).evaluate(context) == f.evaluate(context)

    def test_equality_and_hash(self):
        assert Member(1) == Member(1)
        assert Member(1) != Member(2)
        assert hash(Var(Member('a'))) == hash(Var(Member('a')))

    def test_from_data(self):
        assert Member.from_data(None) == Member(None)
        with pytest.raises(ValueError):
            Member.from_data({'a': 1})

    def test_is_literal(self):
        assert isinstance(Member(1), Literal)


class TestFlag:

    def test_evaluate(self):
        x, y = Var(Flag('x')), Var(Flag('y'))
        f = And(x, Not(y))
        assert f.evaluate({'x': 1, 'y': 0})
        assert not f.evaluate({'x': True, 'y': True})

    def test_missing(self):
        with pytest.raises(KeyError):
            Var(Flag('x')).evaluate({})

    def test_name_must_be_string(self):
        with pytest.raises(ValueError):
            Flag(1)

    def test_str(self):
        assert str(Or(Var(Flag('x')), Not(Var(Flag('y'))))) == 'x or not y'


class TestRelation:

    def test_evaluate(self):
        x, y = sympy.symbols('x y')
        f = And(Var(Relation(x > 0)), Not(Var(Relation(sympy.Eq(y, x + 1)))))
        assert f.evaluate({x: 1, y: 3})
        assert not f.evaluate({x: 1, y: 2})
        assert not f.evaluate({x: -1, y: 3})

    def test_normal_forms(self):
        x = sympy.Symbol('x')
        f = Or(Var(Relation(x > 1)), And(Var(Relation(x < -1)), Var(Relation(x < 0))))
        for value in range(-3, 4):
            context = {x: value}
            assert Cnf(f).evaluate(context) == f.evaluate(context)

    def test_not_definite(self):
        x, y = sympy.symbols('x y')
        with pytest.raises(ValueError, match='not definite'):
            Var(Relation(x < y)).evaluate({x: 0})

    def test_not_boolean(self):
        x = sympy.Symbol('x')
        with pytest.raises(ValueError):
            Relation(x + 1)

    def test_var_requires_literal(self):
        x = sympy.Symbol('x')
        with pytest.raises(ValueError):
            Var(x > 0)
        assert isinstance(Var(Relation(x > 0)), Expression)
