import pytest
from safefunc.predicates import (
    Predicate,
    FunctionPredicate,
    AllOf,
    AnyOf,
    Not,
    Xand,
    Xor,
    Implies,
    AlwaysTrue,
    AlwaysFalse,
)


def equals_a(s):
    return s == "A"


def length_one(s):
    return len(s) == 1


class StartsWith(Predicate):
    def __init__(self, prefix):
        self.prefix = prefix

    def check(self, value):
        if value.startswith(self.prefix):
            return True, f"Starts with {self.prefix}"
        return False, f"Doesn't start with {self.prefix}"


def test_function_predicate_check_and_reason():
    p = FunctionPredicate(equals_a)
    assert p.check("A") == (True, "equals_a passed")
    assert p.check("B") == (False, "equals_a failed")
    assert p.test("A")
    assert p("A")


def test_function_predicate_coerces_truthy_values():
    p = FunctionPredicate(lambda s: s.count("D"))
    assert p.test("DD")
    assert not p.test("A")


def test_custom_predicate_works_with_filter(items):
    assert list(filter(StartsWith("D"), items)) == ["DD"]


def test_all_of_flattens_nested():
    a, b, c = AlwaysTrue(), AlwaysTrue(), AlwaysFalse()
    combined = AllOf(AllOf(a, b), c)
    assert combined.predicates == [a, b, c]


def test_any_of_flattens_nested():
    a, b, c = AlwaysFalse(), AlwaysFalse(), AlwaysTrue()
    combined = AnyOf(AnyOf(a, b), c)
    assert combined.predicates == [a, b, c]


def test_all_of_reports_first_failure():
    combined = AllOf(FunctionPredicate(length_one), FunctionPredicate(equals_a))
    assert combined.check("B") == (False, "equals_a failed")
    assert combined.check("A") == (True, "All conditions met")


def test_any_of_joins_reasons_on_failure():
    combined = AnyOf(FunctionPredicate(equals_a), StartsWith("C"))
    assert combined.check("B") == (False, "equals_a failed; Doesn't start with C")
    assert combined.check("C") == (True, "Starts with C")


def test_all_of_short_circuits():
    calls = []

    def tracked(s):
        calls.append(s)
        return True

    AllOf(AlwaysFalse(), FunctionPredicate(tracked)).test("A")
    assert calls == []


def test_not():
    p = Not(FunctionPredicate(equals_a))
    assert p.check("A") == (False, "Not: equals_a passed")
    assert p.test("B")


def test_operators(items):
    a = FunctionPredicate(equals_a)
    one = FunctionPredicate(length_one)
    assert list(filter(a & one, items)) == ["A"]
    assert list(filter(a | StartsWith("D"), items)) == ["A", "DD"]
    assert list(filter(~a, items)) == ["B", "C", "DD"]
    assert list(filter(a ^ one, items)) == ["B", "C"]


def test_operators_lift_plain_functions(items):
    a = FunctionPredicate(equals_a)
    assert list(filter(a | (lambda s: s == "B"), items)) == ["A", "B"]


def test_chainable_methods(items):
    a = FunctionPredicate(equals_a)
    assert isinstance(a.negate(), Not)
    assert isinstance(a.and_(length_one), AllOf)
    assert isinstance(a.or_(length_one), AnyOf)
    assert list(filter(a.negate().and_(length_one), items)) == ["B", "C"]


def test_xand_xor_implies_truth_tables():
    t, f = AlwaysTrue(), AlwaysFalse()
    assert [Xand(x, y).test(None) for x, y in [(t, t), (t, f), (f, t), (f, f)]] == [True, False, False, True]
    assert [Xor(x, y).test(None) for x, y in [(t, t), (t, f), (f, t), (f, f)]] == [False, True, True, False]
    assert [Implies(x, y).test(None) for x, y in [(t, t), (t, f), (f, t), (f, f)]] == [True, False, True, True]


def test_xor_evaluates_each_operand_once():
    calls = []

    def tracked(s):
        calls.append(s)
        return True

    Xor(FunctionPredicate(tracked), AlwaysFalse()).test("A")
    assert calls == ["A"]


def test_always_false_custom_reason():
    assert AlwaysFalse("nope").check(1) == (False, "nope")
    assert AlwaysTrue().check(1) == (True, "Always passes")


def test_errors_from_predicates_propagate():
    p = FunctionPredicate(lambda s: s.missing())
    with pytest.raises(AttributeError):
        Not(p).test("A")


def test_reflected_operators_lift_plain_functions(items):
    a = FunctionPredicate(equals_a)
    combined = length_one & a
    assert isinstance(combined, AllOf)
    assert combined.predicates[0].func is length_one
    assert combined.predicates[1] is a
    assert list(filter(combined, items)) == ["A"]
    assert list(filter((lambda s: s == "B") | a, items)) == ["A", "B"]
    assert list(filter(length_one ^ a, items)) == ["B", "C"]


class Unnamed:
    def __call__(self, value):
        return value == "A"

    def __repr__(self):
        raise RuntimeError("no repr")


def test_function_predicate_without_name_or_repr():
    p = FunctionPredicate(Unnamed())
    assert p.name == "Unnamed"
    assert p.check("A") == (True, "Unnamed passed")
