import math

import pytest
from hypothesis import assume, given, strategies as st

from minilisp.errors import MiniLispArityError, MiniLispTypeError, MiniLispTypeMismatch
from minilisp.interpreter import eval_source
from minilisp.types.environment import Environment
from minilisp.types.equality import same_value
from minilisp.types.integer import I64_MAX, I64_MIN, wrap_i64
from minilisp.types.lambda_fn import Lambda
from minilisp.types.symbol import Symbol

i64 = st.integers(min_value=I64_MIN, max_value=I64_MAX)


def run(source):
    return eval_source(source, Environment(), strict=False)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ 100 5 2)", 10),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(+ -1 5 -3)", 1),
        ("(- 5)", 5),
        ("(* 7)", 7),
        ("(+ 1.5 2.5)", 4.0),
        ("(/ 1. 4.)", 0.25),
        ("(- -1. 2.)", -3.0),
        ("(* 2.0 3.5)", 7.0),
    ]
)
def test_arithmetic(source, expected):
    result = run(source)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 9223372036854775807 1)", -9223372036854775808),
        ("(- -9223372036854775808 1)", 9223372036854775807),
        ("(* 4611686018427387904 2)", -9223372036854775808),
        ("(/ -9223372036854775808 -1)", -9223372036854775808),
    ]
)
def test_integer_arithmetic_wraps_to_64_bits(source, expected):
    assert run(source) == expected


def test_float_division_by_zero_follows_ieee():
    assert run("(/ 1. 0.)") == math.inf
    assert run("(/ -1. 0.)") == -math.inf
    assert math.isnan(run("(/ 0. 0.)"))


def test_integer_division_by_zero_is_not_recovered():
    with pytest.raises(ZeroDivisionError):
        run("(/ 1 0)")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(== 1 1 1)", True),
        ("(== 1 2)", False),
        ("(== 1 1 2)", False),
        ("(== 1)", False),
        ("(== #t #t)", True),
        ("(== 1.5 1.5)", True),
        ("(!= 1 2)", True),
        ("(!= 1 1)", False),
        ("(!= 1 1 2)", True),
        ("(!= 1 2 1)", True),
        ("(!= 1)", False),
        ("(> 3 2 1)", True),
        ("(> 3 2 3)", False),
        ("(> 3 4)", False),
        ("(> 3)", False),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", True),
        ("(< 2 1)", False),
        ("(< 1.0 1.5)", True),
        ("(> #t #f)", True),
        ("(== (1) (#t))", False),
        ("(== (1) (1.0))", False),
        ("(== (0) (#f))", False),
        ("(!= (0) (#f))", True),
        ("(!= (2) (2.0))", True),
        ("(== ((/ 0. 0.)) ((/ 0. 0.)))", False),
        ("(== (/ 0. 0.) (/ 0. 0.))", False),
    ]
)
def test_comparison(source, expected):
    assert run(source) is expected


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1 2.0)",
        "(* 2.0 1)",
        "(== 1 #t)",
        "(< 1 1.5)",
        "(+ 1 2 3.0)",
    ]
)
def test_mixed_operand_types_fail(source):
    with pytest.raises(MiniLispTypeMismatch):
        run(source)


@pytest.mark.parametrize(
    "source",
    [
        "(+ #t #f)",
        "(* (1 2) (3 4))",
        "(> (1) (2))",
    ]
)
def test_operator_not_implemented_for_type(source):
    with pytest.raises(MiniLispTypeError):
        run(source)


@pytest.mark.parametrize("source", ["(+)", "(== (def x 1))"])
def test_operator_without_operands(source):
    with pytest.raises(MiniLispArityError):
        run(source)


def test_operands_evaluate_left_to_right_and_drop_void():
    assert run("(+ (def x 2) x 1)") == 3


@given(i64, i64)
def test_add_sub_mul_match_host_arithmetic(a, b):
    assert run(f"(+ {a} {b})") == wrap_i64(a + b)
    assert run(f"(- {a} {b})") == wrap_i64(a - b)
    assert run(f"(* {a} {b})") == wrap_i64(a * b)


@given(i64, i64)
def test_division_truncates_toward_zero(a, b):
    assume(b != 0)
    assume(not (a == I64_MIN and b == -1))
    q = run(f"(/ {a} {b})")
    r = a - q * b
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)


@given(i64, i64)
def test_equality(a, b):
    assert run(f"(== {a} {a} {a})") is True
    assert run(f"(== {a} {b})") is (a == b)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(== (1 2) (1 2) (1 2))", True),
        ("(== (1 (2 #t)) (1 (2 #t)))", True),
        ("(== (1 (2 1)) (1 (2 #t)))", False),
        ("(== (1 (2 1)) (1 (2 1.)))", False),
        ("(== (1 2) (1 2 3))", False),
        ("(== () ())", True),
        ("(!= (1 2) (1 2))", False),
        ("(!= (1 (#f)) (1 (0)))", True),
        ("(!= (1.5) (1.5) (1.5 #t))", True),
        ("(== (lambda (a) (* a 1)) (lambda (a) (* a 1)))", True),
        ("(== (lambda (a) (* a 1)) (lambda (a) (* a 1.)))", False),
        ("(== (lambda (a) (1)) (lambda (a) (#t)))", False),
        ("(== (lambda (a) (a)) (lambda (b) (b)))", False),
        ("(!= (lambda () (0)) (lambda () (#f)))", True),
    ]
)
def test_nested_equality_respects_types(source, expected):
    assert run(source) is expected


def test_same_value():
    assert same_value([1, [2.5, True]], [1, [2.5, True]])
    assert not same_value([1], [True])
    assert not same_value([1], [1.0])
    nan = float("nan")
    assert not same_value([nan], [nan])
    assert same_value(Lambda([Symbol("a")], [Symbol("a")]), Lambda([Symbol("a")], [Symbol("a")]))
    assert not same_value(Lambda([Symbol("a")], [0]), Lambda([Symbol("a")], [False]))
