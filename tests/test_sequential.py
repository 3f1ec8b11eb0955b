import math
from types import SimpleNamespace

import pytest

from factorials import accumulator, sequential
from factorials.errors import ArithmeticOverflow, InvalidArgument

SEQUENTIAL = [
    sequential.iterative,
    sequential.fold,
    sequential.apply_range,
    sequential.take_iterate,
    sequential.expression,
    sequential.accumulator_loop,
    sequential.closure,
    sequential.library,
    sequential.bounded,
]


def test_iterative_zero():
    assert sequential.iterative(0) == 1


def test_iterative_positive():
    assert sequential.iterative(5) == 120


def test_fold_zero():
    assert sequential.fold(0) == 1


def test_iterative_negative_input():
    with pytest.raises(InvalidArgument):
        sequential.iterative(-1)


@pytest.mark.parametrize("bad", [3.2, "5", True, None])
def test_iterative_non_integer(bad):
    with pytest.raises(InvalidArgument):
        sequential.iterative(bad)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        sequential.fold(-3)


@pytest.mark.parametrize("strategy", SEQUENTIAL, ids=lambda fn: fn.__name__)
@pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 20])
def test_sequential_strategies_agree_with_iterative(strategy, n):
    assert strategy(n) == sequential.iterative(n)


def test_unbounded_strategies_use_arbitrary_precision():
    assert sequential.fold(30) == math.factorial(30)
    assert sequential.iterative(100) == math.factorial(100)


def test_product_expression_is_data():
    expr = sequential.build_product_expression(4)
    assert expr[1:] == (1, 2, 3, 4)
    assert sequential.evaluate(expr) == 24


def test_empty_product_expression_evaluates_to_one():
    assert sequential.evaluate(sequential.build_product_expression(0)) == 1


def test_factorial_function_recomputes_on_every_call(monkeypatch):
    compute = sequential.make_factorial_function(6)
    calls = []
    real_reduce = sequential.functools.reduce

    def counting_reduce(*args):
        calls.append(args)
        return real_reduce(*args)

    monkeypatch.setattr(sequential, "functools", SimpleNamespace(reduce=counting_reduce))
    assert compute() == 720
    assert compute() == 720
    assert len(calls) == 2


def test_factorial_function_validates_at_construction():
    with pytest.raises(InvalidArgument):
        sequential.make_factorial_function(-2)


def test_bounded_limits():
    assert sequential.bounded(20) == 2432902008176640000
    with pytest.raises(ArithmeticOverflow) as excinfo:
        sequential.bounded(21)
    assert excinfo.value.bits == 64


def test_bounded_32_bit():
    assert sequential.bounded(12, bits=32) == 479001600
    with pytest.raises(ArithmeticOverflow):
        sequential.bounded(13, bits=32)


def test_bounded_rejects_tiny_width():
    with pytest.raises(InvalidArgument):
        sequential.bounded(3, bits=1)


def test_accumulator_loop_uses_the_standalone_cell():
    assert sequential.Accumulator is accumulator.Accumulator
    assert accumulator.Accumulator.__module__ == "factorials.accumulator"
