"""Single-threaded factorial strategies.

``iterative`` is the baseline every other strategy in the package is checked
against; the rest reach the same number through a different Python idiom.
"""

from __future__ import annotations

import functools
import itertools
import math
import operator
from typing import Callable, Iterable, Tuple

from .accumulator import Accumulator
from .errors import ArithmeticOverflow, InvalidArgument
from .models import validate_request


def iterative(n: int) -> int:
    """Return n! for a non-negative integer ``n``.

    Raises:
        InvalidArgument:    when ``n`` is negative or not an integer.
    """

    validate_request(n)
    product = 1
    for value in _range_inclusive(2, n):
        product *= value
    return product


def _range_inclusive(start: int, stop: int) -> Iterable[int]:
    """Return the inclusive range [start, stop]."""

    if stop < start:
        return []
    return range(start, stop + 1)


def fold(n: int) -> int:
    validate_request(n)
    return functools.reduce(operator.mul, range(1, n + 1), 1)


def apply_range(n: int) -> int:
    validate_request(n)
    return math.prod(range(1, n + 1))


def take_iterate(n: int) -> int:
    """Multiply the first ``n`` items of the endless counter 1, 2, 3, ..."""

    validate_request(n)
    return math.prod(itertools.islice(itertools.count(1), n))


def build_product_expression(n: int) -> Tuple:
    """Return ``(operator.mul, 1, 2, ..., n)``: the product written out as data."""

    validate_request(n)
    return (operator.mul, *range(1, n + 1))


def evaluate(expr: Tuple) -> int:
    op, *operands = expr
    return functools.reduce(op, operands, 1)


def expression(n: int) -> int:
    return evaluate(build_product_expression(n))


def accumulator_loop(n: int) -> int:
    validate_request(n)
    step = Accumulator(0)
    result = Accumulator(1)
    while step.value < n:
        current = step.update(operator.add, 1)
        result.update(operator.mul, current)
    return result.value


def make_factorial_function(n: int) -> Callable[[], int]:
    """Return a thunk that recomputes ``n!`` every time it is called.

    ``n`` is validated here, when the thunk is built, not when it runs.
    """

    validate_request(n)

    def compute() -> int:
        return functools.reduce(operator.mul, range(1, n + 1), 1)

    return compute


def closure(n: int) -> int:
    return make_factorial_function(n)()


def library(n: int) -> int:
    validate_request(n)
    return math.factorial(n)


def bounded(n: int, bits: int = 64) -> int:
    """Compute ``n!`` as if in a signed ``bits``-wide machine integer.

    Raises:
        InvalidArgument:    when ``n`` is negative or not an integer.
        ArithmeticOverflow: when ``n!`` exceeds ``2 ** (bits - 1) - 1``.
    """

    validate_request(n)
    if bits < 2:
        raise InvalidArgument("bits: must be >= 2", field="bits")
    limit = (1 << (bits - 1)) - 1
    result = 1
    for value in _range_inclusive(2, n):
        result *= value
        if result > limit:
            raise ArithmeticOverflow(n, bits)
    return result
