"""Stack-safe recursion: steps hand back continuations instead of recursing."""

from __future__ import annotations

from typing import Any, Callable, Union

from .models import validate_request

Step = Union[int, Callable[[], Any]]


def trampoline(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Call ``fn`` and then each callable it returns until a plain value comes back."""

    result = fn(*args, **kwargs)
    while callable(result):
        result = result()
    return result


def factorial_step(target: int, step: int = 1, value: int = 1) -> Step:
    """One step of the recursive definition ``value(k) = value(k - 1) * k``.

    Returns the product once ``step`` reaches ``target``, otherwise a
    zero-argument continuation that performs the next step.
    """

    if step >= target:
        return value
    next_step = step + 1
    return lambda: factorial_step(target, next_step, value * next_step)


def trampolined(n: int) -> int:
    validate_request(n)
    return trampoline(factorial_step, n)
