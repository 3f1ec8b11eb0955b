"""Factorials as a restartable, produce-on-demand sequence."""

from __future__ import annotations

import itertools
from typing import Iterator, List, Tuple

from .models import validate_request


class FactorialSequence:
    """The endless sequence ``(0, 0!), (1, 1!), (2, 2!), ...``.

    Every call to ``iter()`` starts a fresh generator at index 0, so two
    consumers never share a cursor. Each value is derived from the previous
    one with a single multiplication and only when it is asked for.
    """

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        index, value = 0, 1
        while True:
            yield index, value
            index += 1
            value = self._advance(value, index)

    def _advance(self, previous: int, index: int) -> int:
        return previous * index

    def values(self) -> Iterator[int]:
        return (value for _, value in self)

    def nth(self, k: int) -> int:
        validate_request(k)
        # One next() on the slice: the generator is never resumed past index k.
        _, value = next(itertools.islice(self, k, None))
        return value

    def take(self, k: int) -> List[int]:
        validate_request(k)
        return list(itertools.islice(self.values(), k))


def lazy_sequence() -> FactorialSequence:
    return FactorialSequence()


def lazy(n: int) -> int:
    return lazy_sequence().nth(n)
