from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .models import validate_request


@dataclass(frozen=True)
class Continuing:
    step: int
    value: int


@dataclass(frozen=True)
class Done:
    value: int


State = Union[Continuing, Done]


def transition(state: State, limit: int) -> State:
    if isinstance(state, Done):
        return state
    if state.step < limit:
        return Continuing(step=state.step + 1, value=state.value * state.step)
    # Last multiplication is by the limit itself; 0! still has to come out as 1.
    return Done(value=state.value * max(limit, 1))


def dispatched(n: int) -> int:
    validate_request(n)
    state: State = Continuing(step=1, value=1)
    while not isinstance(state, Done):
        state = transition(state, n)
    return state.value
