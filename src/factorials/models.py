from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from .errors import InvalidArgument


class Strategy(str, Enum):
    iterative = "iterative"
    fold = "fold"
    apply_range = "apply_range"
    take_iterate = "take_iterate"
    expression = "expression"
    accumulator_loop = "accumulator_loop"
    closure = "closure"
    library = "library"
    bounded = "bounded"
    pool_map = "pool_map"
    pool_calls = "pool_calls"
    shared_accumulator = "shared_accumulator"
    agent = "agent"
    lazy = "lazy"
    trampoline = "trampoline"
    dispatch = "dispatch"


class FactorialRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    n: StrictInt = Field(ge=0)
    chunk_size: Optional[StrictInt] = Field(default=None, ge=1)
    max_workers: Optional[StrictInt] = Field(default=None, ge=1)


def validate_request(
    n: int, chunk_size: Optional[int] = None, max_workers: Optional[int] = None
) -> FactorialRequest:
    """Build a :class:`FactorialRequest`, raising ``InvalidArgument`` on bad input."""

    try:
        return FactorialRequest(n=n, chunk_size=chunk_size, max_workers=max_workers)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or None
        raise InvalidArgument(f"{field}: {error['msg']}", field=field) from None


def parse_strategy(value: "Strategy | str") -> Strategy:
    try:
        return Strategy(value)
    except ValueError:
        choices = ", ".join(member.value for member in Strategy)
        raise InvalidArgument(f"unknown strategy {value!r} (choose from: {choices})", field="strategy") from None
