"""One entry point over every factorial strategy in the package."""

from __future__ import annotations

from typing import Callable, Dict, FrozenSet, Optional

from . import dispatch, lazy, parallel, sequential, trampoline
from .logging import get_logger, log_event
from .models import Strategy, parse_strategy, validate_request

logger = get_logger(__name__)

STRATEGIES: Dict[Strategy, Callable[..., int]] = {
    Strategy.iterative: sequential.iterative,
    Strategy.fold: sequential.fold,
    Strategy.apply_range: sequential.apply_range,
    Strategy.take_iterate: sequential.take_iterate,
    Strategy.expression: sequential.expression,
    Strategy.accumulator_loop: sequential.accumulator_loop,
    Strategy.closure: sequential.closure,
    Strategy.library: sequential.library,
    Strategy.bounded: sequential.bounded,
    Strategy.pool_map: parallel.pool_map,
    Strategy.pool_calls: parallel.pool_calls,
    Strategy.shared_accumulator: parallel.shared_accumulator,
    Strategy.agent: parallel.agent,
    Strategy.lazy: lazy.lazy,
    Strategy.trampoline: trampoline.trampolined,
    Strategy.dispatch: dispatch.dispatched,
}

PARTITIONED: FrozenSet[Strategy] = frozenset(
    {Strategy.pool_map, Strategy.pool_calls, Strategy.shared_accumulator, Strategy.agent}
)


def factorial(
    strategy: "Strategy | str",
    n: int,
    chunk_size: Optional[int] = None,
    max_workers: Optional[int] = None,
) -> int:
    """Compute ``n!`` with the named strategy.

    ``chunk_size`` and ``max_workers`` are validated for every strategy but
    only passed on to the partition strategies in :data:`PARTITIONED`.

    Raises:
        InvalidArgument:    for an unknown strategy, a negative or
                            non-integer ``n``, or a bound below 1.
        ArithmeticOverflow: from the ``bounded`` strategy only.
    """

    selected = parse_strategy(strategy)
    validate_request(n, chunk_size, max_workers)
    log_event(logger, "factorial_requested", {"strategy": selected.value, "n": n})
    compute = STRATEGIES[selected]
    if selected in PARTITIONED:
        return compute(n, chunk_size=chunk_size, max_workers=max_workers)
    return compute(n)
