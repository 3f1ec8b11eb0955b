"""Partition-parallel factorial strategies.

Each strategy splits ``[1, n]`` with :func:`partition_range`, multiplies the
chunks on a thread pool and combines the chunk products once every dispatched
task has finished. Workers are joined before a failure is re-raised, so no
task is ever left running in the background.
"""

from __future__ import annotations

import functools
import operator
import random
import time
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Callable, List, Optional, Tuple

from .accumulator import Accumulator
from .config import resolve_chunk_size, resolve_max_workers
from .logging import get_logger, log_event
from .models import validate_request
from .partition import chunk_product, combine, partition_range

logger = get_logger(__name__)


class Agent:
    """A value owned by one worker thread that applies queued actions in order.

    ``send`` only enqueues; ``await_`` is the join barrier. Once an action
    fails the remaining queued actions are skipped and ``await_`` re-raises
    the failure.
    """

    def __init__(self, initial: Any):
        self._value = initial
        self._failed = False
        self._pending: List[Future] = []
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="factorials-agent")

    def send(self, fn: Callable[..., Any], *args: Any) -> "Agent":
        self._pending.append(self._executor.submit(self._apply, fn, args))
        return self

    def _apply(self, fn: Callable[..., Any], args: tuple) -> None:
        if self._failed:
            return
        try:
            self._value = fn(self._value, *args)
        except Exception as exc:
            self._failed = True
            log_event(logger, "agent_action_failed", {"error": repr(exc)})
            raise

    def await_(self) -> None:
        pending, self._pending = self._pending, []
        wait(pending)
        for future in pending:
            exc = future.exception()
            if exc is not None:
                raise exc

    def deref(self) -> Any:
        return self._value

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "Agent":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _plan(n: int, chunk_size: Optional[int], max_workers: Optional[int]) -> Tuple[List[range], int]:
    validate_request(n, chunk_size, max_workers)
    chunks = partition_range(n, resolve_chunk_size(chunk_size))
    workers = max(1, min(resolve_max_workers(max_workers), len(chunks)))
    log_event(logger, "partition_planned", {"n": n, "chunks": len(chunks), "workers": workers})
    return chunks, workers


def _join(futures: List[Future]) -> List[Any]:
    """Wait for every future, then return their results in submission order."""
    wait(futures)
    return [future.result() for future in futures]


def pool_map(n: int, chunk_size: Optional[int] = None, max_workers: Optional[int] = None) -> int:
    chunks, workers = _plan(n, chunk_size, max_workers)
    # A failing chunk cancels those not yet started; the with-block joins the rest.
    with ThreadPoolExecutor(max_workers=workers) as executor:
        products = list(executor.map(chunk_product, chunks))
    return combine(products)


def pool_calls(n: int, chunk_size: Optional[int] = None, max_workers: Optional[int] = None) -> int:
    chunks, workers = _plan(n, chunk_size, max_workers)
    thunks = [functools.partial(chunk_product, chunk) for chunk in chunks]
    with ThreadPoolExecutor(max_workers=workers) as executor:
        products = _join([executor.submit(thunk) for thunk in thunks])
    return combine(products)


def shared_accumulator(
    n: int,
    chunk_size: Optional[int] = None,
    max_workers: Optional[int] = None,
    jitter: float = 0.0,
) -> int:
    """Multiply every chunk straight into one lock-guarded :class:`Accumulator`.

    ``jitter`` sleeps each worker for up to that many seconds before it
    updates the cell, which shuffles the order updates land in.
    """

    chunks, workers = _plan(n, chunk_size, max_workers)
    result = Accumulator(1)

    def work(chunk: range) -> None:
        if jitter:
            time.sleep(random.uniform(0, jitter))
        result.update(operator.mul, chunk_product(chunk))

    with ThreadPoolExecutor(max_workers=workers) as executor:
        _join([executor.submit(work, chunk) for chunk in chunks])
    return result.value


def _multiply_chunk(value: int, chunk: range) -> int:
    return value * chunk_product(chunk)


def agent(n: int, chunk_size: Optional[int] = None, max_workers: Optional[int] = None) -> int:
    # An agent runs its actions on a single thread; max_workers is only validated.
    chunks, _ = _plan(n, chunk_size, max_workers)
    with Agent(1) as result:
        for chunk in chunks:
            result.send(_multiply_chunk, chunk)
        result.await_()
        return result.deref()
