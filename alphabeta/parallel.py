"""
parallel.py

A small thread pool that hands out one item at a time from a shared cursor.

In contrast to splitting the items up front, every worker takes the next
job when it is done with its current one. That helps when there are some
slow jobs among many fast ones, and it means larger jobs should come first.

A job can return Continue.NO to stop early: no new items are started, items
already running still finish.
"""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Callable, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Continue(Enum):
    NO = False
    YES = True


class _Cursor:
    """Hands out increasing indices until `size` or until stopped."""

    def __init__(self, size: int) -> None:
        self._size = size
        self._next = 0
        self._lock = threading.Lock()

    def take(self) -> Optional[int]:
        with self._lock:
            if self._next >= self._size:
                return None
            idx = self._next
            self._next += 1
            return idx

    def stop(self) -> None:
        with self._lock:
            self._next = self._size


def default_workers() -> int:
    return os.cpu_count() or 1


def for_each(
    items: Sequence[T],
    op: Callable[[T], Optional[Continue]],
    workers: Optional[int] = None,
) -> None:
    """
    Call `op` on every item using up to `workers` threads.

    Parameters
    ----------
    items : Sequence
        Work items, dispatched in order.
    op : callable
        Called once per dispatched item. Returning Continue.NO stops dispatch;
        any other return value (including None) continues.
    workers : int | None
        Maximum number of threads, including the calling thread. Defaults to
        the number of available CPUs.

    Raises
    ------
    ValueError
        if `workers` is smaller than 1.
    Exception
        the first exception raised by `op` is re-raised after all running
        workers have stopped.
    """
    if workers is None:
        workers = default_workers()
    if workers < 1:
        raise ValueError("workers must be >= 1")

    size = len(items)
    cursor = _Cursor(size)

    def loop(worker_id: int) -> None:
        try:
            idx = cursor.take()
            while idx is not None:
                if op(items[idx]) is Continue.NO:
                    logger.debug("worker %d: stop requested at %d/%d", worker_id, idx, size)
                    cursor.stop()
                idx = cursor.take()
        except BaseException:
            cursor.stop()
            raise

    num_workers = min(workers, size)
    if num_workers <= 1:
        loop(0)
        return

    with ThreadPoolExecutor(max_workers=num_workers - 1, thread_name_prefix="for_each") as executor:
        futures = [executor.submit(loop, worker_id) for worker_id in range(1, num_workers)]
        # this thread works too
        try:
            loop(0)
        finally:
            errors = [f.exception() for f in futures]
    for error in errors:
        if error is not None:
            raise error
