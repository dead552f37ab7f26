"""Thread ownership: a joining thread wrapper and a parallel accumulate."""

from __future__ import annotations

import functools
import operator
import os
import sys
import threading
import time
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Optional, TypeVar

T = TypeVar("T")

MIN_PER_THREAD = 25


def _say(line: str) -> None:
    sys.stdout.write(line + "\n")


def accumulate_block(items: Iterable[Any], init: T) -> T:
    """Fold ``items`` onto ``init`` with ``+``, left to right."""
    return functools.reduce(operator.add, items, init)


def parallel_accumulate(items: Sequence[Any], init: T) -> T:
    """Accumulate ``items`` onto ``init`` using several threads.

    The sequence is split into equal blocks of at least 25 elements; the last
    block takes the remainder and runs in the calling thread.  Block results
    are combined in order, so non-commutative ``+`` keeps its ordering.
    """
    length = len(items)
    if not length:
        return init
    max_threads = (length + MIN_PER_THREAD - 1) // MIN_PER_THREAD
    hardware_threads = os.cpu_count() or 0
    num_threads = min(hardware_threads if hardware_threads else 2, max_threads)
    block_size = length // num_threads

    zero = type(init)()
    results: list[Any] = [zero] * num_threads

    def work(slot: int, start: int, stop: int) -> None:
        results[slot] = accumulate_block(items[start:stop], results[slot])

    threads = []
    for slot in range(num_threads - 1):
        start = slot * block_size
        worker = threading.Thread(target=work, args=(slot, start, start + block_size))
        worker.start()
        threads.append(worker)
    work(num_threads - 1, (num_threads - 1) * block_size, length)
    for worker in threads:
        worker.join()
    return accumulate_block(results, init)


class JoiningThread:
    """Owns a thread and joins it when closed, reassigned or leaving a ``with`` block."""

    def __init__(self, target: Optional[Callable[..., Any]] = None, *args: Any) -> None:
        self._thread: Optional[threading.Thread] = None
        if target is not None:
            self._thread = threading.Thread(target=target, args=args)
            self._thread.start()

    @classmethod
    def from_thread(cls, thread: threading.Thread) -> "JoiningThread":
        """Take ownership of ``thread``, starting it if it has not been started."""
        owner = cls()
        if thread.ident is None:
            thread.start()
        owner._thread = thread
        return owner

    def assign(self, other: "JoiningThread") -> "JoiningThread":
        """Join the owned thread if any, then take over the thread of ``other``."""
        if self is other:
            return self
        if self.joinable():
            self.join()
        self._thread, other._thread = other._thread, None
        return self

    def swap(self, other: "JoiningThread") -> None:
        """Exchange owned threads with ``other``."""
        self._thread, other._thread = other._thread, self._thread

    def ident(self) -> Optional[int]:
        """Identifier of the owned thread, or None when nothing is owned."""
        return None if self._thread is None else self._thread.ident

    def joinable(self) -> bool:
        """True while a thread is owned and has been neither joined nor detached."""
        return self._thread is not None

    def join(self) -> None:
        """Wait for the owned thread; RuntimeError if there is none."""
        if self._thread is None:
            raise RuntimeError("thread is not joinable")
        self._thread.join()
        self._thread = None

    def detach(self) -> None:
        """Give up ownership without waiting; RuntimeError if there is none."""
        if self._thread is None:
            raise RuntimeError("thread is not joinable")
        self._thread = None

    def as_thread(self) -> Optional[threading.Thread]:
        """The owned thread object, or None."""
        return self._thread

    def close(self) -> None:
        """Join the owned thread if it is still joinable."""
        if self.joinable():
            self.join()

    def __enter__(self) -> "JoiningThread":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def param_function(i: int, repeats: int = 10, delay: float = 1.0) -> None:
    """Report the current thread and index ``repeats`` times."""
    for _ in range(repeats):
        _say(f"in thread id {threading.get_ident()} cur index is {i}")
        time.sleep(delay)


def _spin(stop: Optional[threading.Event]) -> None:
    if stop is None:
        while True:
            time.sleep(1)
    while not stop.wait(1):
        pass


def some_function(stop: Optional[threading.Event] = None) -> None:
    """Sleep in one-second steps until ``stop`` is set (forever without one)."""
    _spin(stop)


def some_other_function(stop: Optional[threading.Event] = None) -> None:
    """Sleep in one-second steps until ``stop`` is set (forever without one)."""
    _spin(stop)


def use_vector(repeats: int = 10, delay: float = 1.0) -> None:
    """Run ten threads of ``param_function`` and join them all."""
    threads = [
        threading.Thread(target=param_function, args=(i, repeats, delay))
        for i in range(10)
    ]
    for worker in threads:
        worker.start()
    for worker in threads:
        worker.join()


def _count_up(maxindex: int, delay: float) -> None:
    for i in range(maxindex):
        _say(f"in thread id {threading.get_ident()} cur index is {i}")
        time.sleep(delay)


def use_jointhread(maxindex: int = 10, delay: float = 1.0) -> None:
    """Build joining threads three ways and move the third into the first."""
    with JoiningThread(_count_up, maxindex, delay) as j1, JoiningThread.from_thread(
        threading.Thread(target=_count_up, args=(maxindex, delay))
    ), JoiningThread.from_thread(
        threading.Thread(target=_count_up, args=(maxindex, delay))
    ) as j3:
        j1.assign(j3)


def use_parallel_acc() -> int:
    """Sum ten thousand zeros followed by 0..9999 in parallel, print and return it."""
    vec = [0] * 10000
    vec.extend(range(10000))
    total = parallel_accumulate(vec, 0)
    _say(f"sum is {total}")
    return total


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the parallel accumulate demonstration."""
    use_parallel_acc()
    return 0