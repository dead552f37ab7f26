"""Basic thread starting: plain functions, callable objects and detached threads."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import MutableSequence


def _say(line: str) -> None:
    sys.stdout.write(line + "\n")


def thread_work(text: str) -> None:
    """Print the text given to a worker thread."""
    _say(f"Thread: {text}")


class ThreadFunctor:
    """A callable object usable as a thread target."""

    def __call__(self) -> None:
        _say("BackGround Task called: ")


class Func:
    """Callable that writes a loop counter into a shared one-element cell."""

    def __init__(self, state: MutableSequence[int], delay: float = 1.0) -> None:
        self.state = state
        self.delay = delay

    def __call__(self) -> None:
        for i in range(3):
            self.state[0] = i
            _say(f"_i is {self.state[0]}")
            time.sleep(self.delay)


def oops() -> threading.Thread:
    """Start a detached (daemon) thread that writes into a local cell.

    The started thread is returned so that callers may observe it.
    """
    some_local_state = [0]
    worker = threading.Thread(target=Func(some_local_state), daemon=True)
    worker.start()
    return worker