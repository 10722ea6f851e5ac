"""
Wall-clock timing for benchmarked operations.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """Elapsed time of a ``timed()`` block, in milliseconds."""

    def __init__(self) -> None:
        self._start = time.perf_counter()
        self._end: float | None = None

    def stop(self) -> None:
        self._end = time.perf_counter()

    @property
    def elapsed_ms(self) -> float:
        end = self._end if self._end is not None else time.perf_counter()
        return (end - self._start) * 1000.0


@contextmanager
def timed() -> Iterator[Timer]:
    """Time the enclosed block.

    Example:
        with timed() as timer:
            do_work()
        print(f"{timer.elapsed_ms:.2f} ms")
    """
    timer = Timer()
    try:
        yield timer
    finally:
        timer.stop()


def format_ms(elapsed_ms: float) -> str:
    return f"{elapsed_ms:.2f} ms"
