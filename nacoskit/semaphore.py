"""A counting semaphore that reports its free permits."""

from __future__ import annotations

import threading
from types import TracebackType
from typing import Optional


class Semaphore:
    """Limits concurrency to a fixed number of permits."""

    def __init__(self, concurrency: int) -> None:
        if concurrency < 0:
            raise ValueError("concurrency must not be negative")
        self._capacity = concurrency
        self._held = 0
        self._cond = threading.Condition()

    def try_acquire(self) -> bool:
        """Take a permit if one is free; return whether one was taken."""
        with self._cond:
            if self._held >= self._capacity:
                return False
            self._held += 1
            return True

    def acquire(self) -> None:
        """Take a permit, waiting until one is free."""
        with self._cond:
            while self._held >= self._capacity:
                self._cond.wait()
            self._held += 1

    def release(self) -> None:
        """Give back a permit; raise ValueError if none is held."""
        with self._cond:
            if self._held == 0:
                raise ValueError("semaphore released more times than acquired")
            self._held -= 1
            self._cond.notify()

    def available_permits(self) -> int:
        """Return the number of free permits."""
        with self._cond:
            return self._capacity - self._held

    def __enter__(self) -> Semaphore:
        self.acquire()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()