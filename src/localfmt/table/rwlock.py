"""Readers-writer lock guarding a shared current-language cell.

Many threads read the current language on every message lookup; a
language switch is rare. The lock lets readers proceed together while a
writer gets exclusive access, and gives waiting writers priority so a
steady stream of lookups cannot postpone a switch forever.

Rules:
    - The read lock is reentrant per thread.
    - The write lock is not reentrant.
    - A thread holding the read lock cannot take the write lock, and the
      reverse; both raise RuntimeError instead of deadlocking.
    - Both locks accept a timeout and raise TimeoutError when it expires.

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     with lock.read():  # reentrant
        ...         pass
        >>> with lock.write(timeout=1.0):
        ...     pass
    """

    __slots__ = ("_condition", "_readers", "_waiting_writers", "_writer")

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        # thread id -> read acquisition depth
        self._readers: dict[int, int] = {}
        self._writer: int | None = None
        self._waiting_writers = 0

    @contextmanager
    def read(self, timeout: float | None = None) -> Generator[None]:
        """Hold the shared lock for the duration of the block.

        Raises:
            RuntimeError: If this thread holds the write lock
            TimeoutError: If the lock is not acquired within timeout
            ValueError: If timeout is negative
        """
        self._acquire_read(timeout)
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self, timeout: float | None = None) -> Generator[None]:
        """Hold the exclusive lock for the duration of the block.

        Raises:
            RuntimeError: If this thread already holds either lock
            TimeoutError: If the lock is not acquired within timeout
            ValueError: If timeout is negative
        """
        self._acquire_write(timeout)
        try:
            yield
        finally:
            self._release_write()

    def _wait_until(self, ready: Callable[[], bool], timeout: float | None, what: str) -> None:
        """Wait on the condition until ready() holds. Caller holds the condition."""
        deadline = time.monotonic() + timeout if timeout is not None else None
        while not ready():
            if deadline is None:
                self._condition.wait()
                continue
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                msg = f"Timed out waiting for {what} lock"
                raise TimeoutError(msg)
            self._condition.wait(timeout=remaining)

    def _acquire_read(self, timeout: float | None) -> None:
        _check_timeout(timeout)
        me = threading.get_ident()
        with self._condition:
            if me in self._readers:
                self._readers[me] += 1
                return
            if self._writer == me:
                msg = "Cannot acquire read lock while holding the write lock"
                raise RuntimeError(msg)
            self._wait_until(
                lambda: self._writer is None and self._waiting_writers == 0, timeout, "read"
            )
            self._readers[me] = 1

    def _release_read(self) -> None:
        me = threading.get_ident()
        with self._condition:
            depth = self._readers.get(me)
            if depth is None:
                msg = "Thread does not hold the read lock"
                raise RuntimeError(msg)
            if depth > 1:
                self._readers[me] = depth - 1
                return
            del self._readers[me]
            if not self._readers:
                self._condition.notify_all()

    def _acquire_write(self, timeout: float | None) -> None:
        _check_timeout(timeout)
        me = threading.get_ident()
        with self._condition:
            if me in self._readers:
                msg = "Cannot upgrade a read lock to the write lock"
                raise RuntimeError(msg)
            if self._writer == me:
                msg = "Write lock is not reentrant"
                raise RuntimeError(msg)
            self._waiting_writers += 1
            try:
                self._wait_until(
                    lambda: not self._readers and self._writer is None, timeout, "write"
                )
                self._writer = me
            finally:
                self._waiting_writers -= 1
                # Readers blocked on waiting writers must re-check after a timeout
                self._condition.notify_all()

    def _release_write(self) -> None:
        with self._condition:
            if self._writer != threading.get_ident():
                msg = "Thread does not hold the write lock"
                raise RuntimeError(msg)
            self._writer = None
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Distinct threads holding the read lock right now."""
        with self._condition:
            return len(self._readers)

    @property
    def writer_active(self) -> bool:
        """True while some thread holds the write lock."""
        with self._condition:
            return self._writer is not None


def _check_timeout(timeout: float | None) -> None:
    if timeout is not None and timeout < 0:
        msg = f"Timeout must be non-negative, got {timeout}"
        raise ValueError(msg)
