"""
core/locks.py -- Reader/writer lock shared by the in-memory stores.

Pattern: shared/exclusive lock. Any number of readers may hold the lock at
once; a writer holds it alone. Writers are preferred: once a writer is
waiting, new readers queue behind it so a steady stream of sign-in lookups
cannot starve sign-ups.

The stdlib threading module has no RW lock, so this is built on a single
threading.Condition. FastAPI runs sync route handlers in a worker thread
pool, which is why a thread lock (not an asyncio lock) is the right tool.

Layer rule: core/ is the kernel. No imports from api/ or auth/.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class ReadWriteLock:
    """Writer-preferring reader/writer lock.

    Usage:
        lock = ReadWriteLock()
        with lock.read():
            value = data.get(key)
        with lock.write():
            data[key] = value
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the block."""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
                # Readers parked behind this writer must re-check if it gave up.
                if self._writers_waiting == 0 and not self._writer:
                    self._cond.notify_all()
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()

    @property
    def readers(self) -> int:
        """Number of threads currently holding the lock in shared mode."""
        with self._cond:
            return self._readers

    @property
    def write_locked(self) -> bool:
        with self._cond:
            return self._writer
