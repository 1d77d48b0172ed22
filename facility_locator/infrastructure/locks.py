"""
In-process reader/writer lock.

Guards the shared road network: any number of nearest-facility queries
may read the adjacency structure at once, while a registration
(``add_location`` / ``add_road``) waits for in-flight readers to drain and
then runs alone.

The lock is writer-preferring: once a writer is waiting, new readers
queue behind it so a steady stream of queries cannot starve a
registration.  It is not re-entrant in either mode.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0

    # ── Shared (read) side ───────────────────────────────────────────

    def acquire_read(self, timeout: float | None = None) -> bool:
        """Block until no writer holds or awaits the lock.  True on success."""
        with self._cond:
            ok = self._cond.wait_for(
                lambda: not self._writer_active and not self._writers_waiting,
                timeout=timeout,
            )
            if ok:
                self._readers += 1
            return ok

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() called without a read lock")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    # ── Exclusive (write) side ───────────────────────────────────────

    def acquire_write(self, timeout: float | None = None) -> bool:
        """Block until no reader or writer holds the lock.  True on success."""
        with self._cond:
            self._writers_waiting += 1
            try:
                ok = self._cond.wait_for(
                    lambda: not self._writer_active and self._readers == 0,
                    timeout=timeout,
                )
            finally:
                self._writers_waiting -= 1
            if ok:
                self._writer_active = True
            else:
                # readers parked behind us may proceed again
                self._cond.notify_all()
            return ok

    def release_write(self) -> None:
        with self._cond:
            if not self._writer_active:
                raise RuntimeError("release_write() called without the write lock")
            self._writer_active = False
            self._cond.notify_all()

    # context-manager support
    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
