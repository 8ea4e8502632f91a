# Rev 0.2.0

"""In-memory database (Rev 0.2.0)
- One list per collection, insertion order preserved
- One re-entrant lock per collection; compound operations lock projects → tasks
- Identifier and clock sources are injectable
"""
from __future__ import annotations
import itertools
import threading
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator, List

from ..models.entities import Project, Task
from ..utils.logging_setup import get_logger

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def uuid_ids() -> str:
    return uuid.uuid4().hex


def sequential_ids(start: int = 1) -> IdFactory:
    """Monotonic counter ids ("1", "2", ...); unique per factory."""
    counter = itertools.count(start)
    lock = threading.Lock()

    def next_id() -> str:
        with lock:
            return str(next(counter))
    return next_id


class MemoryDatabase:
    def __init__(self, *, clock: Clock = utc_now, id_factory: IdFactory = uuid_ids) -> None:
        self.clock = clock
        self.id_factory = id_factory
        self.projects: List[Project] = []
        self.tasks: List[Task] = []
        self.projects_lock = threading.RLock()
        self.tasks_lock = threading.RLock()
        get_logger("MemoryDatabase").info("In-memory database ready")

    @contextmanager
    def locked(self) -> Iterator["MemoryDatabase"]:
        """Hold both collection locks (projects first)."""
        with self.projects_lock, self.tasks_lock:
            yield self

    def clear(self) -> None:
        with self.locked():
            self.projects.clear()
            self.tasks.clear()
