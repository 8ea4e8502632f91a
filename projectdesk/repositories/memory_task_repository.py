# Rev 0.2.0
from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional

from ..models.entities import Task
from ..models.inputs import TaskInput
from ..utils.logging_setup import get_logger
from .db import MemoryDatabase
from .memory_project_repository import fresh_id

log = get_logger(__name__)


class MemoryTaskRepository:
    """
    Task CRUD + per-project listing over MemoryDatabase.tasks.
    project_id is stored as given; nothing checks that the project exists.
    """

    def __init__(self, db: MemoryDatabase):
        self._db = db

    # -------------------------
    # Reads
    # -------------------------
    def list_tasks(self) -> List[Task]:
        with self._db.tasks_lock:
            return list(self._db.tasks)

    def list_tasks_by_project(self, project_id: str) -> List[Task]:
        with self._db.tasks_lock:
            return [t for t in self._db.tasks if t.project_id == project_id]

    def get_task(self, task_id: str) -> Optional[Task]:
        with self._db.tasks_lock:
            idx = self._index(task_id)
            return self._db.tasks[idx] if idx is not None else None

    # -------------------------
    # CRUD
    # -------------------------
    def create_task(self, data: TaskInput) -> Task:
        with self._db.tasks_lock:
            now = self._db.clock()
            task = Task(
                id=fresh_id(self._db, {t.id for t in self._db.tasks}),
                title=data.title,
                description=data.description,
                project_id=data.project_id,
                status=data.status,
                priority=data.priority,
                assignee=data.assignee,
                due_date=data.due_date,
                estimated_hours=data.estimated_hours,
                created_at=now,
                updated_at=now,
            )
            self._db.tasks.append(task)
        log.debug("Task created id=%s project_id=%s", task.id, task.project_id)
        return task

    def add_task(self, task: Task) -> bool:
        with self._db.tasks_lock:
            if self._index(task.id) is not None:
                return False
            self._db.tasks.append(task)
            return True

    def update_task(self, task_id: str, changes: Dict[str, Any]) -> Optional[Task]:
        with self._db.tasks_lock:
            idx = self._index(task_id)
            if idx is None:
                return None
            updated = replace(self._db.tasks[idx], **changes, updated_at=self._db.clock())
            self._db.tasks[idx] = updated
        log.debug("Task updated id=%s fields=%s", task_id, sorted(changes))
        return updated

    def remove_task(self, task_id: str) -> Optional[Task]:
        with self._db.tasks_lock:
            idx = self._index(task_id)
            if idx is None:
                return None
            return self._db.tasks.pop(idx)

    def remove_tasks_for_project(self, project_id: str) -> List[Task]:
        """Drop every task pointing at project_id; returns what was removed."""
        with self._db.tasks_lock:
            removed = [t for t in self._db.tasks if t.project_id == project_id]
            if removed:
                self._db.tasks[:] = [t for t in self._db.tasks if t.project_id != project_id]
            return removed

    def _index(self, task_id: str) -> Optional[int]:
        for i, t in enumerate(self._db.tasks):
            if t.id == task_id:
                return i
        return None
