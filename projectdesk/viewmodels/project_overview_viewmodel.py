# Rev 0.2.0 (project fields plus task counts by status)
from __future__ import annotations
from typing import Optional, Dict, Any
from PySide6.QtCore import QObject, Signal

from ..services.database_service import DatabaseService
from ..services.events import StoreEvent
from ..services.query_service import task_stats


class ProjectOverviewViewModel(QObject):
    """
    Emits:
      loaded({
        ...project fields (id, name, description, status, priority, ...),
        "tasks_total": int,
        "tasks_todo": int,
        "tasks_in_progress": int,
        "tasks_completed": int,
      })
    or loaded({}) when the project does not exist (e.g. it was just deleted).
    """
    loaded = Signal(object)

    def __init__(self, service: DatabaseService):
        super().__init__()
        self._svc = service
        self._project_id: Optional[str] = None
        self._last: Optional[Dict[str, Any]] = None
        self._unsubscribe = service.events.subscribe(self._on_store_event)

    def load(self, project_id: str) -> None:
        self._project_id = project_id
        proj = self._svc.get_project_by_id(project_id)
        if not proj:
            self._last = None
            self.loaded.emit({})
            return

        stats = task_stats(self._svc.get_tasks_by_project(project_id))
        info = proj.as_dict()
        info.update(
            tasks_total=stats.total,
            tasks_todo=stats.todo,
            tasks_in_progress=stats.in_progress,
            tasks_completed=stats.completed,
        )
        self._last = info
        self.loaded.emit(info)

    def last(self) -> Optional[Dict[str, Any]]:
        return self._last

    def dispose(self) -> None:
        self._unsubscribe()

    def _on_store_event(self, event: StoreEvent) -> None:
        if self._project_id is None:
            return
        if event.entity == "project" and event.entity_id != self._project_id:
            return
        self.load(self._project_id)
