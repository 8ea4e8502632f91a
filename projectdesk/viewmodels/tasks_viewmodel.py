# Rev 0.2.0
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from PySide6.QtCore import QObject, Signal

from ..services.database_service import DatabaseService
from ..services.events import StoreEvent
from ..services.query_service import TaskFilters


class TasksViewModel(QObject):
    tasksReloaded = Signal(int, object)
    statsChanged = Signal(object)

    def __init__(self, service: DatabaseService):
        super().__init__()
        self._svc = service
        self._filters = TaskFilters()
        self._unsubscribe = service.events.subscribe(self._on_store_event)

    # ---- filters
    def set_filters(
        self,
        project_id: Optional[str] = None,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        assignee: Optional[str] = None,
        search: Optional[str] = None,
    ) -> None:
        self._filters = TaskFilters(
            status=status, priority=priority, project_id=project_id,
            assignee=assignee, search=search or None,
        )
        self.reload()

    def filters(self) -> TaskFilters:
        return self._filters

    # ---- queries
    def reload(self) -> None:
        rows = self._svc.filter_tasks(self._filters)
        self.tasksReloaded.emit(len(rows), [t.as_dict() for t in rows])
        self.statsChanged.emit(self._svc.get_task_stats().as_dict())

    def get_task_details(self, task_id: str) -> Optional[Dict[str, Any]]:
        task = self._svc.get_task_by_id(task_id)
        return task.as_dict() if task else None

    # ---- commands
    def create_task(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return self._svc.create_task(data).as_dict()

    def update_task(self, task_id: str, data: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        task = self._svc.update_task(task_id, data)
        return task.as_dict() if task else None

    def delete_task(self, task_id: str) -> bool:
        return self._svc.delete_task(task_id)

    def dispose(self) -> None:
        self._unsubscribe()

    # ---- internals
    def _on_store_event(self, event: StoreEvent) -> None:
        # project deletes cascade into tasks, so every event can change this list
        self.reload()
