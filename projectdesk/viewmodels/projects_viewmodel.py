# Rev 0.2.0
# projectdesk/viewmodels/projects_viewmodel.py
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from PySide6.QtCore import QObject, Signal

from ..services.database_service import DatabaseService
from ..services.events import StoreEvent
from ..services.query_service import ProjectFilters


class ProjectsViewModel(QObject):
    """
    Emits:
      projectsReloaded(count, [project dict, ...])   filtered by search/status/priority
      statsChanged({"total", "active", "completed", "on_hold"})  over all projects
    Reloads on every project event from the store.
    """
    # object, not list/dict: rows carry datetimes and must reach slots untouched
    projectsReloaded = Signal(int, object)
    statsChanged = Signal(object)

    def __init__(self, service: DatabaseService):
        super().__init__()
        self._svc = service
        self._search: Optional[str] = None
        self._status: Optional[str] = None
        self._priority: Optional[str] = None
        self._unsubscribe = service.events.subscribe(self._on_store_event)

    # ---- filters
    def set_search(self, term: Optional[str]) -> None:
        self._search = term or None
        self.reload()

    def set_filters(self, status: Optional[str] = None, priority: Optional[str] = None) -> None:
        self._status, self._priority = status, priority
        self.reload()

    def filters(self) -> ProjectFilters:
        return ProjectFilters(status=self._status, priority=self._priority, search=self._search)

    # ---- queries
    def reload(self) -> None:
        rows = self._svc.filter_projects(self.filters())
        self.projectsReloaded.emit(len(rows), [p.as_dict() for p in rows])
        self.statsChanged.emit(self._svc.get_project_stats().as_dict())

    # ---- commands (reload happens through the store event)
    def create_project(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return self._svc.create_project(data).as_dict()

    def update_project(self, project_id: str, data: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        project = self._svc.update_project(project_id, data)
        return project.as_dict() if project else None

    def delete_project(self, project_id: str) -> bool:
        return self._svc.delete_project(project_id)

    def dispose(self) -> None:
        self._unsubscribe()

    # ---- internals
    def _on_store_event(self, event: StoreEvent) -> None:
        if event.entity == "project":
            self.reload()
