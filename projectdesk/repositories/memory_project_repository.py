# Rev 0.2.0
# projectdesk – MemoryProjectRepository (Rev 0.2.0)
from __future__ import annotations
from dataclasses import replace
from typing import Any, Dict, List, Optional

from ..models.entities import Project
from ..models.inputs import ProjectInput
from ..utils.logging_setup import get_logger
from .db import MemoryDatabase

log = get_logger(__name__)

_MAX_ID_ATTEMPTS = 100


def fresh_id(db: MemoryDatabase, taken: set[str]) -> str:
    # Factories are expected to be collision-free; re-draw anyway if one repeats.
    for _ in range(_MAX_ID_ATTEMPTS):
        candidate = db.id_factory()
        if candidate not in taken:
            return candidate
    raise RuntimeError("id factory kept returning identifiers already in use")


class MemoryProjectRepository:
    """
    Project repository over MemoryDatabase.projects.
    Returned objects are immutable; callers never hold the stored list.
    """

    def __init__(self, db: MemoryDatabase):
        self._db = db

    # ---------- reads ----------

    def list_projects(self) -> List[Project]:
        with self._db.projects_lock:
            return list(self._db.projects)

    def get_project(self, project_id: str) -> Optional[Project]:
        with self._db.projects_lock:
            idx = self._index(project_id)
            return self._db.projects[idx] if idx is not None else None

    # ---------- mutations ----------

    def create_project(self, data: ProjectInput) -> Project:
        with self._db.projects_lock:
            now = self._db.clock()
            project = Project(
                id=fresh_id(self._db, {p.id for p in self._db.projects}),
                name=data.name,
                description=data.description,
                status=data.status,
                priority=data.priority,
                estimated_hours=data.estimated_hours,
                created_at=now,
                updated_at=now,
            )
            self._db.projects.append(project)
        log.debug("Project created id=%s name=%r", project.id, project.name)
        return project

    def add_project(self, project: Project) -> bool:
        """Insert a fully-formed record (seeding). False if the id is taken."""
        with self._db.projects_lock:
            if self._index(project.id) is not None:
                return False
            self._db.projects.append(project)
            return True

    def update_project(self, project_id: str, changes: Dict[str, Any]) -> Optional[Project]:
        with self._db.projects_lock:
            idx = self._index(project_id)
            if idx is None:
                return None
            updated = replace(self._db.projects[idx], **changes, updated_at=self._db.clock())
            self._db.projects[idx] = updated
        log.debug("Project updated id=%s fields=%s", project_id, sorted(changes))
        return updated

    def remove_project(self, project_id: str) -> Optional[Project]:
        with self._db.projects_lock:
            idx = self._index(project_id)
            if idx is None:
                return None
            return self._db.projects.pop(idx)

    # ---------- internals ----------

    def _index(self, project_id: str) -> Optional[int]:
        for i, p in enumerate(self._db.projects):
            if p.id == project_id:
                return i
        return None
