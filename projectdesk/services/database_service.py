# Rev 0.2.0

"""Entity store service (Rev 0.2.0)
Owns the project and task collections through the in-memory repositories.

- Not-found is never an exception: get/update return None, delete returns False
- Deleting a project also deletes every task whose project_id points at it
- Payloads are validated (see models.inputs) before the store is touched
- Every mutation is published as a StoreEvent on ``self.events``
"""
from __future__ import annotations
from typing import Any, List, Optional, Union, Mapping

from ..models.entities import Project, Task
from ..models.inputs import (
    ProjectInput, ProjectUpdate, TaskInput, TaskUpdate,
    as_project_input, as_project_update, as_task_input, as_task_update,
)
from ..models.types import EntityType
from ..repositories.db import MemoryDatabase
from ..repositories.memory_project_repository import MemoryProjectRepository
from ..repositories.memory_task_repository import MemoryTaskRepository
from ..utils.logging_setup import get_logger
from . import query_service as q
from .events import Action, EventBus, StoreEvent
from .sample_data import sample_projects, sample_tasks

log = get_logger(__name__)

ProjectPayload = Union[ProjectInput, Mapping[str, Any]]
TaskPayload = Union[TaskInput, Mapping[str, Any]]


class DatabaseService:
    def __init__(self, db: Optional[MemoryDatabase] = None, *, events: Optional[EventBus] = None):
        self._db = db if db is not None else MemoryDatabase()
        self._projects = MemoryProjectRepository(self._db)
        self._tasks = MemoryTaskRepository(self._db)
        self.events = events if events is not None else EventBus()

    # ---------- projects ----------

    def create_project(self, data: ProjectPayload) -> Project:
        project = self._projects.create_project(as_project_input(data))
        self._publish("created", "project", project.id, changes=project.as_dict())
        return project

    def get_projects(self) -> List[Project]:
        return self._projects.list_projects()

    def get_project_by_id(self, project_id: str) -> Optional[Project]:
        return self._projects.get_project(project_id)

    def update_project(self, project_id: str, data: Union[ProjectUpdate, Mapping[str, Any]]) -> Optional[Project]:
        changes = as_project_update(data).changes
        project = self._projects.update_project(project_id, changes)
        if project is None:
            log.debug("update_project: no project id=%s", project_id)
            return None
        self._publish("updated", "project", project.id, changes=changes)
        return project

    def delete_project(self, project_id: str) -> bool:
        with self._db.locked():
            project = self._projects.remove_project(project_id)
            if project is None:
                log.debug("delete_project: no project id=%s", project_id)
                return False
            removed = self._tasks.remove_tasks_for_project(project_id)
        self._publish("deleted", "project", project_id, cascaded=tuple(t.id for t in removed))
        return True

    # ---------- tasks ----------

    def create_task(self, data: TaskPayload) -> Task:
        task = self._tasks.create_task(as_task_input(data))
        self._publish("created", "task", task.id, changes=task.as_dict())
        return task

    def get_tasks(self) -> List[Task]:
        return self._tasks.list_tasks()

    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        return self._tasks.get_task(task_id)

    def get_tasks_by_project(self, project_id: str) -> List[Task]:
        return self._tasks.list_tasks_by_project(project_id)

    def update_task(self, task_id: str, data: Union[TaskUpdate, Mapping[str, Any]]) -> Optional[Task]:
        changes = as_task_update(data).changes
        task = self._tasks.update_task(task_id, changes)
        if task is None:
            log.debug("update_task: no task id=%s", task_id)
            return None
        self._publish("updated", "task", task.id, changes=changes)
        return task

    def delete_task(self, task_id: str) -> bool:
        if self._tasks.remove_task(task_id) is None:
            log.debug("delete_task: no task id=%s", task_id)
            return False
        self._publish("deleted", "task", task_id)
        return True

    # ---------- search / filters / stats ----------

    def search_projects(self, query: str) -> List[Project]:
        return q.search_projects(self.get_projects(), query)

    def search_tasks(self, query: str) -> List[Task]:
        return q.search_tasks(self.get_tasks(), query)

    def filter_projects(self, filters: Optional[q.ProjectFilters] = None) -> List[Project]:
        return q.filter_projects(self.get_projects(), filters)

    def filter_tasks(self, filters: Optional[q.TaskFilters] = None) -> List[Task]:
        return q.filter_tasks(self.get_tasks(), filters)

    def get_project_stats(self) -> q.ProjectStats:
        return q.project_stats(self.get_projects())

    def get_task_stats(self) -> q.TaskStats:
        return q.task_stats(self.get_tasks())

    # ---------- lifecycle ----------

    def load_sample_data(self) -> int:
        """Insert the demo records; ids already present are skipped. Returns rows added."""
        added = 0
        for project in sample_projects():
            if self._projects.add_project(project):
                added += 1
                self._publish("created", "project", project.id, changes=project.as_dict())
        for task in sample_tasks():
            if self._tasks.add_task(task):
                added += 1
                self._publish("created", "task", task.id, changes=task.as_dict())
        log.info("Sample data loaded: %d records", added)
        return added

    def clear(self) -> None:
        with self._db.locked():
            projects = self._projects.list_projects()
            tasks = self._tasks.list_tasks()
            self._db.clear()
        for t in tasks:
            self._publish("deleted", "task", t.id)
        for p in projects:
            self._publish("deleted", "project", p.id)

    # ---------- internals ----------

    def _publish(self, action: Action, entity: EntityType, entity_id: str, **extra: Any) -> None:
        self.events.publish(StoreEvent(action=action, entity=entity, entity_id=entity_id, at=self._db.clock(), **extra))
