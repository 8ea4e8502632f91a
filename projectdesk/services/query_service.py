# Rev 0.3.0

"""Search, filter and stats over store snapshots (Rev 0.2.0)
Pure functions; every call recomputes from the list it is given.
"""
from __future__ import annotations
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..models.entities import Project, Task
from ..models.types import Priority, ProjectStatus, TaskStatus


@dataclass(frozen=True)
class ProjectFilters:
    status: Optional[ProjectStatus] = None
    priority: Optional[Priority] = None
    search: Optional[str] = None


@dataclass(frozen=True)
class TaskFilters:
    status: Optional[TaskStatus] = None
    priority: Optional[Priority] = None
    project_id: Optional[str] = None
    assignee: Optional[str] = None
    search: Optional[str] = None


@dataclass(frozen=True)
class ProjectStats:
    total: int
    active: int
    completed: int
    on_hold: int

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TaskStats:
    total: int
    todo: int
    in_progress: int
    completed: int

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


_SEPARATORS = re.compile(r"[\W_]+")


def _fold(text: str) -> str:
    return _SEPARATORS.sub("", text.casefold())


def matches_query(query: str, *texts: str) -> bool:
    """Case-insensitive substring test; also retried against the texts with
    punctuation and spaces dropped, so "ecommerce" finds "E-commerce".
    The query itself is never folded."""
    q = query.casefold()
    if any(q in (t or "").casefold() for t in texts):
        return True
    return bool(q) and any(q in _fold(t or "") for t in texts)


# ---- search

def search_projects(projects: Iterable[Project], query: str) -> List[Project]:
    return [p for p in projects if matches_query(query, p.name, p.description)]


def search_tasks(tasks: Iterable[Task], query: str) -> List[Task]:
    return [t for t in tasks if matches_query(query, t.title, t.description)]


# ---- filters (all given criteria must hold)

def filter_projects(projects: Iterable[Project], filters: Optional[ProjectFilters] = None) -> List[Project]:
    f = filters or ProjectFilters()
    out = []
    for p in projects:
        if f.status is not None and p.status != f.status:
            continue
        if f.priority is not None and p.priority != f.priority:
            continue
        if f.search and not matches_query(f.search, p.name, p.description):
            continue
        out.append(p)
    return out


def filter_tasks(tasks: Iterable[Task], filters: Optional[TaskFilters] = None) -> List[Task]:
    f = filters or TaskFilters()
    out = []
    for t in tasks:
        if f.status is not None and t.status != f.status:
            continue
        if f.priority is not None and t.priority != f.priority:
            continue
        if f.project_id is not None and t.project_id != f.project_id:
            continue
        # case-insensitive; assignee="" selects unassigned tasks
        if f.assignee is not None and (t.assignee or "").lower() != f.assignee.lower():
            continue
        if f.search and not matches_query(f.search, t.title, t.description):
            continue
        out.append(t)
    return out


# ---- stats

def project_stats(projects: Iterable[Project]) -> ProjectStats:
    items = list(projects)
    return ProjectStats(
        total=len(items),
        active=sum(1 for p in items if p.status == "active"),
        completed=sum(1 for p in items if p.status == "completed"),
        on_hold=sum(1 for p in items if p.status == "on-hold"),
    )


def task_stats(tasks: Iterable[Task]) -> TaskStats:
    items = list(tasks)
    return TaskStats(
        total=len(items),
        todo=sum(1 for t in items if t.status == "todo"),
        in_progress=sum(1 for t in items if t.status == "in-progress"),
        completed=sum(1 for t in items if t.status == "completed"),
    )
