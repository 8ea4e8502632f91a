# Rev 0.2.0
"""Immutable entities held by the in-memory store (project → task)"""
from __future__ import annotations
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional

from .types import Priority, ProjectStatus, TaskStatus, UserRole


@dataclass(frozen=True)
class Project:
    id: str
    name: str
    description: str
    status: ProjectStatus
    priority: Priority
    created_at: datetime
    updated_at: datetime
    estimated_hours: Optional[float] = None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    description: str
    project_id: str            # not checked against existing projects
    status: TaskStatus
    priority: Priority
    created_at: datetime
    updated_at: datetime
    assignee: Optional[str] = None
    due_date: Optional[datetime] = None
    estimated_hours: Optional[float] = None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    role: UserRole
    created_at: datetime
    is_active: bool = True
