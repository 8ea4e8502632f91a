# Rev 0.2.0
"""Demonstration records (two projects, two tasks) with fixed ids and dates."""
from __future__ import annotations
from datetime import datetime, timezone
from typing import List

from ..models.entities import Project, Task


def _d(y: int, m: int, d: int) -> datetime:
    return datetime(y, m, d, tzinfo=timezone.utc)


def sample_projects() -> List[Project]:
    return [
        Project(
            id="1",
            name="Sistema de E-commerce",
            description="Desenvolvimento de plataforma de vendas online",
            status="active",
            priority="high",
            estimated_hours=120.0,
            created_at=_d(2024, 1, 15),
            updated_at=_d(2024, 1, 20),
        ),
        Project(
            id="2",
            name="App Mobile Delivery",
            description="Aplicativo para entrega de comida",
            status="active",  # "in-progress" is a task status, not a project one
            priority="medium",
            estimated_hours=80.0,
            created_at=_d(2024, 2, 1),
            updated_at=_d(2024, 2, 10),
        ),
    ]


def sample_tasks() -> List[Task]:
    return [
        Task(
            id="1",
            title="Configurar banco de dados",
            description="Criar schema e tabelas iniciais",
            project_id="1",
            status="completed",
            priority="high",
            assignee="João Silva",
            estimated_hours=8.0,
            created_at=_d(2024, 1, 16),
            updated_at=_d(2024, 1, 18),
            due_date=_d(2024, 1, 25),
        ),
        Task(
            id="2",
            title="Implementar autenticação",
            description="Sistema de login e registro de usuários",
            project_id="1",
            status="in-progress",
            priority="high",
            assignee="Maria Santos",
            estimated_hours=12.0,
            created_at=_d(2024, 1, 19),
            updated_at=_d(2024, 1, 22),
            due_date=_d(2024, 1, 30),
        ),
    ]
