# Rev 0.2.0
"""
Developer walk-through for the in-memory store.
Loads the demo records, runs a CRUD + cascade pass and prints summaries.

Usage:
    python -m projectdesk.dev_seed
"""
from __future__ import annotations

from typing import Callable, Optional

from .app_context import AppContext
from .utils.config import load_settings
from .utils.logging_setup import setup_logging


def run_seed(ctx: Optional[AppContext] = None, out: Callable[[str], None] = print) -> AppContext:
    if ctx is None:
        settings = load_settings()
        settings["store"]["seed_sample_data"] = True
        ctx = AppContext.create(settings)
    svc = ctx.service

    out("=== Creating sample project and tasks ===")
    p = svc.create_project({
        "name": "Internal Tooling",
        "description": "Scripts and dashboards for the team.",
        "status": "active",
        "priority": "low",
        "estimatedHours": 40,
    })
    t1 = svc.create_task({
        "title": "Initialize repo",
        "description": "Create the repository structure.",
        "projectId": p.id,
        "status": "todo",
        "priority": "medium",
    })
    t2 = svc.create_task({
        "title": "Build dashboard",
        "description": "Stats overview for projects and tasks.",
        "projectId": p.id,
        "status": "todo",
        "priority": "high",
        "assignee": "Ana",
        "dueDate": "2024-03-01",
    })
    out(f"Created project {p.id} with task IDs: {t1.id}, {t2.id}")

    out("=== Updating task 1 ===")
    svc.update_task(t1.id, {"status": "in-progress", "description": "Repository skeleton done."})

    out("=== Listing projects ===")
    for row in svc.get_projects():
        out(f"Project #{row.id} [{row.status}/{row.priority}] {row.name}")

    out("=== Listing tasks ===")
    for row in svc.get_tasks():
        out(f"Task #{row.id} [{row.status}] {row.title} (project {row.project_id}, updated {row.updated_at.isoformat()})")

    ps, ts = svc.get_project_stats(), svc.get_task_stats()
    out(f"Projects: total={ps.total} active={ps.active} completed={ps.completed}")
    out(f"Tasks: total={ts.total} todo={ts.todo} in_progress={ts.in_progress} completed={ts.completed}")

    out(f"=== Deleting project {p.id} (cascade) ===")
    svc.delete_project(p.id)
    out(f"Remaining tasks: {[t.id for t in svc.get_tasks()]}")
    out("=== Seed complete ===")
    return ctx


if __name__ == "__main__":
    setup_logging(level=load_settings()["logging"].get("level", "INFO"))
    run_seed()
