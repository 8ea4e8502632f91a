# Rev 0.2.0

from __future__ import annotations

import pytest

from projectdesk.models.inputs import ValidationError
from projectdesk.viewmodels.project_overview_viewmodel import ProjectOverviewViewModel
from projectdesk.viewmodels.projects_viewmodel import ProjectsViewModel
from projectdesk.viewmodels.tasks_viewmodel import TasksViewModel

from helpers import project_payload, task_payload


class Recorder:
    """Slot sink; one/two match the signal arity so Qt passes every argument."""

    def __init__(self):
        self.calls = []

    def one(self, a):
        self.calls.append((a,))

    def two(self, a, b):
        self.calls.append((a, b))

    @property
    def last(self):
        return self.calls[-1]


def test_projects_viewmodel_reloads_on_store_events(qapp, service):
    vm = ProjectsViewModel(service)
    rows, stats = Recorder(), Recorder()
    vm.projectsReloaded.connect(rows.two)
    vm.statsChanged.connect(stats.one)

    created = vm.create_project(project_payload())
    count, items = rows.last
    assert count == 1
    assert items[0]["id"] == created["id"]
    assert stats.last[0]["active"] == 1

    vm.update_project(created["id"], {"status": "completed"})
    assert rows.last[1][0]["status"] == "completed"
    assert stats.last[0] == {"total": 1, "active": 0, "completed": 1, "on_hold": 0}

    assert vm.delete_project(created["id"]) is True
    assert rows.last == (0, [])
    vm.dispose()


def test_projects_viewmodel_search_and_filters(qapp, service):
    service.create_project(project_payload(name="E-commerce"))
    service.create_project(project_payload(name="Delivery", status="on-hold"))
    vm = ProjectsViewModel(service)
    rows = Recorder()
    vm.projectsReloaded.connect(rows.two)

    vm.set_search("ECOMMERCE")
    assert [r["name"] for r in rows.last[1]] == ["E-commerce"]

    vm.set_search("")
    vm.set_filters(status="on-hold")
    assert [r["name"] for r in rows.last[1]] == ["Delivery"]
    vm.dispose()


def test_viewmodel_missing_entities_and_validation(qapp, service):
    vm = ProjectsViewModel(service)
    assert vm.update_project("missing", {"name": "x"}) is None
    assert vm.delete_project("missing") is False
    with pytest.raises(ValidationError):
        vm.create_project(project_payload(priority="urgent"))
    vm.dispose()


def test_tasks_viewmodel_follows_cascade(qapp, service):
    p = service.create_project(project_payload())
    vm = TasksViewModel(service)
    rows, stats = Recorder(), Recorder()
    vm.tasksReloaded.connect(rows.two)
    vm.statsChanged.connect(stats.one)
    vm.set_filters(project_id=p.id)

    t = vm.create_task(task_payload(p.id, status="in-progress"))
    assert rows.last[0] == 1
    assert stats.last[0]["in_progress"] == 1
    assert vm.get_task_details(t["id"])["title"] == "Set up database"

    vm.update_task(t["id"], {"title": "Schema"})
    assert rows.last[1][0]["title"] == "Schema"

    service.delete_project(p.id)
    assert rows.last == (0, [])
    assert vm.get_task_details(t["id"]) is None
    assert vm.delete_task(t["id"]) is False
    vm.dispose()


def test_disposed_viewmodel_stops_listening(qapp, service):
    vm = TasksViewModel(service)
    rows = Recorder()
    vm.tasksReloaded.connect(rows.two)
    vm.dispose()

    service.create_task(task_payload("1"))
    assert rows.calls == []


def test_project_overview_counts_tasks_by_status(qapp, service):
    p = service.create_project(project_payload())
    for status in ("todo", "in-progress", "completed", "completed"):
        service.create_task(task_payload(p.id, status=status))
    service.create_task(task_payload("other"))

    vm = ProjectOverviewViewModel(service)
    loaded = Recorder()
    vm.loaded.connect(loaded.one)

    vm.load(p.id)
    info = loaded.last[0]
    assert info["name"] == "E-commerce"
    assert (info["tasks_total"], info["tasks_todo"], info["tasks_in_progress"], info["tasks_completed"]) == (4, 1, 1, 2)
    assert vm.last() == info

    service.delete_project(p.id)
    assert loaded.last[0] == {}
    assert vm.last() is None

    vm.load("missing")
    assert loaded.last[0] == {}
    vm.dispose()
