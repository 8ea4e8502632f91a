# Rev 0.2.0

from __future__ import annotations

import logging

from projectdesk.services.events import EventBus, StoreEvent, attach_audit_log

from helpers import project_payload, task_payload


def capture(service):
    seen: list[StoreEvent] = []
    service.events.subscribe(seen.append)
    return seen


def test_every_mutation_publishes_one_event(service):
    seen = capture(service)
    p = service.create_project(project_payload())
    t = service.create_task(task_payload(p.id))
    service.update_task(t.id, {"status": "completed"})
    service.delete_task(t.id)

    assert [e.type for e in seen] == ["project.created", "task.created", "task.updated", "task.deleted"]
    assert seen[0].changes["name"] == "E-commerce"
    assert seen[2].changes == {"status": "completed"}
    assert seen[3].entity_id == t.id


def test_not_found_mutations_publish_nothing(service):
    seen = capture(service)
    service.update_project("missing", {"name": "x"})
    service.delete_project("missing")
    service.delete_task("missing")
    assert seen == []


def test_project_delete_event_lists_cascaded_tasks(service):
    p = service.create_project(project_payload())
    t1 = service.create_task(task_payload(p.id))
    t2 = service.create_task(task_payload(p.id))
    seen = capture(service)

    service.delete_project(p.id)

    (event,) = seen
    assert event.type == "project.deleted"
    assert event.cascaded == (t1.id, t2.id)


def test_failing_handler_is_logged_and_isolated(service, caplog):
    def boom(event):
        raise RuntimeError("subscriber bug")

    service.events.subscribe(boom)
    seen = capture(service)

    with caplog.at_level(logging.ERROR, logger="projectdesk"):
        p = service.create_project(project_payload())

    assert service.get_project_by_id(p.id) == p
    assert len(seen) == 1
    assert "Event handler" in caplog.text


def test_unsubscribe_stops_delivery(service):
    seen: list[StoreEvent] = []
    unsubscribe = service.events.subscribe(seen.append)
    service.create_project(project_payload())
    unsubscribe()
    unsubscribe()
    service.create_project(project_payload())

    assert len(seen) == 1
    assert service.events.events_published == 2


def test_audit_log_writes_one_line_per_event(service, caplog):
    attach_audit_log(service.events)
    with caplog.at_level(logging.INFO, logger="projectdesk.audit"):
        p = service.create_project(project_payload())
        service.create_task(task_payload(p.id))
        service.update_project(p.id, {"priority": "low"})
        service.delete_project(p.id)

    audit = [r.getMessage() for r in caplog.records if r.name == "projectdesk.audit"]
    assert len(audit) == 4
    assert audit[0] == f"project.created id={p.id}"
    assert "fields=['priority']" in audit[2]
    assert "cascaded=" in audit[3]


def test_bus_standalone():
    bus = EventBus()
    got = []
    bus.subscribe(got.append)
    from datetime import datetime, timezone
    ev = StoreEvent(action="created", entity="task", entity_id="9", at=datetime.now(timezone.utc))
    assert bus.publish(ev) is ev
    assert got == [ev]
