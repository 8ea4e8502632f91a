# Rev 0.2.0
"""Mutation events published by the store.

Every create/update/delete on DatabaseService becomes one StoreEvent on the
service's EventBus. View models subscribe to reload; ``attach_audit_log``
writes each event to the ``projectdesk.audit`` logger.
"""
from __future__ import annotations

import contextlib
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Literal, Tuple

from ..models.types import EntityType
from ..utils.logging_setup import get_logger

log = get_logger(__name__)
audit_log = get_logger("audit")

Action = Literal["created", "updated", "deleted"]
EventHandler = Callable[["StoreEvent"], Any]


@dataclass(frozen=True)
class StoreEvent:
    action: Action
    entity: EntityType
    entity_id: str
    at: datetime
    changes: Dict[str, Any] = field(default_factory=dict)
    cascaded: Tuple[str, ...] = ()   # task ids removed along with a project

    @property
    def type(self) -> str:
        return f"{self.entity}.{self.action}"


class EventBus:
    """Synchronous in-process pub/sub."""

    def __init__(self) -> None:
        self._handlers: List[EventHandler] = []
        self.events_published = 0

    def subscribe(self, handler: EventHandler) -> Callable[[], None]:
        self._handlers.append(handler)

        def _unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._handlers.remove(handler)

        return _unsubscribe

    def publish(self, event: StoreEvent) -> StoreEvent:
        self.events_published += 1
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception:
                # one broken subscriber must not fail the mutation or starve the others
                log.exception("Event handler %r failed on %s id=%s", handler, event.type, event.entity_id)
        return event


def log_event(event: StoreEvent) -> None:
    if event.cascaded:
        audit_log.info("%s id=%s cascaded=%s", event.type, event.entity_id, list(event.cascaded))
    elif event.changes and event.action == "updated":
        audit_log.info("%s id=%s fields=%s", event.type, event.entity_id, sorted(event.changes))
    else:
        audit_log.info("%s id=%s", event.type, event.entity_id)


def attach_audit_log(bus: EventBus) -> Callable[[], None]:
    return bus.subscribe(log_event)
