# projectdesk application context
# Rev 0.2.0

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .repositories.db import Clock, IdFactory, MemoryDatabase, sequential_ids, utc_now, uuid_ids
from .services.database_service import DatabaseService
from .services.events import EventBus, attach_audit_log
from .utils.config import load_settings
from .utils.logging_setup import get_logger


def id_factory_for(strategy: str) -> IdFactory:
    if strategy == "sequential":
        return sequential_ids()
    if strategy == "uuid":
        return uuid_ids
    raise ValueError(f"unknown id_strategy {strategy!r} (expected uuid or sequential)")


@dataclass
class AppContext:
    """Central container for shared app resources; build one per process (or per test)."""
    settings: Dict[str, Any]
    db: MemoryDatabase
    events: EventBus
    service: DatabaseService
    detach_audit: Callable[[], None]

    @classmethod
    def create(
        cls,
        settings: Optional[Dict[str, Any]] = None,
        *,
        clock: Clock = utc_now,
        id_factory: Optional[IdFactory] = None,
    ) -> "AppContext":
        """Build the store, wire the audit log, seed demo data if configured."""
        log = get_logger("AppContext")
        settings = settings if settings is not None else load_settings()
        store_cfg = settings.get("store", {})

        ids = id_factory or id_factory_for(store_cfg.get("id_strategy", "uuid"))
        db = MemoryDatabase(clock=clock, id_factory=ids)
        events = EventBus()
        detach = attach_audit_log(events)
        service = DatabaseService(db, events=events)

        if store_cfg.get("seed_sample_data"):
            service.load_sample_data()

        log.info("AppContext initialized (projects=%d, tasks=%d)",
                 len(service.get_projects()), len(service.get_tasks()))
        return cls(settings=settings, db=db, events=events, service=service, detach_audit=detach)
