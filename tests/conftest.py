# Rev 0.2.0

"""Pytest fixtures for projectdesk (Rev 0.2.0)"""
from __future__ import annotations
from datetime import datetime, timedelta, timezone

import pytest
from PySide6.QtCore import QCoreApplication

from projectdesk.repositories.db import MemoryDatabase, sequential_ids
from projectdesk.services.database_service import DatabaseService


class TickingClock:
    """Advances one second per call so every mutation gets a distinct timestamp."""

    def __init__(self, start: datetime = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        self.now = self.now + timedelta(seconds=1)
        return self.now


@pytest.fixture()
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture()
def db(clock) -> MemoryDatabase:
    return MemoryDatabase(clock=clock, id_factory=sequential_ids(100))


@pytest.fixture()
def service(db) -> DatabaseService:
    return DatabaseService(db)


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture()
def xdg_dirs(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.delenv("PROJECTDESK_SEED", raising=False)
    monkeypatch.delenv("PROJECTDESK_LOG_LEVEL", raising=False)
    return tmp_path
