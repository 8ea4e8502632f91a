# projectdesk type definitions
# Rev 0.3.0

from __future__ import annotations
from typing import Literal

# Entity classification hierarchy: project → task
EntityType = Literal["project", "task"]

ProjectStatus = Literal["active", "completed", "on-hold"]
TaskStatus = Literal["todo", "in-progress", "completed"]
Priority = Literal["low", "medium", "high"]
UserRole = Literal["admin", "manager", "developer"]

