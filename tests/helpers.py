# Rev 0.2.0
"""Payload builders shared by the tests."""
from __future__ import annotations


def project_payload(**overrides):
    data = {
        "name": "E-commerce",
        "description": "Online store platform",
        "status": "active",
        "priority": "high",
    }
    data.update(overrides)
    return data


def task_payload(project_id: str, **overrides):
    data = {
        "title": "Set up database",
        "description": "Create schema and tables",
        "project_id": project_id,
        "status": "todo",
        "priority": "medium",
    }
    data.update(overrides)
    return data
