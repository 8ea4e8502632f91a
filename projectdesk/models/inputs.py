# Rev 0.3.0
"""Typed create/update payloads for the store (pydantic models).

Callers hand the store either one of the models below or a plain mapping
(e.g. straight from a form). Mappings go through ``from_dict``:

  - snake_case keys, plus the camelCase aliases older callers send
    (``estimatedHours``, ``projectId``, ``dueDate``); giving both spellings is an error
  - unknown and read-only keys (``id``, ``created_at``, ``updated_at``) are rejected
  - status/priority must be one of the declared values
  - ``estimated_hours`` must be a positive, finite number; numeric strings are coerced
  - ``due_date`` accepts datetime, date or an ISO-8601 string; naive values are UTC

``from_dict`` raises ValidationError (naming the offending field) before
anything is written. Building a model directly raises pydantic's own error.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from typing import Annotated, Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from .types import Priority, ProjectStatus, TaskStatus

Hours = Annotated[float, Field(gt=0, allow_inf_nan=False)]

P = TypeVar("P", bound="Payload")


class ValidationError(ValueError):
    """Raised when a payload cannot be turned into a valid input."""

    def __init__(self, field_name: str, message: str):
        super().__init__(f"{field_name}: {message}")
        self.field = field_name


def _doubled_field(model: Type[BaseModel], data: Any) -> Optional[str]:
    if not isinstance(data, Mapping):
        return None
    for name, info in model.model_fields.items():
        if info.alias and info.alias in data and name in data:
            return name
    return None


class Payload(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _one_spelling_per_field(cls, data: Any) -> Any:
        doubled = _doubled_field(cls, data)
        if doubled:
            raise ValueError(f"{doubled} given under both its name and its alias")
        return data

    # update models declare every field Optional; an explicit null is still invalid here
    @field_validator("description", "status", "priority", "project_id", check_fields=False)
    @classmethod
    def _not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may not be null")
        return value

    @field_validator("name", "title", check_fields=False)
    @classmethod
    def _not_blank(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("may not be null")
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("assignee", check_fields=False)
    @classmethod
    def _blank_assignee_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("estimated_hours", mode="before", check_fields=False)
    @classmethod
    def _no_bool_hours(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("expected a number")
        return value

    @field_validator("due_date", mode="before", check_fields=False)
    @classmethod
    def _date_only(cls, value: Any) -> Any:
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time())
        if isinstance(value, str) and len(value.strip()) == 10:
            try:
                return datetime.combine(date.fromisoformat(value.strip()), time())
            except ValueError:
                return value
        return value

    @field_validator("due_date", check_fields=False)
    @classmethod
    def _utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def from_dict(cls: Type[P], data: Any) -> P:
        doubled = _doubled_field(cls, data)
        if doubled:
            raise ValidationError(doubled, "given under both its name and its alias")
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            err = exc.errors()[0]
            loc = err.get("loc") or ()
            raise ValidationError(_field_name(cls, loc[0]) if loc else "input", err["msg"]) from exc


def _field_name(model: Type[BaseModel], key: Any) -> str:
    for name, info in model.model_fields.items():
        if info.alias == key:
            return name
    return str(key)


# ---------- create payloads ----------

class ProjectInput(Payload):
    name: str
    description: str
    status: ProjectStatus
    priority: Priority
    estimated_hours: Optional[Hours] = Field(default=None, alias="estimatedHours")


class TaskInput(Payload):
    title: str
    description: str
    project_id: str = Field(alias="projectId")   # not checked against existing projects
    status: TaskStatus
    priority: Priority
    assignee: Optional[str] = None
    due_date: Optional[datetime] = Field(default=None, alias="dueDate")
    estimated_hours: Optional[Hours] = Field(default=None, alias="estimatedHours")


# ---------- partial updates ----------

class ProjectUpdate(Payload):
    """Only the fields the caller actually supplied are applied."""
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    priority: Optional[Priority] = None
    estimated_hours: Optional[Hours] = Field(default=None, alias="estimatedHours")

    @property
    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class TaskUpdate(Payload):
    """Only the fields the caller actually supplied are applied."""
    title: Optional[str] = None
    description: Optional[str] = None
    project_id: Optional[str] = Field(default=None, alias="projectId")
    status: Optional[TaskStatus] = None
    priority: Optional[Priority] = None
    assignee: Optional[str] = None
    due_date: Optional[datetime] = Field(default=None, alias="dueDate")
    estimated_hours: Optional[Hours] = Field(default=None, alias="estimatedHours")

    @property
    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


def as_project_input(value: Any) -> ProjectInput:
    return value if isinstance(value, ProjectInput) else ProjectInput.from_dict(value)


def as_task_input(value: Any) -> TaskInput:
    return value if isinstance(value, TaskInput) else TaskInput.from_dict(value)


def as_project_update(value: Any) -> ProjectUpdate:
    return value if isinstance(value, ProjectUpdate) else ProjectUpdate.from_dict(value)


def as_task_update(value: Any) -> TaskUpdate:
    return value if isinstance(value, TaskUpdate) else TaskUpdate.from_dict(value)
