"""Pydantic schemas for YAML task files."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import Priority, Status

# Spellings of in-progress accepted on input
_STATUS_ALIASES = {"inprogress": "in-progress", "in_progress": "in-progress"}


class TaskSchema(BaseModel):
    """Schema for one task entry."""

    model_config = ConfigDict(extra="forbid")

    title: str = ""
    priority: Priority = Priority.MEDIUM
    status: Status = Status.TODO
    scheduled_date: date | None = None
    dependencies: list[str] = Field(default_factory=list)
    archived: bool = False

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v: Any) -> Any:
        """Accept alternative spellings of in-progress."""
        if isinstance(v, str):
            return _STATUS_ALIASES.get(v.strip().lower(), v.strip().lower())
        return v

    @field_validator("priority", mode="before")
    @classmethod
    def normalize_priority(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("scheduled_date", mode="before")
    @classmethod
    def empty_date_is_unset(cls, v: Any) -> Any:
        """Treat an empty string as no scheduled date."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("dependencies", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Ensure value is a list of ids."""
        if v is None:
            return []
        if isinstance(v, list):
            return [str(item) for item in v]  # type: ignore[misc]
        return [str(v)]


class InboxItemSchema(BaseModel):
    """Schema for an inbox entry. Only a title is allowed."""

    model_config = ConfigDict(extra="forbid")

    title: str = ""


class TaskFileSchema(BaseModel):
    """Schema for the entire task file.

    Unknown top-level sections are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    tasks: dict[str, TaskSchema] = Field(default_factory=dict)
    inbox: dict[str, InboxItemSchema] = Field(default_factory=dict)

    @field_validator("tasks", "inbox", mode="before")
    @classmethod
    def normalize_section(cls, v: Any) -> Any:
        """Allow empty sections and bare ids (``call-bob:`` with no fields)."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {str(key): {} if value is None else value for key, value in v.items()}  # type: ignore[misc]
        return v
