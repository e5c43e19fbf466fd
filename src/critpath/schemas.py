"""Pydantic schemas for YAML project file validation."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator


class TaskSchema(BaseModel):
    """Schema for a single task entry."""

    name: str | None = None
    duration: int = Field(default=0, ge=0)
    start_date: date | None = None
    group: bool = False
    parent: str | None = None
    predecessors: list[str] = Field(default_factory=list)

    @field_validator("predecessors", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Ensure value is a list of strings."""
        if v is None:
            return []
        if isinstance(v, list):
            return [str(item) for item in v]  # type: ignore[misc]
        return [str(v)]


class MetadataSchema(BaseModel):
    """Schema for project metadata."""

    name: str | None = None
    version: str = "1.0"
    last_updated: str | None = None

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version_to_string(cls, v: Any) -> str:
        """Ensure version is a string."""
        return str(v)

    @field_validator("last_updated", mode="before")
    @classmethod
    def coerce_date_to_string(cls, v: Any) -> str | None:
        """Convert date objects to string."""
        if v is None:
            return None
        return str(v)


class ProjectSchema(BaseModel):
    """Schema for the entire project file."""

    metadata: MetadataSchema = Field(default_factory=MetadataSchema)
    tasks: dict[str, TaskSchema | None] = Field(default_factory=dict)
