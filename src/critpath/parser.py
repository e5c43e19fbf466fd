"""YAML parser for critpath project files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError, ValidationError
from .models import Project, ProjectMetadata, Task
from .schemas import ProjectSchema, TaskSchema


class ProjectParser:
    """Parser for project YAML files.

    Only handles YAML parsing and task creation. For parsing plus reference
    validation, use load_project() from critpath.loader.
    """

    def parse_file(self, file_path: Path | str) -> Project:
        """Parse a YAML file into a Project."""
        path = Path(file_path)
        if not path.exists():
            raise ParseError(f"File not found: {file_path}")

        try:
            with path.open(encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ParseError(f"Failed to parse YAML: {e}") from e

        if not isinstance(data, dict):
            raise ParseError("YAML must contain a dictionary at the root level")

        return self.parse_data(data)  # type: ignore[arg-type]

    def parse_data(self, data: dict[str, Any]) -> Project:
        """Parse loaded YAML data into a Project."""
        try:
            schema = ProjectSchema(**data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid YAML structure: {e}") from e

        metadata = ProjectMetadata(
            name=schema.metadata.name,
            version=schema.metadata.version,
            last_updated=schema.metadata.last_updated,
        )

        tasks: list[Task] = []
        for task_id, task_data in schema.tasks.items():
            # A bare "task_id:" line is a zero-duration milestone with no predecessors
            entry = task_data or TaskSchema()
            tasks.append(
                Task(
                    id=str(task_id),
                    duration=entry.duration,
                    predecessors=set(entry.predecessors),
                    declared_start_date=entry.start_date,
                    is_group=entry.group,
                    name=entry.name or "",
                    parent_id=entry.parent,
                )
            )

        return Project(metadata=metadata, tasks=tasks)
