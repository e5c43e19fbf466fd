"""Project loading with config discovery and reference validation."""

from __future__ import annotations

from pathlib import Path

from . import context
from .config import DEFAULT_CONFIG_NAME, ProjectConfig, load_config
from .exceptions import MissingReferenceError
from .models import Project
from .parser import ProjectParser


def discover_config(
    project_path: Path | str,
    config_path: Path | None = None,
) -> ProjectConfig | None:
    """Discover config from various locations.

    Search order:
    1. Explicit config_path argument
    2. Global context (set via CLI --config)
    3. Project file directory / critpath_config.yaml
    4. Current directory / critpath_config.yaml
    """
    if config_path and config_path.exists():
        return load_config(config_path)

    ctx_config = context.get_config_path()
    if ctx_config and ctx_config.exists():
        return load_config(ctx_config)

    dir_config = Path(project_path).parent / DEFAULT_CONFIG_NAME
    if dir_config.exists():
        return load_config(dir_config)

    cwd_config = Path(DEFAULT_CONFIG_NAME)
    if cwd_config.exists():
        return load_config(cwd_config)

    return None


def load_project(path: Path | str) -> Project:
    """Parse and validate a project file.

    Predecessor references are not validated: unknown IDs are dangling
    references and are ignored by the scheduler. Cycles are not checked here
    either; scheduling a cyclic project raises StructuralInvariantViolation.
    """
    project = ProjectParser().parse_file(path)
    validate_project(project)
    return project


def validate_project(project: Project) -> None:
    """Validate that every parent reference names an existing group task."""
    for task in project.tasks:
        if task.parent_id is None:
            continue
        parent = project.get_task_by_id(task.parent_id)
        if parent is None:
            raise MissingReferenceError(
                f"Task {task.id} has unknown parent: {task.parent_id}"
            )
        if not parent.is_group:
            raise MissingReferenceError(
                f"Task {task.id} has parent {task.parent_id}, which is not a group"
            )
