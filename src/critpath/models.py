"""Data models for critpath."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date


def _default_id_set() -> set[str]:
    return set()


@dataclass
class Task:
    """A unit of scheduled work.

    ``predecessors`` holds the IDs of tasks that must finish before this one can
    start. Durations are whole days; a duration of 0 marks a milestone. Group
    tasks are containers and are never scheduled themselves.
    """

    id: str
    duration: int = 0
    predecessors: set[str] = field(default_factory=_default_id_set)
    declared_start_date: date | None = None  # Advisory; anchors the calendar only
    is_group: bool = False
    name: str = ""
    parent_id: str | None = None

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"Task '{self.id}' has negative duration {self.duration}")
        # Accept any iterable (lists from YAML, tuples in tests); duplicates collapse
        self.predecessors = set(self.predecessors)
        if not self.name:
            self.name = self.id

    @property
    def is_milestone(self) -> bool:
        """True for zero-duration work tasks."""
        return self.duration == 0 and not self.is_group


@dataclass
class ProjectMetadata:
    """Metadata for a project file."""

    name: str | None = None
    version: str = "1.0"
    last_updated: str | None = None


@dataclass
class Project:
    """A project: metadata plus its flat task list."""

    metadata: ProjectMetadata
    tasks: list[Task]

    def get_task_by_id(self, task_id: str) -> Task | None:
        """Get a task by its ID."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def get_children(self, group_id: str) -> list[Task]:
        """Get tasks whose parent is the given group."""
        return [task for task in self.tasks if task.parent_id == group_id]


def index_tasks(tasks: Iterable[Task]) -> dict[str, Task]:
    """Map task ID to task, keeping the last task for a repeated ID."""
    return {task.id: task for task in tasks}
