"""Custom exceptions for critpath."""

from __future__ import annotations

from collections.abc import Iterable


class CritpathError(Exception):
    """Base exception for all critpath errors."""

    pass


class ValidationError(CritpathError):
    """Raised when validation fails."""

    pass


class MissingReferenceError(ValidationError):
    """Raised when a referenced ID does not exist."""

    pass


class UnknownTaskError(ValidationError):
    """Raised when a dependency operation names a task that is not in the project."""

    def __init__(self, task_id: str):
        super().__init__(f"Unknown task: {task_id}")
        self.task_id = task_id


class ParseError(CritpathError):
    """Raised when YAML parsing fails."""

    pass


class StructuralInvariantViolation(CritpathError):
    """Raised when the dependency graph is not a DAG at scheduling time.

    This means an edge reached storage without going through the dependency
    gate. The schedule cannot be trusted and no partial result is returned.
    """

    def __init__(
        self,
        message: str,
        task_ids: Iterable[str] = (),
        cycle: list[str] | None = None,
    ):
        self.task_ids = sorted(task_ids)
        self.cycle = cycle
        if cycle:
            message = f"{message} (cycle: {' -> '.join(cycle)})"
        super().__init__(message)
