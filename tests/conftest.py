"""Pytest configuration and helpers for critpath tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from critpath import context
from critpath.logger import reset_logger
from critpath.models import Task


def make_task(task_id: str, duration: int = 0, *predecessors: str, **kwargs: object) -> Task:
    """Create a Task with positional predecessors.

    Example:
        make_task("b", 2, "a")  # b takes 2 days and depends on a
    """
    return Task(id=task_id, duration=duration, predecessors=set(predecessors), **kwargs)  # type: ignore[arg-type]


def abc_tasks() -> list[Task]:
    """A(3) feeding B(2) and C(5): project duration 8, A and C critical."""
    return [
        make_task("A", 3),
        make_task("B", 2, "A"),
        make_task("C", 5, "A"),
    ]


def by_id(scheduled: list) -> dict:  # type: ignore[type-arg]
    """Index scheduled tasks by task ID."""
    return {st.task_id: st for st in scheduled}


@pytest.fixture(autouse=True)
def clean_state() -> Iterator[None]:
    """Reset logger and CLI context between tests."""
    reset_logger()
    context.reset_context()
    yield
    reset_logger()
    context.reset_context()


@pytest.fixture
def fixtures_dir() -> Path:
    """Get the fixtures directory."""
    return Path(__file__).parent / "fixtures"
