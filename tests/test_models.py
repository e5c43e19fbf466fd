"""Tests for data models."""

import pytest

from critpath.models import Task


class TestTask:
    """Test the Task dataclass."""

    def test_predecessors_normalized_to_set(self) -> None:
        task = Task(id="t", duration=1, predecessors=["a", "b", "a"])  # type: ignore[arg-type]

        assert task.predecessors == {"a", "b"}

    def test_name_defaults_to_id(self) -> None:
        assert Task(id="t").name == "t"
        assert Task(id="t", name="Title").name == "Title"

    def test_negative_duration_rejected(self) -> None:
        with pytest.raises(ValueError, match="negative duration"):
            Task(id="t", duration=-2)

    def test_milestone(self) -> None:
        assert Task(id="m").is_milestone
        assert not Task(id="w", duration=1).is_milestone
        assert not Task(id="g", is_group=True).is_milestone
