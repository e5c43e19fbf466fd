"""Tests for writing dependency edits back to YAML."""

from pathlib import Path

import pytest

from critpath.loader import load_project
from critpath.writer import remove_dependency, write_dependency

PROJECT = """\
# Launch plan
metadata:
  name: Launch
tasks:
  design:
    duration: 3  # days
  build:
    duration: 2
    predecessors: [design]
  docs:
    duration: 5
    predecessors: design
  launch:
"""


@pytest.fixture
def project_file(tmp_path: Path) -> Path:
    path = tmp_path / "project.yaml"
    path.write_text(PROJECT)
    return path


class TestWriteDependency:
    """Test write_dependency."""

    def test_append_to_list(self, project_file: Path) -> None:
        assert write_dependency(project_file, "docs", "build")

        build = load_project(project_file).get_task_by_id("build")
        assert build is not None
        assert build.predecessors == {"design", "docs"}

    def test_scalar_becomes_list(self, project_file: Path) -> None:
        assert write_dependency(project_file, "build", "docs")

        docs = load_project(project_file).get_task_by_id("docs")
        assert docs is not None
        assert docs.predecessors == {"design", "build"}

    def test_new_predecessors_key(self, project_file: Path) -> None:
        assert write_dependency(project_file, "design", "launch")

        launch = load_project(project_file).get_task_by_id("launch")
        assert launch is not None
        assert launch.predecessors == {"design"}

    def test_existing_edge_unchanged(self, project_file: Path) -> None:
        assert not write_dependency(project_file, "design", "build")
        assert not write_dependency(project_file, "design", "docs")
        assert project_file.read_text() == PROJECT

    def test_comments_preserved(self, project_file: Path) -> None:
        write_dependency(project_file, "docs", "build")
        content = project_file.read_text()

        assert "# Launch plan" in content
        assert "# days" in content

    def test_unknown_target(self, project_file: Path) -> None:
        with pytest.raises(ValueError, match="Task 'ghost' not found"):
            write_dependency(project_file, "design", "ghost")

    def test_missing_tasks_section(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("metadata:\n  name: x\n")

        with pytest.raises(ValueError, match="No 'tasks' section"):
            write_dependency(path, "a", "b")


class TestRemoveDependency:
    """Test remove_dependency."""

    def test_remove_from_list(self, project_file: Path) -> None:
        assert remove_dependency(project_file, "design", "build")

        build = load_project(project_file).get_task_by_id("build")
        assert build is not None
        assert build.predecessors == set()

    def test_remove_scalar(self, project_file: Path) -> None:
        assert remove_dependency(project_file, "design", "docs")

        docs = load_project(project_file).get_task_by_id("docs")
        assert docs is not None
        assert docs.predecessors == set()

    def test_remove_missing(self, project_file: Path) -> None:
        assert not remove_dependency(project_file, "docs", "build")
        assert not remove_dependency(project_file, "docs", "launch")
