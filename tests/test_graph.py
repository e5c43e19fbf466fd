"""Tests for task graph construction."""

from critpath.scheduler import TaskGraph
from tests.conftest import abc_tasks, make_task


class TestTaskGraph:
    """Test TaskGraph.build and its queries."""

    def test_inverts_predecessors(self) -> None:
        """Successor map is the inverse of the predecessor sets."""
        graph = TaskGraph.build(abc_tasks())

        assert graph.predecessors_of == {"A": set(), "B": {"A"}, "C": {"A"}}
        assert graph.successors_of == {"A": {"B", "C"}, "B": set(), "C": set()}

    def test_start_and_sink_tasks(self) -> None:
        """Start tasks have no predecessors, sinks have no successors."""
        graph = TaskGraph.build(abc_tasks())

        assert graph.start_tasks() == ["A"]
        assert graph.sink_tasks() == ["B", "C"]

    def test_dangling_reference_dropped(self) -> None:
        """Unknown predecessor IDs are recorded but produce no edge."""
        graph = TaskGraph.build([make_task("D", 4, "ghost-id")])

        assert graph.predecessors_of["D"] == set()
        assert "ghost-id" not in graph.successors_of
        assert graph.dangling == [("D", "ghost-id")]

    def test_self_reference_dropped(self) -> None:
        """A task listing itself gets no self loop."""
        graph = TaskGraph.build([make_task("X", 1, "X")])

        assert graph.predecessors_of["X"] == set()
        assert graph.successors_of["X"] == set()
        assert graph.dangling == [("X", "X")]

    def test_has_edge(self) -> None:
        """has_edge follows predecessor direction (source -> target)."""
        graph = TaskGraph.build(abc_tasks())

        assert graph.has_edge("A", "B")
        assert not graph.has_edge("B", "A")
        assert not graph.has_edge("A", "missing")

    def test_edges_sorted(self) -> None:
        """edges() lists (predecessor, successor) pairs in sorted order."""
        graph = TaskGraph.build(abc_tasks())

        assert graph.edges() == [("A", "B"), ("A", "C")]

    def test_nodes_keep_input_order(self) -> None:
        """Nodes come out in input order, groups included."""
        tasks = [make_task("z", 1), make_task("g", is_group=True), make_task("a", 1)]
        graph = TaskGraph.build(tasks)

        assert graph.nodes == ["z", "g", "a"]
        assert len(graph) == 3
        assert "g" in graph


class TestSchedulingView:
    """Test restriction of the graph to schedulable tasks."""

    def test_groups_removed(self) -> None:
        """Group nodes and their edges are dropped from the view."""
        tasks = [
            make_task("phase", is_group=True),
            make_task("a", 2, "phase"),
            make_task("b", 3, "a"),
        ]
        view = TaskGraph.build(tasks).scheduling_view()

        assert view.nodes == ["a", "b"]
        assert view.predecessors_of == {"a": set(), "b": {"a"}}
        assert view.successors_of == {"a": {"b"}, "b": set()}

    def test_view_does_not_modify_original(self) -> None:
        """Building the view leaves the full graph intact."""
        tasks = [make_task("phase", is_group=True), make_task("a", 2, "phase")]
        graph = TaskGraph.build(tasks)
        graph.scheduling_view()

        assert graph.successors_of["phase"] == {"a"}
