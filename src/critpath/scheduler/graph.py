"""Adjacency representation of the task dependency graph."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from critpath.logger import get_logger
from critpath.models import Task, index_tasks

logger = get_logger()


def _default_edge_list() -> list[tuple[str, str]]:
    return []


@dataclass
class TaskGraph:
    """Predecessor and successor maps built from a flat task list.

    Every task is a node. ``predecessors_of`` and ``successors_of`` only hold
    edges whose endpoints are both present; references to unknown tasks are
    recorded in ``dangling`` as ``(task_id, missing_id)`` pairs and otherwise
    ignored. Self references are dropped the same way.
    """

    tasks: dict[str, Task]
    predecessors_of: dict[str, set[str]]
    successors_of: dict[str, set[str]]
    dangling: list[tuple[str, str]] = field(default_factory=_default_edge_list)

    @classmethod
    def build(cls, tasks: Iterable[Task]) -> "TaskGraph":
        """Build the graph by inverting each task's ``predecessors`` set."""
        task_map = index_tasks(tasks)
        predecessors_of: dict[str, set[str]] = {task_id: set() for task_id in task_map}
        successors_of: dict[str, set[str]] = {task_id: set() for task_id in task_map}
        dangling: list[tuple[str, str]] = []

        for task_id, task in task_map.items():
            for pred_id in sorted(task.predecessors):
                if pred_id == task_id:
                    logger.checks(f"  Ignoring self reference on {task_id}")
                    dangling.append((task_id, pred_id))
                    continue
                if pred_id not in task_map:
                    logger.checks(f"  Ignoring dangling predecessor {pred_id} of {task_id}")
                    dangling.append((task_id, pred_id))
                    continue
                predecessors_of[task_id].add(pred_id)
                successors_of[pred_id].add(task_id)

        return cls(
            tasks=task_map,
            predecessors_of=predecessors_of,
            successors_of=successors_of,
            dangling=dangling,
        )

    def scheduling_view(self) -> "TaskGraph":
        """Restrict the graph to non-group tasks.

        Group tasks are structural, so edges into or out of them carry no
        scheduling constraint and are dropped along with the group nodes.
        """
        work = {task_id: task for task_id, task in self.tasks.items() if not task.is_group}
        return TaskGraph(
            tasks=work,
            predecessors_of={
                task_id: {p for p in self.predecessors_of[task_id] if p in work}
                for task_id in work
            },
            successors_of={
                task_id: {s for s in self.successors_of[task_id] if s in work} for task_id in work
            },
            dangling=list(self.dangling),
        )

    @property
    def nodes(self) -> list[str]:
        """Task IDs in input order."""
        return list(self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self.tasks

    def has_edge(self, source: str, target: str) -> bool:
        """True if ``target`` already depends on ``source``."""
        return source in self.predecessors_of.get(target, ())

    def start_tasks(self) -> list[str]:
        """Tasks with no predecessors, sorted by ID."""
        return sorted(task_id for task_id, preds in self.predecessors_of.items() if not preds)

    def sink_tasks(self) -> list[str]:
        """Tasks with no successors, sorted by ID."""
        return sorted(task_id for task_id, succs in self.successors_of.items() if not succs)

    def edges(self) -> list[tuple[str, str]]:
        """All ``(predecessor, successor)`` edges, sorted."""
        return sorted(
            (pred_id, task_id)
            for task_id, preds in self.predecessors_of.items()
            for pred_id in preds
        )
