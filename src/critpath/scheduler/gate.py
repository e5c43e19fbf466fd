"""Dependency mutation gate: the single entry point for new edges."""

from collections.abc import Iterable

from critpath.exceptions import UnknownTaskError
from critpath.logger import get_logger
from critpath.models import Task, index_tasks

from .config import SchedulingConfig
from .core import DependencyOutcome, DependencyProposal, ScheduleResult
from .cycles import find_cycle_path
from .graph import TaskGraph
from .service import SchedulingService

logger = get_logger()


class DependencyGate:
    """Validates and applies dependency edits on a caller-owned task list.

    The gate mutates the given Task objects in place and marks the schedule
    stale after any edge change. It takes no locks: callers must serialize
    mutations per project and construct (or reuse) the gate only after
    acquiring that serialization, so the cycle check always sees the current
    graph.
    """

    def __init__(self, tasks: Iterable[Task]):
        """Initialize the gate over the current task list.

        Args:
            tasks: Tasks to guard. Edits are applied to these objects.
        """
        self.tasks = list(tasks)
        self.stale = False

    def _require(self, task_id: str) -> Task:
        task = index_tasks(self.tasks).get(task_id)
        if task is None:
            raise UnknownTaskError(task_id)
        return task

    def propose_dependency(self, source: str, target: str) -> DependencyProposal:
        """Propose that ``target`` depends on ``source``.

        Rejections are return values, not exceptions: a CYCLE outcome means the
        edge was not applied and the user should be told why.

        Args:
            source: Predecessor task ID
            target: Task ID that would depend on ``source``

        Returns:
            DependencyProposal with ACCEPTED, DUPLICATE, or CYCLE outcome

        Raises:
            UnknownTaskError: If either ID is not a task in the list
        """
        self._require(source)
        target_task = self._require(target)

        logger.checks(f"Checking dependency {source} -> {target}")

        # Check against the current graph, never a cached one
        cycle = find_cycle_path(TaskGraph.build(self.tasks).successors_of, source, target)
        if cycle:
            logger.checks(f"  Rejected: {' -> '.join(cycle)}")
            return DependencyProposal(
                outcome=DependencyOutcome.CYCLE,
                source=source,
                target=target,
                cycle_path=cycle,
            )

        if source in target_task.predecessors:
            logger.checks(f"  {target} already depends on {source}")
            return DependencyProposal(
                outcome=DependencyOutcome.DUPLICATE, source=source, target=target
            )

        target_task.predecessors.add(source)
        self.stale = True
        logger.changes(f"Added dependency {source} -> {target}")
        return DependencyProposal(outcome=DependencyOutcome.ACCEPTED, source=source, target=target)

    def remove_dependency(self, source: str, target: str) -> bool:
        """Remove edge ``source -> target``.

        Removing an edge can never create a cycle, so no check is needed.

        Returns:
            True if the edge existed and was removed
        """
        target_task = self._require(target)
        if source not in target_task.predecessors:
            return False
        target_task.predecessors.discard(source)
        self.stale = True
        logger.changes(f"Removed dependency {source} -> {target}")
        return True

    def eligible_predecessors(self, task_id: str) -> list[str]:
        """List tasks that could become predecessors of ``task_id``.

        Excludes the task itself, its current predecessors, and every task
        that already depends on it directly or transitively.
        """
        task = self._require(task_id)
        graph = TaskGraph.build(self.tasks)

        # Everything reachable from task_id along successor edges would close a loop
        blocked = {task_id}
        frontier = [task_id]
        while frontier:
            current = frontier.pop()
            for succ_id in graph.successors_of[current]:
                if succ_id not in blocked:
                    blocked.add(succ_id)
                    frontier.append(succ_id)

        return [
            candidate.id
            for candidate in self.tasks
            if candidate.id not in blocked and candidate.id not in task.predecessors
        ]

    def reschedule_all(self, config: SchedulingConfig | None = None) -> ScheduleResult:
        """Reschedule the guarded task list and clear the stale flag."""
        result = SchedulingService(self.tasks, config).schedule()
        self.stale = False
        return result


def propose_dependency(tasks: Iterable[Task], source: str, target: str) -> DependencyProposal:
    """Propose edge ``source -> target`` on a task list, applying it if accepted."""
    return DependencyGate(tasks).propose_dependency(source, target)
