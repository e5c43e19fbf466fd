"""High-level scheduling service."""

from collections.abc import Iterable
from datetime import date

from critpath.logger import get_logger
from critpath.models import Task

from .classifier import classify
from .config import SchedulingConfig
from .core import ScheduledTask, ScheduleResult
from .graph import TaskGraph
from .passes import BackwardPass, ForwardPass

logger = get_logger()


class SchedulingService:
    """Runs the full CPM pipeline over a task list.

    This service coordinates:
    - TaskGraph (built fresh from the task list on every run)
    - ForwardPass and BackwardPass
    - Critical path classification

    It keeps no state between runs; the task list is read, never modified.
    """

    def __init__(self, tasks: Iterable[Task], config: SchedulingConfig | None = None):
        """Initialize scheduling service.

        Args:
            tasks: Current task list, each task carrying its predecessor IDs
            config: Optional scheduling configuration
        """
        self.tasks = list(tasks)
        self.config = config or SchedulingConfig()

    def _resolve_project_start(self) -> date | None:
        """Explicit configured start, else the earliest declared start date."""
        if self.config.project_start is not None:
            return self.config.project_start
        declared = [
            task.declared_start_date
            for task in self.tasks
            if task.declared_start_date is not None and not task.is_group
        ]
        return min(declared) if declared else None

    def schedule(self) -> ScheduleResult:
        """Schedule all tasks.

        Returns:
            ScheduleResult with one ScheduledTask per input task, in input order

        Raises:
            StructuralInvariantViolation: If the dependency graph is not a DAG
        """
        graph = TaskGraph.build(self.tasks)
        view = graph.scheduling_view()

        forward = ForwardPass().run(view)
        backward = BackwardPass().run(view, forward)
        classification = classify(view, forward, backward)

        scheduled_tasks: list[ScheduledTask] = []
        for task in self.tasks:
            if task.is_group:
                if self.config.include_groups_in_output:
                    scheduled_tasks.append(ScheduledTask(task=task))
                continue

            task_id = task.id
            scheduled_tasks.append(
                ScheduledTask(
                    task=task,
                    early_start=forward.early_start[task_id],
                    early_finish=forward.early_finish[task_id],
                    late_start=backward.late_start[task_id],
                    late_finish=backward.late_finish[task_id],
                    total_float=classification.total_float[task_id],
                    is_critical=task_id in classification.critical_tasks,
                )
            )

        warnings: list[str] = []
        if self.config.warn_on_dangling:
            for task_id, missing_id in graph.dangling:
                if task_id == missing_id:
                    warnings.append(f"Task '{task_id}' lists itself as a predecessor - ignored")
                else:
                    warnings.append(
                        f"Task '{task_id}' references unknown predecessor '{missing_id}' - ignored"
                    )

        return ScheduleResult(
            scheduled_tasks=scheduled_tasks,
            project_duration=forward.project_duration,
            critical_edges=classification.critical_edges,
            project_start=self._resolve_project_start(),
            warnings=warnings,
        )


def reschedule_all(
    tasks: Iterable[Task], config: SchedulingConfig | None = None
) -> list[ScheduledTask]:
    """Recompute every derived scheduling field for the task list.

    The only way ScheduledTask values are produced. Call after any task or
    edge mutation.
    """
    return SchedulingService(tasks, config).schedule().scheduled_tasks
