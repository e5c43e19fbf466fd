"""Core dataclasses for the scheduling engine."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum

from critpath.models import Task


def _default_str_list() -> list[str]:
    return []


def _default_edge_list() -> list[tuple[str, str]]:
    return []


@dataclass
class ScheduledTask:
    """A task enriched with CPM results.

    Times are elapsed days from project start (day 0). Group tasks are carried
    through unscheduled: every derived field is None and ``is_critical`` is False.
    """

    task: Task
    early_start: int | None = None
    early_finish: int | None = None
    late_start: int | None = None
    late_finish: int | None = None
    total_float: int | None = None  # late_start - early_start
    is_critical: bool = False

    @property
    def task_id(self) -> str:
        return self.task.id

    @property
    def is_scheduled(self) -> bool:
        return self.early_start is not None


@dataclass
class ForwardPassResult:
    """Earliest times from the forward pass."""

    early_start: dict[str, int]
    early_finish: dict[str, int]
    project_duration: int


@dataclass
class BackwardPassResult:
    """Latest times from the backward pass."""

    late_start: dict[str, int]
    late_finish: dict[str, int]


@dataclass
class Classification:
    """Float and criticality derived from both passes."""

    total_float: dict[str, int]
    critical_tasks: set[str]
    critical_edges: list[tuple[str, str]]  # (predecessor, successor), sorted


@dataclass
class ScheduleResult:
    """Complete result of a scheduling run."""

    scheduled_tasks: list[ScheduledTask]
    project_duration: int
    critical_edges: list[tuple[str, str]] = field(default_factory=_default_edge_list)
    project_start: date | None = None
    warnings: list[str] = field(default_factory=_default_str_list)

    def get(self, task_id: str) -> ScheduledTask | None:
        """Get the scheduled entry for a task ID."""
        for scheduled in self.scheduled_tasks:
            if scheduled.task_id == task_id:
                return scheduled
        return None

    @property
    def critical_tasks(self) -> list[ScheduledTask]:
        return [st for st in self.scheduled_tasks if st.is_critical]

    def critical_path(self) -> list[str]:
        """Return one chain of critical edges from a start task to a sink task.

        Starts at the critical start task with the lowest ID and follows the
        lowest-ID critical edge at each step. The chain's durations sum to the
        project duration. Empty when nothing was scheduled.
        """
        by_id = {st.task_id: st for st in self.scheduled_tasks if st.is_scheduled}
        successors: dict[str, list[str]] = {}
        has_critical_pred: set[str] = set()
        for pred_id, succ_id in self.critical_edges:
            successors.setdefault(pred_id, []).append(succ_id)
            has_critical_pred.add(succ_id)

        starts = sorted(
            task_id
            for task_id, st in by_id.items()
            if st.is_critical and st.early_start == 0 and task_id not in has_critical_pred
        )
        if not starts:
            return []

        chain = [starts[0]]
        while chain[-1] in successors:
            chain.append(min(successors[chain[-1]]))
        return chain

    def dates_for(self, task_id: str) -> tuple[date, date] | None:
        """Calendar (start, finish) for a task's early times, if anchored."""
        scheduled = self.get(task_id)
        if (
            self.project_start is None
            or scheduled is None
            or scheduled.early_start is None
            or scheduled.early_finish is None
        ):
            return None
        return (
            self.project_start + timedelta(days=scheduled.early_start),
            self.project_start + timedelta(days=scheduled.early_finish),
        )


class DependencyOutcome(str, Enum):
    """Outcome of proposing a new dependency edge."""

    ACCEPTED = "accepted"
    DUPLICATE = "duplicate"  # Already present; successful no-op
    CYCLE = "cycle"  # Rejected; the edge would close a loop


@dataclass
class DependencyProposal:
    """Result of a dependency proposal.

    ``cycle_path`` is set for CYCLE outcomes and lists the loop the edge would
    have closed, starting and ending at ``source``.
    """

    outcome: DependencyOutcome
    source: str
    target: str
    cycle_path: list[str] | None = None

    @property
    def accepted(self) -> bool:
        return self.outcome == DependencyOutcome.ACCEPTED

    @property
    def ok(self) -> bool:
        """True unless the edge was rejected."""
        return self.outcome != DependencyOutcome.CYCLE

    @property
    def message(self) -> str:
        if self.outcome == DependencyOutcome.CYCLE:
            loop = " -> ".join(self.cycle_path or [self.source, self.target])
            return f"Cannot add {self.source} -> {self.target}: circular dependency ({loop})"
        if self.outcome == DependencyOutcome.DUPLICATE:
            return f"{self.target} already depends on {self.source}"
        return f"{self.target} now depends on {self.source}"
