"""Critical path classification from forward and backward pass results."""

from critpath.exceptions import StructuralInvariantViolation
from critpath.logger import checks_enabled, get_logger

from .core import BackwardPassResult, Classification, ForwardPassResult
from .graph import TaskGraph

logger = get_logger()


def classify(
    graph: TaskGraph,
    forward: ForwardPassResult,
    backward: BackwardPassResult,
) -> Classification:
    """Derive float per task, critical tasks, and critical edges.

    An edge is critical only when both endpoints are critical and the edge is
    tight (the predecessor's early finish equals the successor's early start).
    A critical task with several critical-looking predecessors is bound by just
    the tight ones.

    Raises:
        StructuralInvariantViolation: If any task has negative float
    """
    total_float: dict[str, int] = {}
    negative: list[str] = []

    for task_id in graph.nodes:
        slack = backward.late_start[task_id] - forward.early_start[task_id]
        if slack < 0:
            negative.append(task_id)
        total_float[task_id] = slack

    if negative:
        details = ", ".join(f"{task_id}={total_float[task_id]}" for task_id in negative)
        raise StructuralInvariantViolation(
            f"Negative float observed: {details}",
            task_ids=negative,
        )

    critical_tasks = {task_id for task_id, slack in total_float.items() if slack == 0}
    if checks_enabled():
        logger.checks(f"  Critical tasks: {', '.join(sorted(critical_tasks)) or 'none'}")

    critical_edges = [
        (pred_id, succ_id)
        for pred_id, succ_id in graph.edges()
        if pred_id in critical_tasks
        and succ_id in critical_tasks
        and forward.early_finish[pred_id] == forward.early_start[succ_id]
    ]

    logger.checks(
        f"  {len(critical_tasks)} critical task(s), {len(critical_edges)} critical edge(s)"
    )

    return Classification(
        total_float=total_float,
        critical_tasks=critical_tasks,
        critical_edges=critical_edges,
    )
