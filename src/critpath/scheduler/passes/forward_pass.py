"""Forward pass: earliest start and finish times."""

from collections import deque

from critpath.exceptions import StructuralInvariantViolation
from critpath.logger import debug_enabled, get_logger

from ..core import ForwardPassResult
from ..cycles import find_cycle
from ..graph import TaskGraph

logger = get_logger()


class ForwardPass:
    """Computes earliest times by walking the graph from its start tasks.

    A task is finalized only after all of its predecessors are. Each task
    keeps a count of unfinalized predecessors and enters the worklist when
    that count reaches zero, so every task is finalized once and total work is
    bounded by the number of edges.
    """

    def run(self, graph: TaskGraph) -> ForwardPassResult:
        """Run the forward pass over a scheduling view.

        Args:
            graph: Graph restricted to schedulable (non-group) tasks

        Returns:
            ForwardPassResult with earliest times and the project duration

        Raises:
            StructuralInvariantViolation: If some task can never be finalized
        """
        remaining = {task_id: len(preds) for task_id, preds in graph.predecessors_of.items()}
        queue = deque(graph.start_tasks())
        early_start: dict[str, int] = {}
        early_finish: dict[str, int] = {}
        debug = debug_enabled()

        while queue:
            task_id = queue.popleft()
            start = max(
                (early_finish[pred_id] for pred_id in graph.predecessors_of[task_id]),
                default=0,
            )
            early_start[task_id] = start
            early_finish[task_id] = start + graph.tasks[task_id].duration
            if debug:
                logger.debug(f"    forward {task_id}: ES={start} EF={early_finish[task_id]}")

            for succ_id in sorted(graph.successors_of[task_id]):
                remaining[succ_id] -= 1
                if remaining[succ_id] == 0:
                    queue.append(succ_id)

        if len(early_start) != len(graph):
            stalled = [task_id for task_id in graph.nodes if task_id not in early_start]
            raise StructuralInvariantViolation(
                f"Forward pass stalled on {len(stalled)} task(s): {', '.join(stalled)}",
                task_ids=stalled,
                cycle=find_cycle(graph.successors_of),
            )

        project_duration = max(
            (early_finish[task_id] for task_id in graph.sink_tasks()),
            default=0,
        )
        logger.changes(f"Project duration: {project_duration} days")

        return ForwardPassResult(
            early_start=early_start,
            early_finish=early_finish,
            project_duration=project_duration,
        )
