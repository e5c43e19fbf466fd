"""Backward pass: latest start and finish times."""

from collections import deque

from critpath.exceptions import StructuralInvariantViolation
from critpath.logger import debug_enabled, get_logger

from ..core import BackwardPassResult, ForwardPassResult
from ..cycles import find_cycle
from ..graph import TaskGraph

logger = get_logger()


class BackwardPass:
    """Computes latest times by walking back from the sink tasks.

    Sinks finish at the project duration. Any other task must finish before the
    earliest late start among its successors. Mirrors ForwardPass: a task is
    finalized once all of its successors are.
    """

    def run(self, graph: TaskGraph, forward: ForwardPassResult) -> BackwardPassResult:
        """Run the backward pass.

        Args:
            graph: The same scheduling view the forward pass ran on
            forward: Forward pass result (supplies the project duration)

        Returns:
            BackwardPassResult with latest times

        Raises:
            StructuralInvariantViolation: If some task is never reached from a sink
        """
        remaining = {task_id: len(succs) for task_id, succs in graph.successors_of.items()}
        queue = deque(graph.sink_tasks())
        late_start: dict[str, int] = {}
        late_finish: dict[str, int] = {}
        debug = debug_enabled()

        while queue:
            task_id = queue.popleft()
            finish = min(
                (late_start[succ_id] for succ_id in graph.successors_of[task_id]),
                default=forward.project_duration,
            )
            late_finish[task_id] = finish
            late_start[task_id] = finish - graph.tasks[task_id].duration
            if debug:
                logger.debug(f"    backward {task_id}: LS={late_start[task_id]} LF={finish}")

            for pred_id in sorted(graph.predecessors_of[task_id]):
                remaining[pred_id] -= 1
                if remaining[pred_id] == 0:
                    queue.append(pred_id)

        if len(late_start) != len(graph):
            # No default for unreached tasks; the graph is malformed
            stalled = [task_id for task_id in graph.nodes if task_id not in late_start]
            raise StructuralInvariantViolation(
                f"Backward pass stalled on {len(stalled)} task(s): {', '.join(stalled)}",
                task_ids=stalled,
                cycle=find_cycle(graph.successors_of),
            )

        return BackwardPassResult(late_start=late_start, late_finish=late_finish)
