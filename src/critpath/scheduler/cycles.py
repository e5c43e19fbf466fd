"""Cycle detection over the successor map.

All traversals are iterative with a single shared visited set, so deep chains
cannot exhaust the stack and no node is expanded twice.
"""

from collections import deque
from collections.abc import Mapping, Set

from critpath.logger import get_logger

logger = get_logger()

SuccessorMap = Mapping[str, Set[str]]

_ON_PATH = 1
_DONE = 2


def find_cycle_path(successors_of: SuccessorMap, source: str, target: str) -> list[str] | None:
    """Return the loop that edge ``source -> target`` would close, or None.

    The edge means ``target`` depends on ``source``. It closes a loop iff
    ``source`` is already reachable from ``target`` along successor edges.
    The returned path starts and ends at ``source``:
    ``[source, target, ..., source]``. A self edge yields ``[source, source]``.
    """
    if source == target:
        return [source, source]

    parents: dict[str, str] = {}
    visited = {target}
    queue = deque([target])

    while queue:
        current = queue.popleft()
        if current == source:
            path = [current]
            while current != target:
                current = parents[current]
                path.append(current)
            path.reverse()
            return [source, *path]

        for succ_id in sorted(successors_of.get(current, ())):
            if succ_id not in visited:
                visited.add(succ_id)
                parents[succ_id] = current
                queue.append(succ_id)

    return None


def would_create_cycle(successors_of: SuccessorMap, source: str, target: str) -> bool:
    """Check whether adding edge ``source -> target`` would create a cycle.

    Does not modify ``successors_of``. Runs in O(V + E).
    """
    cycle = find_cycle_path(successors_of, source, target)
    if cycle:
        logger.checks(f"  Edge {source} -> {target} closes loop {' -> '.join(cycle)}")
        return True
    logger.checks(f"  Edge {source} -> {target} is acyclic")
    return False


def find_cycle(successors_of: SuccessorMap) -> list[str] | None:
    """Find any existing cycle in a full graph.

    Iterative depth-first search with three-state marking. Returns the cycle
    as a closed path (first node repeated at the end) or None for a DAG.
    """
    state: dict[str, int] = {}

    for root in sorted(successors_of):
        if root in state:
            continue

        state[root] = _ON_PATH
        path = [root]
        stack = [iter(sorted(successors_of.get(root, ())))]

        while stack:
            for child in stack[-1]:
                child_state = state.get(child)
                if child_state == _ON_PATH:
                    return [*path[path.index(child) :], child]
                if child_state is None:
                    state[child] = _ON_PATH
                    path.append(child)
                    stack.append(iter(sorted(successors_of.get(child, ()))))
                    break
            else:
                # Children exhausted
                stack.pop()
                state[path.pop()] = _DONE

    return None
