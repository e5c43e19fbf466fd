"""Scheduler package - Critical Path Method scheduling.

This package provides:
- TaskGraph: predecessor/successor maps built from a flat task list
- Cycle detection for proposed edges
- Forward and backward passes
- Critical path classification of tasks and edges
- DependencyGate: the only path by which new edges enter a task list

Main entry points:
- reschedule_all / SchedulingService: task list in, scheduled tasks out
- propose_dependency / DependencyGate: validate and apply a new edge
"""

from .classifier import classify
from .config import SchedulingConfig
from .core import (
    BackwardPassResult,
    Classification,
    DependencyOutcome,
    DependencyProposal,
    ForwardPassResult,
    ScheduledTask,
    ScheduleResult,
)
from .cycles import find_cycle, find_cycle_path, would_create_cycle
from .gate import DependencyGate, propose_dependency
from .graph import TaskGraph
from .passes import BackwardPass, ForwardPass
from .service import SchedulingService, reschedule_all

__all__ = [
    # Core dataclasses
    "ScheduledTask",
    "ScheduleResult",
    "ForwardPassResult",
    "BackwardPassResult",
    "Classification",
    "DependencyOutcome",
    "DependencyProposal",
    # Configuration
    "SchedulingConfig",
    # Graph and cycle detection
    "TaskGraph",
    "find_cycle",
    "find_cycle_path",
    "would_create_cycle",
    # Passes and classification
    "ForwardPass",
    "BackwardPass",
    "classify",
    # Entry points
    "SchedulingService",
    "reschedule_all",
    "DependencyGate",
    "propose_dependency",
]
