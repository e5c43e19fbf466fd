"""critpath - task dependency graph and Critical Path Method scheduling."""

from .exceptions import CritpathError, StructuralInvariantViolation, UnknownTaskError
from .models import Project, ProjectMetadata, Task
from .scheduler import (
    DependencyGate,
    DependencyOutcome,
    DependencyProposal,
    ScheduledTask,
    ScheduleResult,
    SchedulingConfig,
    propose_dependency,
    reschedule_all,
)

__version__ = "0.1.0"

__all__ = [
    "CritpathError",
    "DependencyGate",
    "DependencyOutcome",
    "DependencyProposal",
    "Project",
    "ProjectMetadata",
    "ScheduleResult",
    "ScheduledTask",
    "SchedulingConfig",
    "StructuralInvariantViolation",
    "Task",
    "UnknownTaskError",
    "propose_dependency",
    "reschedule_all",
]
