"""Forward and backward CPM passes."""

from .backward_pass import BackwardPass
from .forward_pass import ForwardPass

__all__ = ["BackwardPass", "ForwardPass"]
