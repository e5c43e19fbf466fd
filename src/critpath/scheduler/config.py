"""Configuration classes for the scheduling engine."""

from datetime import date

from pydantic import BaseModel


class SchedulingConfig(BaseModel):
    """Configuration for scheduling runs."""

    # Calendar anchor for day 0; defaults to the earliest declared start date
    project_start: date | None = None

    # Group tasks appear in output unscheduled; set False to omit them
    include_groups_in_output: bool = True

    # Report predecessor IDs that match no task in the result warnings
    warn_on_dangling: bool = True
