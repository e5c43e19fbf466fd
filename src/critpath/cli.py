"""Command-line interface for critpath."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Annotated, Any

import typer

from . import context
from .config import ProjectConfig
from .exceptions import StructuralInvariantViolation, UnknownTaskError
from .loader import discover_config, load_project
from .logger import setup_logger
from .models import Project
from .scheduler import DependencyGate, DependencyOutcome, ScheduleResult, SchedulingService
from .writer import remove_dependency as remove_dependency_from_file
from .writer import write_dependency

app = typer.Typer(
    name="critpath",
    help="Critical Path Method scheduling for task dependency graphs",
    add_completion=False,
)

ProjectFile = Annotated[Path, typer.Argument(help="Path to the project YAML file")]


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show changes, 2=show all checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: critpath_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for critpath commands."""
    setup_logger(verbose)
    context.set_config_path(config)


def _parse_date_option(date_str: str | None, option_name: str) -> date | None:
    """Parse a YYYY-MM-DD date from a CLI option."""
    if date_str is None:
        return None

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        typer.echo(
            f"Error: Invalid date format '{date_str}' for --{option_name}. Use YYYY-MM-DD format.",
            err=True,
        )
        raise typer.Exit(1) from None


def _run_schedule(project: Project, config: ProjectConfig) -> ScheduleResult:
    """Schedule a project, turning structural violations into a CLI error."""
    try:
        return SchedulingService(project.tasks, config.scheduler).schedule()
    except StructuralInvariantViolation as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


def _echo_warnings(result: ScheduleResult) -> None:
    if result.warnings:
        typer.echo("\nWarnings:", err=True)
        for warning in result.warnings:
            typer.echo(f"  - {warning}", err=True)


def _display_schedule(result: ScheduleResult, config: ProjectConfig) -> None:
    """Display the CPM table to stdout."""
    show_dates = config.output.show_dates and result.project_start is not None
    marker = config.output.critical_marker

    typer.echo("Schedule Results")
    typer.echo("=" * 80)
    header = f"  {'Task':<24} {'Dur':>4} {'ES':>4} {'EF':>4} {'LS':>4} {'LF':>4} {'Float':>5}"
    if show_dates:
        header += f"  {'Start':<10}  {'Finish':<10}"
    typer.echo(header)

    for st in result.scheduled_tasks:
        label = st.task.name if st.task.name == st.task_id else f"{st.task.name} ({st.task_id})"
        if not st.is_scheduled:
            typer.echo(f"  {label:<24} (group)")
            continue
        flag = marker if st.is_critical else " "
        line = (
            f"{flag} {label:<24} {st.task.duration:>4} {st.early_start:>4} {st.early_finish:>4}"
            f" {st.late_start:>4} {st.late_finish:>4} {st.total_float:>5}"
        )
        dates = result.dates_for(st.task_id) if show_dates else None
        if dates:
            line += f"  {dates[0].isoformat()}  {dates[1].isoformat()}"
        typer.echo(line)

    typer.echo("")
    typer.echo(f"Project duration: {result.project_duration} days")
    if show_dates and result.project_start is not None:
        typer.echo(f"Project start: {result.project_start.isoformat()}")


def _schedule_to_dict(result: ScheduleResult) -> dict[str, Any]:
    """Convert a schedule result to a JSON-serializable dict."""
    return {
        "project_duration": result.project_duration,
        "project_start": result.project_start.isoformat() if result.project_start else None,
        "tasks": [
            {
                "id": st.task_id,
                "name": st.task.name,
                "duration": st.task.duration,
                "is_group": st.task.is_group,
                "early_start": st.early_start,
                "early_finish": st.early_finish,
                "late_start": st.late_start,
                "late_finish": st.late_finish,
                "float": st.total_float,
                "is_critical": st.is_critical,
            }
            for st in result.scheduled_tasks
        ],
        "critical_edges": [list(edge) for edge in result.critical_edges],
        "critical_path": result.critical_path(),
        "warnings": result.warnings,
    }


def _load(file: Path) -> tuple[Project, ProjectConfig]:
    project = load_project(file)
    config = discover_config(file) or ProjectConfig()
    return project, config


@app.command()
def schedule(
    file: ProjectFile = Path("project.yaml"),
    *,
    as_json: Annotated[bool, typer.Option("--json", help="Emit JSON instead of a table")] = False,
    project_start: Annotated[
        str | None,
        typer.Option(
            "--project-start",
            help="Calendar date for day 0 (YYYY-MM-DD). Overrides config and declared dates",
        ),
    ] = None,
) -> None:
    """Compute early/late times, float, and critical tasks."""
    parsed_start = _parse_date_option(project_start, "project-start")
    project, config = _load(file)
    if parsed_start is not None:
        config.scheduler.project_start = parsed_start

    result = _run_schedule(project, config)

    if as_json:
        typer.echo(json.dumps(_schedule_to_dict(result), indent=2))
    else:
        _display_schedule(result, config)
    _echo_warnings(result)


@app.command("critical-path")
def critical_path(file: ProjectFile = Path("project.yaml")) -> None:
    """Show the critical path and all critical edges."""
    project, config = _load(file)
    result = _run_schedule(project, config)

    chain = result.critical_path()
    if not chain:
        typer.echo("No scheduled tasks")
        return

    typer.echo(f"Critical path ({result.project_duration} days): {' -> '.join(chain)}")
    typer.echo("")
    typer.echo("Critical edges:")
    for pred_id, succ_id in result.critical_edges:
        typer.echo(f"  {pred_id} -> {succ_id}")


@app.command("add-dependency")
def add_dependency(
    file: ProjectFile,
    source: Annotated[str, typer.Argument(help="Predecessor task ID")],
    target: Annotated[str, typer.Argument(help="Task that will depend on SOURCE")],
    *,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Check the edge without writing the file")
    ] = False,
) -> None:
    """Add a dependency (TARGET depends on SOURCE) if it keeps the graph acyclic."""
    project = load_project(file)
    gate = DependencyGate(project.tasks)

    try:
        proposal = gate.propose_dependency(source, target)
    except UnknownTaskError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    if proposal.outcome == DependencyOutcome.CYCLE:
        typer.echo(f"Error: {proposal.message}", err=True)
        raise typer.Exit(1)

    typer.echo(proposal.message)
    if proposal.accepted and not dry_run:
        write_dependency(file, source, target)
        typer.echo(f"Updated {file}")


@app.command("remove-dependency")
def remove_dependency(
    file: ProjectFile,
    source: Annotated[str, typer.Argument(help="Predecessor task ID")],
    target: Annotated[str, typer.Argument(help="Task that depends on SOURCE")],
    *,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Report the edit without writing the file")
    ] = False,
) -> None:
    """Remove a dependency (TARGET no longer depends on SOURCE)."""
    project = load_project(file)
    gate = DependencyGate(project.tasks)

    try:
        removed = gate.remove_dependency(source, target)
    except UnknownTaskError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    if not removed:
        typer.echo(f"{target} does not depend on {source}")
        return

    typer.echo(f"Removed {source} -> {target}")
    if not dry_run:
        remove_dependency_from_file(file, source, target)
        typer.echo(f"Updated {file}")


@app.command()
def candidates(
    file: ProjectFile,
    task: Annotated[str, typer.Argument(help="Task ID to find possible predecessors for")],
) -> None:
    """List tasks that can become predecessors of TASK without a cycle."""
    project = load_project(file)
    gate = DependencyGate(project.tasks)

    try:
        eligible = gate.eligible_predecessors(task)
    except UnknownTaskError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    for task_id in eligible:
        typer.echo(task_id)


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
