"""Tests for scheduler debug output at different verbosity levels."""

import logging
from io import StringIO

from critpath.logger import (
    CHANGES_LEVEL,
    CHECKS_LEVEL,
    checks_enabled,
    debug_enabled,
    level_for_verbosity,
    reset_logger,
    setup_logger,
)
from critpath.scheduler import DependencyGate, reschedule_all
from tests.conftest import abc_tasks, make_task


def _run_with_verbosity(verbosity: int) -> str:
    output_stream = StringIO()
    setup_logger(verbosity, stream=output_stream)

    try:
        tasks = [*abc_tasks(), make_task("D", 1, "ghost")]
        gate = DependencyGate(tasks)
        gate.propose_dependency("B", "C")
        gate.propose_dependency("C", "A")
        reschedule_all(tasks)
        return output_stream.getvalue()
    finally:
        reset_logger()


def test_verbosity_0_silent() -> None:
    assert _run_with_verbosity(0) == ""


def test_verbosity_1_shows_changes() -> None:
    output = _run_with_verbosity(1)

    assert "Added dependency B -> C" in output
    assert "Project duration: 10 days" in output
    assert "Checking dependency" not in output
    assert "forward" not in output


def test_verbosity_2_shows_checks() -> None:
    output = _run_with_verbosity(2)

    assert "Checking dependency C -> A" in output
    assert "Rejected: C -> A -> C" in output
    assert "Ignoring dangling predecessor ghost of D" in output
    assert "critical task(s)" in output
    assert "forward" not in output


def test_verbosity_3_shows_pass_details() -> None:
    output = _run_with_verbosity(3)

    assert "forward A: ES=0 EF=3" in output
    assert "backward C: LS=5 LF=10" in output


def test_level_helpers() -> None:
    setup_logger(2, stream=StringIO())
    try:
        assert checks_enabled()
        assert not debug_enabled()
    finally:
        reset_logger()


def test_extra_verbosity_clamps_to_debug() -> None:
    output_stream = StringIO()
    setup_logger(5, stream=output_stream)
    try:
        reschedule_all(abc_tasks())
        assert "forward A: ES=0 EF=3" in output_stream.getvalue()
    finally:
        reset_logger()


def test_level_for_verbosity() -> None:
    assert level_for_verbosity(-1) == logging.ERROR
    assert level_for_verbosity(0) == logging.ERROR
    assert level_for_verbosity(1) == CHANGES_LEVEL
    assert level_for_verbosity(2) == CHECKS_LEVEL
    assert level_for_verbosity(3) == logging.DEBUG
    assert level_for_verbosity(9) == logging.DEBUG
