"""Process-wide options set by the CLI callback and read by the loader."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class CliContext:
    config_path: Path | None = None


_context = CliContext()


def get_config_path() -> Path | None:
    """Config file given with ``--config``, if any."""
    return _context.config_path


def set_config_path(path: Path | None) -> None:
    _context.config_path = path


def reset_context() -> None:
    """Forget every CLI option (used between tests)."""
    global _context
    _context = CliContext()
