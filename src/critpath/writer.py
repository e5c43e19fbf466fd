"""Write dependency edits back to a project YAML file.

Uses ruamel.yaml round-tripping so comments, ordering, and formatting of the
rest of the file are preserved.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap


def _load(file_path: Path) -> tuple[YAML, Any]:
    yaml_rt = YAML()
    yaml_rt.preserve_quotes = True  # type: ignore[assignment]
    with file_path.open(encoding="utf-8") as f:
        data: Any = yaml_rt.load(f)  # type: ignore[no-untyped-call]
    if not isinstance(data, dict) or not isinstance(data.get("tasks"), dict):
        raise ValueError(f"No 'tasks' section found in {file_path}")
    return yaml_rt, data


def _dump(yaml_rt: YAML, data: Any, file_path: Path) -> None:
    with file_path.open("w", encoding="utf-8") as f:
        yaml_rt.dump(data, f)  # type: ignore[no-untyped-call]


def _task_entry(tasks: Any, task_id: str, file_path: Path) -> Any:
    if task_id not in tasks:
        raise ValueError(f"Task '{task_id}' not found in {file_path}")
    entry = tasks[task_id]
    if entry is None:
        entry = CommentedMap()
        tasks[task_id] = entry
    return entry


def write_dependency(file_path: Path | str, source: str, target: str) -> bool:
    """Add ``source`` to the predecessors of ``target`` in the file.

    Only call this for edges the dependency gate has accepted.

    Returns:
        True if the file changed, False if the edge was already there
    """
    file_path = Path(file_path)
    yaml_rt, data = _load(file_path)
    entry = _task_entry(data["tasks"], target, file_path)

    preds = entry.get("predecessors")
    if preds is None:
        entry["predecessors"] = [source]
    elif isinstance(preds, list):
        if source in preds:
            return False
        preds.append(source)
    else:
        # Single scalar predecessor
        if str(preds) == source:
            return False
        entry["predecessors"] = [str(preds), source]

    _dump(yaml_rt, data, file_path)
    return True


def remove_dependency(file_path: Path | str, source: str, target: str) -> bool:
    """Remove ``source`` from the predecessors of ``target`` in the file.

    Returns:
        True if the file changed, False if the edge was not present
    """
    file_path = Path(file_path)
    yaml_rt, data = _load(file_path)
    entry = _task_entry(data["tasks"], target, file_path)

    preds = entry.get("predecessors")
    if isinstance(preds, list):
        if source not in preds:
            return False
        preds.remove(source)
        if not preds:
            del entry["predecessors"]
    elif preds is not None and str(preds) == source:
        del entry["predecessors"]
    else:
        return False

    _dump(yaml_rt, data, file_path)
    return True
