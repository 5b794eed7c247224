import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from .core.errors import ConflictError, CorruptStoreError, WriteFailedError
from .lib.converters import record_to_task, task_to_record
from .store import TaskStore

__all__ = ["FORMAT_VERSION", "load", "save"]

FORMAT_VERSION = 1

logger = logging.getLogger(__name__)


def _parse_document(path: Path, data: Any) -> tuple[list[Any], int]:
    # A bare list is the pre-versioned layout: tasks only, no id counter.
    if isinstance(data, list):
        return data, 1
    if not isinstance(data, dict):
        raise CorruptStoreError(path, f"expected an object, got {type(data).__name__}")
    version = data.get("version")
    if version != FORMAT_VERSION:
        raise CorruptStoreError(path, f"unsupported format version {version!r}")
    records = data.get("tasks")
    if not isinstance(records, list):
        raise CorruptStoreError(path, "'tasks' must be a list")
    next_id = data.get("next_id", 1)
    if isinstance(next_id, bool) or not isinstance(next_id, int) or next_id < 1:
        raise CorruptStoreError(path, f"bad next_id {next_id!r}")
    return records, next_id


def load(path: Path) -> TaskStore:
    """Read the store at `path`. A missing file is a new, empty store."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("no task store at %s, starting empty", path)
        return TaskStore()
    except (OSError, UnicodeDecodeError) as e:
        raise CorruptStoreError(path, f"unreadable ({e})") from e

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        raise CorruptStoreError(path, f"invalid JSON ({e})") from e

    records, next_id = _parse_document(path, data)
    try:
        tasks = [record_to_task(r) for r in records]
    except ValueError as e:
        raise CorruptStoreError(path, str(e)) from e

    try:
        store = TaskStore(tasks, next_id=next_id)
    except ConflictError as e:
        raise CorruptStoreError(path, str(e)) from e
    logger.debug("loaded %d tasks from %s", len(store), path)
    return store


def _dump(store: TaskStore) -> str:
    doc = {
        "version": FORMAT_VERSION,
        "next_id": store.next_id(),
        "tasks": [task_to_record(t) for t in store],
    }
    return json.dumps(doc, ensure_ascii=False, indent=2) + "\n"


def save(path: Path, store: TaskStore) -> None:
    """Write the whole store to `path` atomically (temp file, fsync, rename)."""
    tmp = path.with_name(f"{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("w", encoding="utf-8") as f:
            f.write(_dump(store))
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        raise WriteFailedError(path, e.strerror or str(e)) from e
    logger.debug("saved %d tasks to %s", len(store), path)
