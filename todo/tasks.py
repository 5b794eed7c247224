import logging
from datetime import date
from pathlib import Path

from fncli import cli

from . import config, engine, persistence
from .core.models import (
    AddTask,
    ChangePriority,
    Command,
    EngineResult,
    ListTasks,
    MarkDone,
    RemoveTask,
)
from .lib import ansi
from .lib.format import format_priority, format_status
from .lib.parsing import build_task, parse_task_id, validate_priority
from .lib.render import render_task_list
from .prompt import collect_raw_task
from .store import TaskStore

__all__ = [
    "add",
    "done",
    "execute",
    "list_cmd",
    "remove",
    "run",
    "set_priority",
]

logger = logging.getLogger(__name__)


# ── domain ───────────────────────────────────────────────────────────────────


def run(store: TaskStore, command: Command, path: Path) -> EngineResult:
    """Apply `command` to an already loaded store and save it if anything changed."""
    result = engine.apply(command, store)
    if result.mutated:
        persistence.save(path, store)
        logger.info("%s saved to %s", type(command).__name__, path)
    return result


def execute(command: Command, path: Path | None = None) -> EngineResult:
    """Load the store, apply one command, save on change."""
    path = path if path else config.get_store_path()
    return run(persistence.load(path), command, path)


# ── cli ──────────────────────────────────────────────────────────────────────


@cli(
    "todo",
    flags={
        "title": ["-t", "--title"],
        "description": ["-d", "--description"],
        "priority": ["-p", "--priority"],
        "due": ["--due"],
    },
)
def add(
    title: str | None = None,
    description: str | None = None,
    priority: str | None = None,
    due: str | None = None,
) -> None:
    """Add a task, prompting for any field not given"""
    path = config.get_store_path()
    store = persistence.load(path)
    raw = collect_raw_task(title, description, priority, due)
    task = build_task(raw, store.next_id())
    run(store, AddTask(task), path)
    print(format_status("□", task.title, task.id))


@cli("todo", name="remove")
def remove(task_id: str) -> None:
    """Delete a task"""
    result = execute(RemoveTask(parse_task_id(task_id)))
    if result.task:
        print(format_status(ansi.dim("✗"), ansi.dim(result.task.title), result.task.id))


@cli("todo", name="done")
def done(task_id: str) -> None:
    """Mark a task done"""
    result = execute(MarkDone(parse_task_id(task_id)))
    if result.task:
        note = "" if result.mutated else f" {ansi.muted('(already done)')}"
        print(format_status(ansi.green("✓"), result.task.title, result.task.id) + note)


@cli("todo", name="priority")
def set_priority(task_id: str, priority: str) -> None:
    """Change a task's priority (low, medium, high)"""
    command = ChangePriority(parse_task_id(task_id), validate_priority(priority))
    result = execute(command)
    if result.task:
        status = format_status("□", result.task.title, result.task.id)
        print(f"{status} → {format_priority(result.task.priority)}")


@cli("todo", name="list", flags={"long": ["-l", "--long"]})
def list_cmd(long: bool = False) -> None:
    """List all tasks"""
    result = execute(ListTasks())
    print(render_task_list(result.tasks or (), long=long, today=date.today()))
