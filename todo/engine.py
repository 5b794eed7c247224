import dataclasses
import logging

from .core.errors import NotFoundError
from .core.models import (
    AddTask,
    ChangePriority,
    Command,
    EngineResult,
    ListTasks,
    MarkDone,
    RemoveTask,
)
from .store import TaskStore

__all__ = ["apply"]

logger = logging.getLogger(__name__)


def _locate(store: TaskStore, task_id: int) -> int:
    index = store.index_of(task_id)
    if index is None:
        raise NotFoundError(task_id)
    return index


def apply(command: Command, store: TaskStore) -> EngineResult:
    """Apply one command to the store.

    Raises NotFoundError (store untouched) when the command names an id the
    store does not hold. `EngineResult.mutated` tells the caller whether
    anything changed and the store needs saving.
    """
    match command:
        case AddTask(task=task):
            store.append(task)
            logger.debug("added task %s", task.id)
            return EngineResult(command, mutated=True, task=task)

        case RemoveTask(task_id=task_id):
            removed = store.swap_remove(_locate(store, task_id))
            logger.debug("removed task %s", task_id)
            return EngineResult(command, mutated=True, task=removed)

        case MarkDone(task_id=task_id):
            index = _locate(store, task_id)
            task = store.view()[index]
            if task.done:
                return EngineResult(command, mutated=False, task=task)
            task = dataclasses.replace(task, done=True)
            store.replace_at(index, task)
            logger.debug("marked task %s done", task_id)
            return EngineResult(command, mutated=True, task=task)

        case ChangePriority(task_id=task_id, priority=priority):
            index = _locate(store, task_id)
            task = store.view()[index]
            if task.priority is priority:
                return EngineResult(command, mutated=False, task=task)
            task = dataclasses.replace(task, priority=priority)
            store.replace_at(index, task)
            logger.debug("task %s priority -> %s", task_id, priority.value)
            return EngineResult(command, mutated=True, task=task)

        case ListTasks():
            return EngineResult(command, mutated=False, tasks=store.view())

    raise TypeError(f"unknown command {command!r}")
