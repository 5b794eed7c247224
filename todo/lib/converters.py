from typing import Any

from todo.core.errors import ValidationError
from todo.core.models import Task

from .parsing import format_due_date, parse_due_date, validate_priority

TaskRecord = dict[str, Any]

_FIELDS = ("id", "title", "description", "done", "priority", "due_date")


def task_to_record(task: Task) -> TaskRecord:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "done": task.done,
        "priority": task.priority.value,
        "due_date": format_due_date(task.due_date),
    }


def record_to_task(record: object) -> Task:
    """
    Converts a stored record into a Task.
    Expected record: {id, title, description, done, priority, due_date} with due_date as DD-MM-YYYY.
    Raises ValueError describing the first problem found.
    """
    if not isinstance(record, dict):
        raise ValueError(f"expected an object, got {type(record).__name__}")
    missing = [f for f in _FIELDS if f not in record]
    if missing:
        raise ValueError(f"missing fields: {', '.join(missing)}")

    task_id = record["id"]
    if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 1:
        raise ValueError(f"bad id {task_id!r}")
    for field in ("title", "description", "priority", "due_date"):
        if not isinstance(record[field], str):
            raise ValueError(f"task {task_id}: {field} must be a string")
    if not isinstance(record["done"], bool):
        raise ValueError(f"task {task_id}: done must be true or false")

    try:
        priority = validate_priority(record["priority"])
        due_date = parse_due_date(record["due_date"])
    except ValidationError as e:
        raise ValueError(f"task {task_id}: {e}") from e

    return Task(
        id=task_id,
        title=record["title"],
        description=record["description"],
        priority=priority,
        due_date=due_date,
        done=record["done"],
    )
