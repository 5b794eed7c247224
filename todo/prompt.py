from collections.abc import Callable

from .core.errors import ValidationError
from .core.models import RawTask

Reader = Callable[[str], str]

PROMPTS = {
    "title": "Task title: ",
    "description": "Task description: ",
    "priority": "Task priority (low/medium/high): ",
    "due_date": "Task due date (DD-MM-YYYY): ",
}


def _ask(read: Reader, field: str) -> str:
    try:
        return read(PROMPTS[field]).strip()
    except EOFError:
        raise ValidationError(f"no input for {field.replace('_', ' ')}") from None


def collect_raw_task(
    title: str | None = None,
    description: str | None = None,
    priority: str | None = None,
    due_date: str | None = None,
    read: Reader = input,
) -> RawTask:
    """Gather the four task fields, prompting for any not already supplied.

    Values are returned as typed; validation happens in build_task.
    """
    given = {
        "title": title,
        "description": description,
        "priority": priority,
        "due_date": due_date,
    }
    values = {field: val if val is not None else _ask(read, field) for field, val in given.items()}
    return RawTask(**values)
