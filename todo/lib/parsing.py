import re
from datetime import date, datetime

from todo.core.errors import InvalidDateError, InvalidPriorityError, InvalidTaskIdError
from todo.core.models import Priority, RawTask, Task

__all__ = [
    "DUE_DATE_FORMAT",
    "build_task",
    "format_due_date",
    "parse_due_date",
    "parse_task_id",
    "validate_priority",
]

DUE_DATE_FORMAT = "%d-%m-%Y"

_DUE_DATE_RE = re.compile(r"^[0-9]{2}-[0-9]{2}-[0-9]{4}$")
_TASK_ID_RE = re.compile(r"^[0-9]+$")
_PRIORITIES = {p.value: p for p in Priority}


def validate_priority(text: str) -> Priority:
    """Map 'low' / 'medium' / 'high' to a Priority. Case-sensitive."""
    priority = _PRIORITIES.get(text)
    if priority is None:
        raise InvalidPriorityError(text)
    return priority


def parse_due_date(text: str) -> date:
    """Parse DD-MM-YYYY, e.g. '22-12-2024'. Anything else raises InvalidDateError."""
    if not _DUE_DATE_RE.match(text):
        raise InvalidDateError(text)
    try:
        return datetime.strptime(text, DUE_DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateError(text) from None


def format_due_date(due: date) -> str:
    return due.strftime(DUE_DATE_FORMAT)


def parse_task_id(text: str) -> int:
    text = text.strip()
    if not _TASK_ID_RE.match(text):
        raise InvalidTaskIdError(text)
    task_id = int(text)
    if task_id < 1:
        raise InvalidTaskIdError(text)
    return task_id


def build_task(raw: RawTask, task_id: int) -> Task:
    """Validate raw field values and construct a new, not-done Task."""
    return Task(
        id=task_id,
        title=raw.title.strip(),
        description=raw.description.strip(),
        priority=validate_priority(raw.priority.strip()),
        due_date=parse_due_date(raw.due_date.strip()),
    )
