from datetime import date

from todo.core.models import Priority, Task

from . import ansi
from .parsing import format_due_date

__all__ = [
    "format_due",
    "format_priority",
    "format_status",
    "format_task",
    "format_task_block",
]

_PRIORITY_COLORS = {
    Priority.HIGH: "coral",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "gray",
}


def format_priority(priority: Priority) -> str:
    color = getattr(ansi, _PRIORITY_COLORS[priority])
    return color(priority.value)


def format_due(due_date: date, today: date | None = None) -> str:
    """Due date as DD-MM-YYYY, red once it has passed."""
    text = format_due_date(due_date)
    if today is not None and due_date < today:
        return ansi.red(text)
    return ansi.muted(text)


def format_task(task: Task, today: date | None = None) -> str:
    """Format a task for display. Returns: ✓|□ [id] title priority due"""
    symbol = ansi.green("✓") if task.done else "□"
    title = ansi.muted(task.title) if task.done else task.title
    parts = [
        symbol,
        ansi.muted(f"[{task.id}]"),
        title,
        format_priority(task.priority),
        format_due(task.due_date, None if task.done else today),
    ]
    return " ".join(parts)


def format_task_block(task: Task) -> str:
    """Every field on its own line."""
    return "\n".join(
        [
            f"Task ID: {task.id}",
            f"Title: {task.title}",
            f"Description: {task.description}",
            f"Done: {'yes' if task.done else 'no'}",
            f"Priority: {task.priority.label}",
            f"Due Date: {format_due_date(task.due_date)}",
        ]
    )


def format_status(symbol: str, content: str, task_id: int | None = None) -> str:
    """Format status message for action confirmations."""
    if task_id is not None:
        return f"{symbol} {content} {ansi.muted(f'[{task_id}]')}"
    return f"{symbol} {content}"
