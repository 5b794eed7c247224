from collections.abc import Iterable
from datetime import date

from todo.core.models import Task

from .ansi import dim
from .format import format_task, format_task_block

__all__ = ["render_task_list"]


def render_task_list(tasks: Iterable[Task], long: bool = False, today: date | None = None) -> str:
    lines: list[str] = []
    for t in tasks:
        if long:
            if lines:
                lines.append("")
            lines.append(format_task_block(t))
            continue
        lines.append(format_task(t, today=today))
        if t.description:
            lines.append(f"    {dim(t.description)}")
    if not lines:
        return "no tasks"
    return "\n".join(lines)
