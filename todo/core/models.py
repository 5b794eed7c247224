import dataclasses
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from todo.store import TaskView


class Priority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclasses.dataclass(frozen=True)
class Task:
    id: int
    title: str
    description: str
    priority: Priority
    due_date: date
    done: bool = False


@dataclasses.dataclass(frozen=True)
class RawTask:
    """Field values as typed by the user, before validation."""

    title: str
    description: str
    priority: str
    due_date: str


@dataclasses.dataclass(frozen=True)
class AddTask:
    task: Task


@dataclasses.dataclass(frozen=True)
class RemoveTask:
    task_id: int


@dataclasses.dataclass(frozen=True)
class MarkDone:
    task_id: int


@dataclasses.dataclass(frozen=True)
class ChangePriority:
    task_id: int
    priority: Priority


@dataclasses.dataclass(frozen=True)
class ListTasks:
    pass


Command = AddTask | RemoveTask | MarkDone | ChangePriority | ListTasks


@dataclasses.dataclass(frozen=True)
class EngineResult:
    command: Command
    mutated: bool
    task: Task | None = None
    tasks: "TaskView | None" = None
