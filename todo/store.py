from collections.abc import Iterable, Iterator, Sequence

from .core.errors import ConflictError
from .core.models import Task

__all__ = ["TaskStore", "TaskView"]


class TaskView(Sequence[Task]):
    """Read-only window over a store's tasks in their current order."""

    def __init__(self, tasks: list[Task]):
        self._tasks = tasks

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._tasks[index])
        return self._tasks[index]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"TaskView({len(self._tasks)} tasks)"


class TaskStore:
    """Ordered collection of tasks with unique ids.

    Lookups scan the list. Removal swaps the last task into the freed slot,
    so order after a removal is not insertion order.

    The id counter is a high-water mark: it only moves forward, so an id is
    never handed out twice for the lifetime of the store.
    """

    def __init__(self, tasks: Iterable[Task] = (), next_id: int = 1):
        self._tasks: list[Task] = []
        self._next_id = max(next_id, 1)
        for task in tasks:
            self.append(task)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"TaskStore({len(self._tasks)} tasks, next_id={self._next_id})"

    def ids(self) -> list[int]:
        return [t.id for t in self._tasks]

    def next_id(self) -> int:
        return self._next_id

    def view(self) -> TaskView:
        return TaskView(self._tasks)

    def index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def get(self, task_id: int) -> Task | None:
        index = self.index_of(task_id)
        return self._tasks[index] if index is not None else None

    def append(self, task: Task) -> None:
        if task.id < 1:
            raise ConflictError(f"task id must be positive, got {task.id}")
        if self.index_of(task.id) is not None:
            raise ConflictError(f"task id {task.id} already exists")
        self._tasks.append(task)
        self._next_id = max(self._next_id, task.id + 1)

    def replace_at(self, index: int, task: Task) -> None:
        current = self._tasks[index]
        if current.id != task.id:
            raise ConflictError(f"cannot replace task {current.id} with task {task.id}")
        self._tasks[index] = task

    def swap_remove(self, index: int) -> Task:
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"no task at position {index}")
        last = self._tasks.pop()
        if index == len(self._tasks):
            return last
        removed = self._tasks[index]
        self._tasks[index] = last
        return removed
