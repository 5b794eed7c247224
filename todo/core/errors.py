from pathlib import Path


class TodoError(Exception):
    exit_code = 1


class ValidationError(TodoError):
    pass


class InvalidPriorityError(ValidationError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid priority '{text}' — use low, medium or high")


class InvalidDateError(ValidationError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid due date '{text}' — use DD-MM-YYYY")


class InvalidTaskIdError(ValidationError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid task id '{text}'")


class NotFoundError(TodoError):
    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")


class ConflictError(TodoError):
    pass


class PersistenceError(TodoError):
    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(message)


class CorruptStoreError(PersistenceError):
    def __init__(self, path: Path, reason: str):
        self.reason = reason
        super().__init__(path, f"task store {path} is corrupt: {reason}")


class WriteFailedError(PersistenceError):
    def __init__(self, path: Path, reason: str):
        self.reason = reason
        super().__init__(
            path, f"could not write {path}: {reason} — the change may not have been saved"
        )
