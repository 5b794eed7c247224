import io
import logging
import sys
from contextlib import redirect_stderr, redirect_stdout
from dataclasses import dataclass
from datetime import date
from pathlib import Path

import pytest

from todo import config
from todo.cli import run
from todo.core.models import Priority, Task
from todo.lib import ansi


@dataclass
class Result:
    exit_code: int
    stdout: str
    stderr: str


class FnCLIRunner:
    """Runs `todo <args>` in-process, capturing output and exit code."""

    def invoke(self, args: list[str], input: str | None = None) -> Result:
        out, err = io.StringIO(), io.StringIO()
        old_stdin = sys.stdin
        sys.stdin = io.StringIO(input or "")
        try:
            with redirect_stdout(out), redirect_stderr(err):
                try:
                    code = run(list(args))
                except SystemExit as e:
                    code = e.code if isinstance(e.code, int) else (0 if e.code is None else 1)
        finally:
            sys.stdin = old_stdin
        return Result(exit_code=code, stdout=out.getvalue(), stderr=err.getvalue())


@pytest.fixture
def tmp_todo_dir(tmp_path: Path, monkeypatch) -> Path:
    """Point every todo path at a fresh temp directory."""
    todo_dir = tmp_path / ".todo"
    monkeypatch.setattr(config, "TODO_DIR", todo_dir)
    monkeypatch.setattr(config, "STORE_PATH", todo_dir / "tasks.json")
    monkeypatch.setattr(config, "CONFIG_PATH", todo_dir / "config.yaml")
    monkeypatch.setattr(config, "LOG_DIR", todo_dir)
    monkeypatch.delenv(config.STORE_ENV, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    config.Config.reset()
    yield todo_dir
    config.Config.reset()
    ansi.use(ansi.DEFAULT)
    log = logging.getLogger("todo")
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()


@pytest.fixture
def store_path(tmp_todo_dir: Path) -> Path:
    return tmp_todo_dir / "tasks.json"


def make_task(
    task_id: int,
    title: str = "task",
    priority: Priority = Priority.MEDIUM,
    due_date: date = date(2024, 12, 22),
    done: bool = False,
    description: str = "",
) -> Task:
    return Task(
        id=task_id,
        title=title,
        description=description,
        priority=priority,
        due_date=due_date,
        done=done,
    )
