import json

from tests.conftest import FnCLIRunner
from todo import persistence

ADD_FINISH = ["add", "-t", "Finish project", "-d", "final tasks", "-p", "high", "--due", "22-12-2024"]


def _add(runner, title, priority="medium", due="01-01-2030"):
    return runner.invoke(["add", "-t", title, "-d", "", "-p", priority, "--due", due])


def test_add_then_list(store_path):
    runner = FnCLIRunner()
    result = runner.invoke(ADD_FINISH)
    assert result.exit_code == 0, result.stderr
    assert "Finish project" in result.stdout
    assert "[1]" in result.stdout

    tasks = list(persistence.load(store_path))
    assert len(tasks) == 1
    assert tasks[0].id == 1
    assert tasks[0].done is False

    listed = runner.invoke(["list"])
    assert listed.exit_code == 0
    assert "[1] Finish project high 22-12-2024" in listed.stdout


def test_add_prompts_for_missing_fields(store_path):
    runner = FnCLIRunner()
    result = runner.invoke(["add"], input="Buy milk\n2 litres\nlow\n05-01-2025\n")
    assert result.exit_code == 0, result.stderr
    assert "Task title:" in result.stdout
    assert "Task due date (DD-MM-YYYY):" in result.stdout

    (task,) = persistence.load(store_path)
    assert task.title == "Buy milk"
    assert task.description == "2 litres"
    assert task.priority.value == "low"


def test_add_with_closed_stdin_fails(store_path):
    result = FnCLIRunner().invoke(["add", "-t", "x"], input="")
    assert result.exit_code != 0
    assert "no input" in result.stderr
    assert not store_path.exists()


def test_add_bad_priority_saves_nothing(store_path):
    runner = FnCLIRunner()
    result = runner.invoke(["add", "-t", "x", "-d", "", "-p", "URGENT", "--due", "22-12-2024"])
    assert result.exit_code != 0
    assert "invalid priority" in result.stderr
    assert not store_path.exists()


def test_add_bad_date_saves_nothing(store_path):
    runner = FnCLIRunner()
    result = runner.invoke(["add", "-t", "x", "-d", "", "-p", "low", "--due", "2024-12-22"])
    assert result.exit_code != 0
    assert "DD-MM-YYYY" in result.stderr
    assert not store_path.exists()


def test_list_empty(tmp_todo_dir):
    result = FnCLIRunner().invoke(["list"])
    assert result.exit_code == 0
    assert "no tasks" in result.stdout


def test_list_does_not_create_store(store_path):
    FnCLIRunner().invoke(["list"])
    assert not store_path.exists()


def test_list_long(store_path):
    runner = FnCLIRunner()
    runner.invoke(ADD_FINISH)
    result = runner.invoke(["list", "--long"])
    assert result.exit_code == 0
    assert "Task ID: 1" in result.stdout
    assert "Priority: High" in result.stdout
    assert "Due Date: 22-12-2024" in result.stdout


def test_done(store_path):
    runner = FnCLIRunner()
    runner.invoke(ADD_FINISH)
    result = runner.invoke(["done", "1"])
    assert result.exit_code == 0
    assert "✓" in result.stdout
    assert persistence.load(store_path).get(1).done is True


def test_done_twice_is_fine(store_path):
    runner = FnCLIRunner()
    runner.invoke(ADD_FINISH)
    runner.invoke(["done", "1"])
    result = runner.invoke(["done", "1"])
    assert result.exit_code == 0
    assert "already done" in result.stdout


def test_done_missing_task(store_path):
    runner = FnCLIRunner()
    runner.invoke(ADD_FINISH)
    before = store_path.read_text(encoding="utf-8")
    result = runner.invoke(["done", "9"])
    assert result.exit_code == 1
    assert "Task not found: 9" in result.stderr
    assert store_path.read_text(encoding="utf-8") == before


def test_priority(store_path):
    runner = FnCLIRunner()
    runner.invoke(ADD_FINISH)
    result = runner.invoke(["priority", "1", "low"])
    assert result.exit_code == 0
    assert "low" in result.stdout
    assert "[1] Finish project low" in runner.invoke(["list"]).stdout


def test_priority_invalid_token(store_path):
    runner = FnCLIRunner()
    runner.invoke(ADD_FINISH)
    result = runner.invoke(["priority", "1", "URGENT"])
    assert result.exit_code != 0
    assert "invalid priority" in result.stderr
    assert persistence.load(store_path).get(1).priority.value == "high"


def test_remove(store_path):
    runner = FnCLIRunner()
    for title in ("a", "b", "c"):
        _add(runner, title)
    result = runner.invoke(["remove", "1"])
    assert result.exit_code == 0
    assert persistence.load(store_path).ids() == [3, 2]


def test_remove_twice(store_path):
    runner = FnCLIRunner()
    _add(runner, "a")
    assert runner.invoke(["remove", "1"]).exit_code == 0
    result = runner.invoke(["remove", "1"])
    assert result.exit_code == 1
    assert "Task not found" in result.stderr


def test_ids_are_not_reused_across_runs(store_path):
    runner = FnCLIRunner()
    for title in ("a", "b", "c"):
        _add(runner, title)
    runner.invoke(["remove", "3"])
    _add(runner, "d")
    store = persistence.load(store_path)
    assert sorted(store.ids()) == [1, 2, 4]


def test_bad_task_id(tmp_todo_dir):
    result = FnCLIRunner().invoke(["done", "abc"])
    assert result.exit_code != 0
    assert "invalid task id" in result.stderr


def test_no_arguments(tmp_todo_dir):
    result = FnCLIRunner().invoke([])
    assert result.exit_code == 1
    assert "not enough arguments" in result.stderr


def test_unknown_command(tmp_todo_dir):
    result = FnCLIRunner().invoke(["frobnicate"])
    assert result.exit_code != 0


def test_wrong_argument_counts(tmp_todo_dir):
    runner = FnCLIRunner()
    assert runner.invoke(["remove"]).exit_code != 0
    assert runner.invoke(["done"]).exit_code != 0
    assert runner.invoke(["priority", "1"]).exit_code != 0


def test_corrupt_store_aborts(store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("{oops", encoding="utf-8")
    result = FnCLIRunner().invoke(["list"])
    assert result.exit_code == 1
    assert "corrupt" in result.stderr
    assert store_path.read_text(encoding="utf-8") == "{oops"


def test_store_env_override(tmp_todo_dir, tmp_path, monkeypatch):
    target = tmp_path / "custom.json"
    monkeypatch.setenv("TODO_STORE", str(target))
    result = FnCLIRunner().invoke(ADD_FINISH)
    assert result.exit_code == 0
    assert json.loads(target.read_text(encoding="utf-8"))["tasks"][0]["title"] == "Finish project"


def test_log_file_written(store_path, tmp_todo_dir):
    FnCLIRunner().invoke(ADD_FINISH)
    log = (tmp_todo_dir / "todo.log").read_text(encoding="utf-8")
    assert "saved to" in log


def test_failed_save_is_reported(store_path, monkeypatch):
    runner = FnCLIRunner()
    runner.invoke(ADD_FINISH)
    before = store_path.read_text(encoding="utf-8")

    def fail_replace(src, dst):
        raise OSError(13, "Permission denied")

    monkeypatch.setattr("todo.persistence.os.replace", fail_replace)
    result = runner.invoke(["done", "1"])
    assert result.exit_code == 1
    assert "may not have been saved" in result.stderr
    assert store_path.read_text(encoding="utf-8") == before
