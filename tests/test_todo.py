"""Tests for the todo list: JSON storage, service and command line."""
import json

import pytest

from cli_toolkit.application.todo_service import TodoService, next_id
from cli_toolkit.domain.errors import TaskNotFoundError, TaskStorageError
from cli_toolkit.domain.models import Priority, Task
from cli_toolkit.infrastructure.json_task_storage import JsonTaskStorage
from cli_toolkit.presentation.todo_cli import main


@pytest.fixture
def storage(tmp_path):
    return JsonTaskStorage(tmp_path / "todos.json")


def test_next_id_empty():
    assert next_id([]) == 1


def test_next_id_with_tasks():
    """Test ids continue after the highest one in use, even with gaps."""
    tasks = [
        Task(1, "First", priority=Priority.LOW),
        Task(5, "Fifth", priority=Priority.HIGH),
        Task(3, "Third"),
    ]
    assert next_id(tasks) == 6


def test_storage_missing_or_blank_file_is_empty(tmp_path):
    """Test a fresh or blank file loads as an empty list."""
    path = tmp_path / "todos.json"
    assert JsonTaskStorage(path).load_tasks() == []

    path.write_text("  \n")
    assert JsonTaskStorage(path).load_tasks() == []


def test_storage_writes_json_array(storage, tmp_path):
    """Test tasks are saved as a JSON array with lowercase priorities."""
    storage.save_tasks([Task(1, "Write tests", priority=Priority.HIGH)])

    data = json.loads((tmp_path / "todos.json").read_text())
    assert data == [{"id": 1, "description": "Write tests", "completed": False, "priority": "high"}]
    assert storage.load_tasks() == [Task(1, "Write tests", priority=Priority.HIGH)]


def test_storage_corrupt_file(tmp_path):
    """Test unparseable content is reported with the file name."""
    path = tmp_path / "todos.json"
    path.write_text("{not json")

    with pytest.raises(TaskStorageError, match="Failed to parse"):
        JsonTaskStorage(path).load_tasks()


def test_storage_invalid_priority_in_file(tmp_path):
    path = tmp_path / "todos.json"
    path.write_text('[{"id": 1, "description": "x", "completed": false, "priority": "urgent"}]')

    with pytest.raises(TaskStorageError):
        JsonTaskStorage(path).load_tasks()


def test_service_lifecycle(storage):
    """Test adding, completing and removing tasks persists every change."""
    service = TodoService(storage)

    first = service.add("Learn ownership")
    second = service.add("Build a web server", Priority.HIGH)
    assert (first.id, second.id) == (1, 2)

    task, already = service.complete(1)
    assert task.completed and not already
    assert service.complete(1)[1] is True

    removed = service.remove(2)
    assert removed.description == "Build a web server"
    assert [task.id for task in service.list_tasks()] == [1]
    assert service.add("Next").id == 2


def test_service_unknown_id(storage):
    service = TodoService(storage)

    with pytest.raises(TaskNotFoundError, match="Task 7 not found"):
        service.complete(7)
    with pytest.raises(TaskNotFoundError):
        service.remove(7)


def test_cli_add_and_list(tmp_path, capsys):
    """Test the add and list commands against a file in the working directory."""
    assert main(["add", "Learn Python", "--priority", "HIGH"]) == 0
    assert main(["add", "Write docs"]) == 0
    assert main(["done", "1"]) == 0
    assert main(["ls"]) == 0

    out = capsys.readouterr().out
    assert "Added: Learn Python (id: 1, priority: high)" in out
    assert "Completed: Learn Python" in out
    assert "[x]" in out and "[ ]" in out
    assert "1 pending, 1 completed" in out
    assert (tmp_path / "todos.json").exists()


def test_cli_list_empty(capsys):
    assert main(["list"]) == 0
    assert "No tasks yet" in capsys.readouterr().out


def test_cli_uses_todo_file_setting(tmp_path, monkeypatch):
    """Test TODO_FILE selects the storage location."""
    target = tmp_path / "elsewhere.json"
    monkeypatch.setenv("TODO_FILE", str(target))

    assert main(["add", "Somewhere else"]) == 0
    assert target.exists()


def test_cli_errors_exit_with_one(capsys):
    """Test unknown ids and bad priorities are reported on stderr."""
    assert main(["remove", "3"]) == 1
    assert "Error: Task 3 not found" in capsys.readouterr().err

    assert main(["add", "Task", "--priority", "someday"]) == 1
    assert "Invalid priority: 'someday'" in capsys.readouterr().err


@pytest.mark.parametrize("command", ["done", "remove"])
@pytest.mark.parametrize("value", ["abc", "1.5", "-2"])
def test_cli_invalid_id(command, value, capsys):
    """Test ids that are not whole non-negative numbers exit 1 naming the bad value."""
    assert main(["add", "Keep me"]) == 0
    capsys.readouterr()

    assert main([command, value]) == 1

    assert f"Error: Invalid ID: '{value}'" in capsys.readouterr().err
    assert main(["list"]) == 0
    assert "1 pending, 0 completed" in capsys.readouterr().out


def test_cli_without_command_prints_usage(capsys):
    assert main([]) == 0
    assert "usage: todo" in capsys.readouterr().out
