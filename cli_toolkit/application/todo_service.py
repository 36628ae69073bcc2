"""Todo-list service: add, list, complete and remove tasks."""
import logging
from typing import List, Tuple
from cli_toolkit.domain.errors import TaskNotFoundError
from cli_toolkit.domain.models import Priority, Task
from cli_toolkit.domain.task_storage_interface import ITaskStorage


logger = logging.getLogger(__name__)


def next_id(tasks: List[Task]) -> int:
    """One past the highest id in use, starting at 1."""
    return max((task.id for task in tasks), default=0) + 1


class TodoService:
    """Application service for the todo list.

    Each operation is a full load, mutate, save cycle against the storage.
    """

    def __init__(self, storage: ITaskStorage):
        self._storage = storage

    def add(self, description: str, priority: Priority = Priority.MEDIUM) -> Task:
        tasks = self._storage.load_tasks()
        task = Task(id=next_id(tasks), description=description, priority=priority)
        tasks.append(task)
        self._storage.save_tasks(tasks)
        logger.info(f"Added task {task.id}")
        return task

    def list_tasks(self) -> List[Task]:
        return self._storage.load_tasks()

    def complete(self, task_id: int) -> Tuple[Task, bool]:
        """Mark a task as completed.

        Returns:
            The task and whether it was already completed (nothing is saved then)
        """
        tasks = self._storage.load_tasks()
        task = self._find(tasks, task_id)

        if task.completed:
            return task, True

        task.completed = True
        self._storage.save_tasks(tasks)
        return task, False

    def remove(self, task_id: int) -> Task:
        tasks = self._storage.load_tasks()
        task = self._find(tasks, task_id)
        tasks.remove(task)
        self._storage.save_tasks(tasks)
        logger.info(f"Removed task {task_id}")
        return task

    @staticmethod
    def _find(tasks: List[Task], task_id: int) -> Task:
        for task in tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(f"Task {task_id} not found")
