"""Task storage interface (port) for todo-list persistence.

This is the port in hexagonal architecture that the infrastructure layer implements.
"""
from abc import ABC, abstractmethod
from typing import List
from cli_toolkit.domain.models import Task


class ITaskStorage(ABC):
    """Abstract interface for task storage."""

    @abstractmethod
    def load_tasks(self) -> List[Task]:
        """Load every stored task.

        Returns an empty list when nothing has been stored yet.
        """
        pass

    @abstractmethod
    def save_tasks(self, tasks: List[Task]) -> None:
        """Replace the stored tasks with the given list.

        Args:
            tasks: List of Task entities to persist
        """
        pass
