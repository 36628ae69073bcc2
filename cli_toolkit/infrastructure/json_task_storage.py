"""JSON file implementation of todo-list persistence."""
import json
import logging
from pathlib import Path
from typing import List, Union
from cli_toolkit.domain.errors import TaskStorageError, ToolkitError
from cli_toolkit.domain.task_storage_interface import ITaskStorage
from cli_toolkit.domain.models import Task


logger = logging.getLogger(__name__)


class JsonTaskStorage(ITaskStorage):
    """Stores the whole todo list as a JSON array in a single file.

    Every save rewrites the file; a missing or blank file is an empty list.
    """

    def __init__(self, path: Union[str, Path] = "todos.json"):
        """Initialize storage.

        Args:
            path: Location of the JSON file
        """
        self._path = Path(path)

    def load_tasks(self) -> List[Task]:
        """Read and deserialize every task in the file.

        Returns:
            Stored tasks in file order
        """
        if not self._path.exists():
            return []

        try:
            content = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise TaskStorageError(f"Failed to read {self._path}: {e}") from e

        if not content.strip():
            return []

        try:
            data = json.loads(content)
            if not isinstance(data, list):
                raise ValueError("expected a JSON array of tasks")
            tasks = [Task.from_dict(item) for item in data]
        except (ValueError, KeyError, TypeError, AttributeError, ToolkitError) as e:
            raise TaskStorageError(f"Failed to parse {self._path}: {e}") from e

        logger.info(f"Loaded {len(tasks)} tasks from {self._path}")
        return tasks

    def save_tasks(self, tasks: List[Task]) -> None:
        """Serialize and write the full task list.

        Args:
            tasks: List of Task entities to persist
        """
        content = json.dumps([task.to_dict() for task in tasks], indent=2)

        try:
            self._path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error(f"Error saving tasks: {e}")
            raise TaskStorageError(f"Failed to write {self._path}: {e}") from e

        logger.info(f"Saved {len(tasks)} tasks to {self._path}")
