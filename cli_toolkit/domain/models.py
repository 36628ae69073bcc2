"""Domain models representing core business entities."""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from cli_toolkit.domain.errors import InvalidPriorityError


@dataclass(frozen=True)
class Repository:
    """Immutable domain entity representing a GitHub repository summary.

    Records are created from one page of the REST listing and live only for
    the duration of a single run.
    """
    name: str
    star_count: int
    url: str
    language: Optional[str] = None
    description: Optional[str] = None
    is_fork: bool = False

    def __post_init__(self) -> None:
        if self.star_count < 0:
            raise ValueError(
                f"Repository '{self.name}' has a negative star count: {self.star_count}"
            )


@dataclass(frozen=True)
class RepositoryStats:
    """Result of the filter/sort/aggregate pipeline."""
    displayed: List[Repository]
    filtered_count: int
    total_stars: int
    top_languages: List[Tuple[str, int]]
    most_starred: Optional[Repository]
    sort_key: str
    language: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.filtered_count == 0


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, text: str) -> 'Priority':
        """Parse a priority name, case-insensitively ("med" means medium)."""
        value = text.strip().lower()
        if value == "med":
            return cls.MEDIUM
        try:
            return cls(value)
        except ValueError:
            raise InvalidPriorityError(
                f"Invalid priority: '{text}'. Use low, medium, or high"
            ) from None

    def __str__(self) -> str:
        return self.value


@dataclass
class Task:
    """A single entry of the todo list."""
    id: int
    description: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "description": self.description,
            "completed": self.completed,
            "priority": self.priority.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Task':
        return cls(
            id=int(data["id"]),
            description=str(data["description"]),
            completed=bool(data.get("completed", False)),
            priority=Priority.parse(data.get("priority", Priority.MEDIUM.value)),
        )
