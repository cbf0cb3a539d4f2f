"""
Storage interface - defines the contract for all task storage backends.
"""
from abc import ABC, abstractmethod
from typing import List

from tasktrack.models import Task


class TaskRepository(ABC):
    """Abstract interface for task storage operations.

    Implementations raise ``TaskNotFoundError`` when the targeted task does
    not exist and ``DatabaseError`` for any other storage failure.
    """

    @abstractmethod
    def create(self, task: Task) -> Task:
        """Store a new task, assigning its id and created_at, and return it."""
        pass

    @abstractmethod
    def get_by_id(self, task_id: str) -> Task:
        """Get a task by ID."""
        pass

    @abstractmethod
    def update(self, task: Task) -> None:
        """Overwrite title, description and status of an existing task."""
        pass

    @abstractmethod
    def delete(self, task_id: str) -> None:
        """Delete a task by ID."""
        pass

    @abstractmethod
    def get_all(self) -> List[Task]:
        """List all tasks in insertion order."""
        pass
