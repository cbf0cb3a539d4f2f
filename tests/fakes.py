"""
In-memory TaskRepository used by HTTP-layer tests.
"""
import threading
from datetime import datetime, UTC
from typing import Dict, List, Optional

from tasktrack.exceptions import DatabaseError, TaskNotFoundError
from tasktrack.models import Task
from tasktrack.storage import TaskRepository


class InMemoryTaskRepository(TaskRepository):
    """Same success/error contract as TaskStore, backed by a dict.

    Set ``fail_with`` to a message to make every operation raise DatabaseError.
    """

    def __init__(self):
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self.fail_with: Optional[str] = None

    def _check_failure(self, operation: str):
        if self.fail_with:
            raise DatabaseError(self.fail_with, operation=operation)

    @staticmethod
    def _key(task_id: str) -> int:
        try:
            return int(task_id)
        except ValueError:
            raise TaskNotFoundError(task_id) from None

    def create(self, task: Task) -> Task:
        self._check_failure("INSERT")
        with self._lock:
            task.created_at = datetime.now(UTC)
            task.id = str(self._next_id)
            self._tasks[self._next_id] = task.model_copy()
            self._next_id += 1
        return task

    def get_by_id(self, task_id: str) -> Task:
        self._check_failure("SELECT")
        task = self._tasks.get(self._key(task_id))
        if task is None:
            raise TaskNotFoundError(task_id)
        return task.model_copy()

    def update(self, task: Task) -> None:
        self._check_failure("UPDATE")
        key = self._key(task.id)
        with self._lock:
            stored = self._tasks.get(key)
            if stored is None:
                raise TaskNotFoundError(task.id)
            self._tasks[key] = stored.model_copy(
                update={"title": task.title, "description": task.description, "status": task.status}
            )

    def delete(self, task_id: str) -> None:
        self._check_failure("DELETE")
        with self._lock:
            if self._tasks.pop(self._key(task_id), None) is None:
                raise TaskNotFoundError(task_id)

    def get_all(self) -> List[Task]:
        self._check_failure("SELECT")
        return [self._tasks[key].model_copy() for key in sorted(self._tasks)]
