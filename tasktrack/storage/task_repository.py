"""
Repository for task operations.

Update and delete detect missing tasks from the rows-affected count of the
write itself; no existence check precedes them.
"""
import logging
from contextlib import closing, contextmanager
from datetime import datetime, UTC
from typing import Any, Callable, Iterator, List, Optional

from tasktrack.exceptions import DatabaseError, ServiceError, TaskNotFoundError
from tasktrack.models import Task
from tasktrack.storage.interface import TaskRepository
from tasktrack.storage.schema import TASKS_TABLE

logger = logging.getLogger(__name__)

TASK_COLUMNS = "id, title, description, status, created_at"


def _row_to_task(row) -> Task:
    """Decode a (id, title, description, status, created_at) row."""
    created_at = row[4]
    if isinstance(created_at, str):
        created_at = datetime.fromisoformat(created_at)
    if not isinstance(created_at, datetime):
        raise TypeError(f"Unexpected created_at value for task {row[0]}: {created_at!r}")
    # Timestamps are always written in UTC
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return Task(
        id=str(row[0]),
        title=row[1],
        description=row[2],
        status=row[3],
        created_at=created_at,
    )


def _parse_task_id(task_id: str, max_row_id: int) -> int:
    # Ids are store-generated positive integers; anything else cannot match a row.
    try:
        row_id = int(str(task_id).strip())
    except ValueError:
        raise TaskNotFoundError(task_id) from None
    if not 0 < row_id <= max_row_id:
        raise TaskNotFoundError(task_id)
    return row_id


class TaskStore(TaskRepository):
    """SQL-backed implementation of TaskRepository."""

    def __init__(
        self,
        get_connection: Callable[[], Any],
        adapter: Any,
        execute_insert: Callable[[Any, str, tuple], Optional[int]],
        execute_with_logging: Callable[..., Any]
    ):
        """
        Initialize TaskStore.

        Args:
            get_connection: Function to get database connection
            adapter: Database adapter (for closing connections and timestamp binding)
            execute_insert: Function to execute INSERT queries and return ID
            execute_with_logging: Function to execute queries with logging
        """
        self._get_connection = get_connection
        self.adapter = adapter
        self._execute_insert = execute_insert
        self._execute_with_logging = execute_with_logging

    @contextmanager
    def _connection(self, operation: str) -> Iterator[Any]:
        """Open a connection for one operation; driver errors become DatabaseError."""
        conn = None
        try:
            conn = self._get_connection()
            yield conn
        except ServiceError:
            raise
        except Exception as e:
            logger.error(f"Task {operation} failed: {e}")
            raise DatabaseError(str(e), original_error=e, operation=operation) from e
        finally:
            if conn is not None:
                self.adapter.close(conn)

    def create(self, task: Task) -> Task:
        """
        Insert a task and assign its generated ID and creation time.

        Any id or created_at already set on ``task`` is overwritten.

        Returns:
            The same task object, with ``id`` and ``created_at`` populated

        Raises:
            DatabaseError: If the insert fails or no ID was generated
        """
        created_at = datetime.now(UTC)
        with self._connection("INSERT") as conn:
            with closing(conn.cursor()) as cursor:
                task_id = self._execute_insert(
                    cursor,
                    f"INSERT INTO {TASKS_TABLE} (title, description, status, created_at) VALUES (?, ?, ?, ?)",
                    (task.title, task.description, task.status,
                     self.adapter.to_db_timestamp(created_at)),
                )
            if task_id is None:
                raise DatabaseError("Failed to retrieve generated task ID", operation="INSERT")
            conn.commit()

        task.id = str(task_id)
        task.created_at = created_at
        logger.info(f"Created task {task.id}")
        return task

    def get_by_id(self, task_id: str) -> Task:
        """
        Get a task by ID.

        Raises:
            TaskNotFoundError: If no task has this ID
            DatabaseError: On any other read failure
        """
        row_id = _parse_task_id(task_id, self.adapter.max_row_id)
        with self._connection("SELECT") as conn:
            with closing(conn.cursor()) as cursor:
                self._execute_with_logging(
                    cursor,
                    f"SELECT {TASK_COLUMNS} FROM {TASKS_TABLE} WHERE id = ?",
                    (row_id,),
                )
                row = cursor.fetchone()
                if row is None:
                    raise TaskNotFoundError(task_id)
                return _row_to_task(row)

    def update(self, task: Task) -> None:
        """
        Overwrite title, description and status of the task with ``task.id``.

        id and created_at are never written.

        Raises:
            TaskNotFoundError: If no row was affected
            DatabaseError: If the update fails
        """
        row_id = _parse_task_id(task.id, self.adapter.max_row_id)
        with self._connection("UPDATE") as conn:
            with closing(conn.cursor()) as cursor:
                self._execute_with_logging(
                    cursor,
                    f"UPDATE {TASKS_TABLE} SET title = ?, description = ?, status = ? WHERE id = ?",
                    (task.title, task.description, task.status, row_id),
                )
                rows_affected = cursor.rowcount
            if rows_affected is None or rows_affected < 0:
                raise DatabaseError("Driver did not report rows affected", operation="UPDATE")
            if rows_affected == 0:
                raise TaskNotFoundError(task.id)
            conn.commit()
        logger.info(f"Updated task {task.id}")

    def delete(self, task_id: str) -> None:
        """
        Delete the task with ``task_id``.

        Raises:
            TaskNotFoundError: If no row was affected
            DatabaseError: If the delete fails
        """
        row_id = _parse_task_id(task_id, self.adapter.max_row_id)
        with self._connection("DELETE") as conn:
            with closing(conn.cursor()) as cursor:
                self._execute_with_logging(
                    cursor,
                    f"DELETE FROM {TASKS_TABLE} WHERE id = ?",
                    (row_id,),
                )
                rows_affected = cursor.rowcount
            if rows_affected is None or rows_affected < 0:
                raise DatabaseError("Driver did not report rows affected", operation="DELETE")
            if rows_affected == 0:
                raise TaskNotFoundError(task_id)
            conn.commit()
        logger.info(f"Deleted task {task_id}")

    def get_all(self) -> List[Task]:
        """
        List all tasks in insertion order.

        Returns an empty list when there are no tasks. A failing query or
        row decode raises DatabaseError; partial results are never returned.
        """
        with self._connection("SELECT") as conn:
            with closing(conn.cursor()) as cursor:
                self._execute_with_logging(
                    cursor,
                    f"SELECT {TASK_COLUMNS} FROM {TASKS_TABLE} ORDER BY id",
                )
                return [_row_to_task(row) for row in cursor.fetchall()]
