from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from psycopg.rows import dict_row

from app.database.connection import get_connection
from app.database.models import TaskRecord
from app.database.repositories.base import BaseTaskRepository
from app.tasks.models import Task, TaskStatus

_COLUMNS = """
    id, original_text, language, status, corrected_text, options,
    error_message, created_at, updated_at
"""


class PostgresTaskRepository(BaseTaskRepository):
    """Database operations for the correction_tasks table."""

    def add(self, task: Task) -> None:
        record = TaskRecord.from_task(task)
        with get_connection() as conn:
            conn.execute(
                """
                INSERT INTO correction_tasks
                (id, original_text, language, status, corrected_text, options,
                 error_message, created_at, updated_at)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    record.id,
                    record.original_text,
                    record.language,
                    record.status,
                    record.corrected_text,
                    record.options,
                    record.error_message,
                    record.created_at,
                    record.updated_at,
                ),
            )
            conn.commit()

    def find_by_id(self, task_id: UUID) -> Task | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM correction_tasks WHERE id = %s",
                    (task_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return TaskRecord.from_row(row).to_task()

    def find_by_status(self, status: TaskStatus, limit: int | None = None) -> list[Task]:
        """Oldest first. LIMIT NULL means no limit in PostgreSQL."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM correction_tasks
                    WHERE status = %s
                    ORDER BY created_at
                    LIMIT %s
                    """,
                    (status.value, limit),
                )
                rows = cur.fetchall()

        return [TaskRecord.from_row(row).to_task() for row in rows]

    def find_by_status_updated_before(
        self, status: TaskStatus, cutoff: datetime
    ) -> list[Task]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM correction_tasks
                    WHERE status = %s
                      AND updated_at < %s
                    ORDER BY updated_at
                    """,
                    (status.value, cutoff),
                )
                rows = cur.fetchall()

        return [TaskRecord.from_row(row).to_task() for row in rows]

    def update(self, task_id: UUID, change: Callable[[Task], Task]) -> Task | None:
        """Lock the row with SELECT FOR UPDATE, apply `change`, write it back."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM correction_tasks WHERE id = %s FOR UPDATE",
                    (task_id,),
                )
                row = cur.fetchone()
                if row is None:
                    conn.rollback()
                    return None

                updated = change(TaskRecord.from_row(row).to_task())
                record = TaskRecord.from_task(updated)
                cur.execute(
                    """
                    UPDATE correction_tasks
                    SET status = %s, corrected_text = %s, options = %s,
                        error_message = %s, updated_at = %s
                    WHERE id = %s
                    """,
                    (
                        record.status,
                        record.corrected_text,
                        record.options,
                        record.error_message,
                        record.updated_at,
                        record.id,
                    ),
                )
            conn.commit()

        return updated
