import threading
from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from app.database.repositories.base import BaseTaskRepository
from app.tasks.models import Task, TaskStatus


class InMemoryTaskRepository(BaseTaskRepository):
    """Process-local task store. Tasks are lost on restart."""

    def __init__(self) -> None:
        self._tasks: dict[UUID, Task] = {}
        self._lock = threading.Lock()

    def add(self, task: Task) -> None:
        with self._lock:
            self._tasks[task.id] = task

    def find_by_id(self, task_id: UUID) -> Task | None:
        with self._lock:
            return self._tasks.get(task_id)

    def find_by_status(self, status: TaskStatus, limit: int | None = None) -> list[Task]:
        with self._lock:
            matching = [t for t in self._tasks.values() if t.status is status]
        matching.sort(key=lambda t: t.created_at)
        return matching if limit is None else matching[:limit]

    def find_by_status_updated_before(
        self, status: TaskStatus, cutoff: datetime
    ) -> list[Task]:
        with self._lock:
            return [
                t
                for t in self._tasks.values()
                if t.status is status and t.updated_at < cutoff
            ]

    def update(self, task_id: UUID, change: Callable[[Task], Task]) -> Task | None:
        with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                return None
            updated = change(current)
            self._tasks[task_id] = updated
            return updated
