from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from app.tasks.models import Task, TaskStatus


class BaseTaskRepository(ABC):
    """Contract for task stores.

    Every mutation is scoped to a single task; stores must make `update` an
    atomic read-modify-write for that task.
    """

    @abstractmethod
    def add(self, task: Task) -> None:
        """Persist a new task."""

    @abstractmethod
    def find_by_id(self, task_id: UUID) -> Task | None:
        """Return the task or None if it does not exist."""

    @abstractmethod
    def find_by_status(self, status: TaskStatus, limit: int | None = None) -> list[Task]:
        """Return tasks with the given status, oldest created_at first."""

    @abstractmethod
    def find_by_status_updated_before(
        self, status: TaskStatus, cutoff: datetime
    ) -> list[Task]:
        """Return tasks with the given status and updated_at strictly before cutoff."""

    @abstractmethod
    def update(self, task_id: UUID, change: Callable[[Task], Task]) -> Task | None:
        """Apply `change` to the stored task and persist the result.

        Returns:
            The stored task after the change, or None if the task does not exist.
        """
