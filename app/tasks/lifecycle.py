from collections.abc import Callable
from datetime import datetime, timedelta
from uuid import UUID, uuid4

from app.database.repositories.base import BaseTaskRepository
from app.logging.logger import Log
from app.tasks.exceptions import TaskNotFoundError
from app.tasks.models import (
    CorrectionOption,
    Language,
    PendingTask,
    Task,
    TaskStatus,
    utc_now,
)
from app.tasks.validator import validate_text_content


class TaskLifecycleManager:
    """Owns every status transition of a task.

    PENDING -> PROCESSING -> COMPLETED | FAILED. Each operation touches one
    task through the repository's atomic `update`. Writes onto a task that is
    not in the expected source status are logged but not blocked.
    """

    def __init__(
        self,
        repository: BaseTaskRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def create(self, original_text: str, language: Language) -> PendingTask:
        """Validate the text and persist a new PENDING task.

        Raises:
            TaskValidationError: if the text violates the content rules.
        """
        Log.info(f"Creating new task with language: {language.value}")
        validate_text_content(original_text)

        now = self._clock()
        task = PendingTask(
            id=uuid4(),
            original_text=original_text,
            language=language,
            created_at=now,
            updated_at=now,
        )
        self._repository.add(task)
        Log.info(f"Task created with id: {task.id}")
        return task

    def get(self, task_id: UUID) -> Task:
        task = self._repository.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def claim_pending(self, limit: int) -> list[Task]:
        """Return up to `limit` PENDING tasks, oldest first. Does not mutate."""
        Log.debug(f"Fetching {limit} pending tasks")
        return self._repository.find_by_status(TaskStatus.PENDING, limit)

    def mark_processing(self, task_id: UUID) -> Task:
        Log.debug(f"Marking task {task_id} as processing")

        def change(task: Task) -> Task:
            self._warn_unexpected(task, TaskStatus.PENDING, TaskStatus.PROCESSING)
            return task.to_processing(self._clock())

        return self._update(task_id, change)

    def mark_completed(
        self,
        task_id: UUID,
        corrected_text: str,
        options: tuple[CorrectionOption, ...] = (),
    ) -> Task:
        Log.info(f"Marking task {task_id} as completed")

        def change(task: Task) -> Task:
            self._warn_unexpected(task, TaskStatus.PROCESSING, TaskStatus.COMPLETED)
            return task.to_completed(corrected_text, options, self._clock())

        return self._update(task_id, change)

    def mark_failed(self, task_id: UUID, error_message: str) -> Task:
        """Mark a task FAILED. Repeated calls keep FAILED with the latest message."""
        Log.error(f"Marking task {task_id} as failed: {error_message}")

        def change(task: Task) -> Task:
            if task.status is not TaskStatus.FAILED:
                self._warn_unexpected(task, TaskStatus.PROCESSING, TaskStatus.FAILED)
            return task.to_failed(error_message, self._clock())

        return self._update(task_id, change)

    def find_stuck(self, timeout_minutes: int) -> list[Task]:
        """PROCESSING tasks not updated for more than `timeout_minutes`."""
        cutoff = self._clock() - timedelta(minutes=timeout_minutes)
        return self._repository.find_by_status_updated_before(
            TaskStatus.PROCESSING, cutoff
        )

    def _update(self, task_id: UUID, change: Callable[[Task], Task]) -> Task:
        updated = self._repository.update(task_id, change)
        if updated is None:
            raise TaskNotFoundError(task_id)
        return updated

    @staticmethod
    def _warn_unexpected(task: Task, expected: TaskStatus, target: TaskStatus) -> None:
        if task.status is not expected:
            Log.warning(
                f"Task {task.id} moves {task.status.value} -> {target.value}, "
                f"expected source status {expected.value}"
            )
