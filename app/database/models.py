from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from app.tasks.models import (
    CompletedTask,
    CorrectionOption,
    FailedTask,
    Language,
    PendingTask,
    ProcessingTask,
    Task,
    TaskStatus,
)

_VARIANTS: dict[TaskStatus, type] = {
    TaskStatus.PENDING: PendingTask,
    TaskStatus.PROCESSING: ProcessingTask,
    TaskStatus.COMPLETED: CompletedTask,
    TaskStatus.FAILED: FailedTask,
}


@dataclass
class TaskRecord:
    """Represents a row from the correction_tasks table."""

    id: UUID
    original_text: str
    language: str
    status: str
    created_at: datetime
    updated_at: datetime
    corrected_text: str | None = None
    options: list[str] = field(default_factory=list)
    error_message: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "TaskRecord":
        return cls(
            id=row["id"],
            original_text=row["original_text"],
            language=row["language"],
            status=row["status"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            corrected_text=row["corrected_text"],
            options=list(row["options"] or []),
            error_message=row["error_message"],
        )

    @classmethod
    def from_task(cls, task: Task) -> "TaskRecord":
        return cls(
            id=task.id,
            original_text=task.original_text,
            language=task.language.value,
            status=task.status.value,
            created_at=task.created_at,
            updated_at=task.updated_at,
            corrected_text=task.corrected_text,
            options=[option.value for option in task.options],
            error_message=task.error_message,
        )

    def to_task(self) -> Task:
        status = TaskStatus(self.status)
        common: dict[str, Any] = {
            "id": self.id,
            "original_text": self.original_text,
            "language": Language(self.language),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "options": tuple(CorrectionOption(name) for name in self.options),
        }
        if status is TaskStatus.COMPLETED:
            return CompletedTask(**common, result_text=self.corrected_text or "")
        if status is TaskStatus.FAILED:
            return FailedTask(**common, failure_message=self.error_message or "")
        return _VARIANTS[status](**common)
