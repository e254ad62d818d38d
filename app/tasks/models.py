"""Task entity as a tagged union over its lifecycle statuses.

Each variant carries only the fields valid for its status, so a completed task
always has corrected text and a failed task always has an error message.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar
from uuid import UUID


class Language(str, Enum):
    RU = "RU"
    EN = "EN"


class TaskStatus(str, Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class CorrectionOption(str, Enum):
    """Speller matching flags; `bit` is the value the speller API expects."""

    IGNORE_DIGITS = "IGNORE_DIGITS"
    IGNORE_URLS = "IGNORE_URLS"

    @property
    def bit(self) -> int:
        return _OPTION_BITS[self]


_OPTION_BITS = {
    CorrectionOption.IGNORE_DIGITS: 2,
    CorrectionOption.IGNORE_URLS: 4,
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class _TaskBase:
    id: UUID
    original_text: str
    language: Language
    created_at: datetime
    updated_at: datetime
    options: tuple[CorrectionOption, ...] = ()

    status: ClassVar[TaskStatus]

    @property
    def corrected_text(self) -> str | None:
        return None

    @property
    def error_message(self) -> str | None:
        return None

    def _common(self, now: datetime) -> dict[str, object]:
        return {
            "id": self.id,
            "original_text": self.original_text,
            "language": self.language,
            "created_at": self.created_at,
            "updated_at": max(now, self.created_at),
            "options": self.options,
        }

    def to_processing(self, now: datetime) -> "ProcessingTask":
        return ProcessingTask(**self._common(now))  # type: ignore[arg-type]

    def to_completed(
        self,
        corrected_text: str,
        options: tuple[CorrectionOption, ...],
        now: datetime,
    ) -> "CompletedTask":
        fields = self._common(now)
        fields["options"] = tuple(options)
        return CompletedTask(**fields, result_text=corrected_text)  # type: ignore[arg-type]

    def to_failed(self, error_message: str, now: datetime) -> "FailedTask":
        return FailedTask(**self._common(now), failure_message=error_message)  # type: ignore[arg-type]


@dataclass(frozen=True)
class PendingTask(_TaskBase):
    status: ClassVar[TaskStatus] = TaskStatus.PENDING


@dataclass(frozen=True)
class ProcessingTask(_TaskBase):
    status: ClassVar[TaskStatus] = TaskStatus.PROCESSING


@dataclass(frozen=True)
class CompletedTask(_TaskBase):
    status: ClassVar[TaskStatus] = TaskStatus.COMPLETED

    result_text: str = field(kw_only=True)

    @property
    def corrected_text(self) -> str:
        return self.result_text


@dataclass(frozen=True)
class FailedTask(_TaskBase):
    status: ClassVar[TaskStatus] = TaskStatus.FAILED

    failure_message: str = field(kw_only=True)

    @property
    def error_message(self) -> str:
        return self.failure_message


Task = PendingTask | ProcessingTask | CompletedTask | FailedTask


@dataclass(frozen=True)
class CorrectionResult:
    """Output of the correction engine for one task."""

    corrected_text: str
    options: tuple[CorrectionOption, ...] = ()
