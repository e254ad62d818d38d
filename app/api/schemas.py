from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.tasks.models import Language, Task


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateTaskRequest(_CamelModel):
    text: str = Field(min_length=3, examples=["Helo world! How are yuo?"])
    language: Language = Field(examples=["EN"])

    @field_validator("text")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Text cannot be empty")
        return value


class CreateTaskResponse(_CamelModel):
    id: UUID
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_task(cls, task: Task) -> "CreateTaskResponse":
        return cls(
            id=task.id,
            status=task.status.value,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskResponse(CreateTaskResponse):
    corrected_text: str | None = None
    error_message: str | None = None

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            status=task.status.value,
            created_at=task.created_at,
            updated_at=task.updated_at,
            corrected_text=task.corrected_text,
            error_message=task.error_message,
        )


class ErrorResponse(_CamelModel):
    error_code: int
    error_message: str
    path: str
    timestamp: datetime
