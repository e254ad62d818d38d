from uuid import UUID


class TaskError(Exception):
    """Base exception for task lifecycle errors."""


class TaskValidationError(TaskError):
    """Raised when submitted text violates the content rules."""

    def __init__(self, message: str, error_code: int = 40000) -> None:
        super().__init__(message)
        self.error_code = error_code


class TaskNotFoundError(TaskError):
    """Raised when no task exists with the requested id."""

    error_code = 40401

    def __init__(self, task_id: UUID) -> None:
        super().__init__(f"Task with id '{task_id}' not found")
        self.task_id = task_id
