from app.correction.engine import CorrectionEngine
from app.logging.logger import Log
from app.tasks.lifecycle import TaskLifecycleManager
from app.tasks.models import Task

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class TaskRunner:
    """Run one task: mark processing, correct, complete; fail on any error."""

    def __init__(
        self,
        lifecycle: TaskLifecycleManager,
        engine: CorrectionEngine,
    ) -> None:
        self._lifecycle = lifecycle
        self._engine = engine

    def run(self, task: Task) -> None:
        """Execute a single task. Errors end as a FAILED transition, not a raise."""
        Log.debug(f"Processing task: {task.id}")
        try:
            self._lifecycle.mark_processing(task.id)
            result = self._engine.correct(task)
            self._lifecycle.mark_completed(task.id, result.corrected_text, result.options)
            Log.info(f"Task {task.id} processed successfully")
        except Exception as exc:
            self._handle_failure(task, exc)

    def _handle_failure(self, task: Task, exc: Exception) -> None:
        Log.exception(f"Failed to process task {task.id}: {exc}")
        self._lifecycle.mark_failed(task.id, error_message_of(exc))


def error_message_of(exc: BaseException) -> str:
    message = str(exc).strip()
    return message or UNKNOWN_ERROR_MESSAGE
