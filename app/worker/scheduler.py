from app.config.settings import Settings
from app.logging.logger import Log
from app.tasks.lifecycle import TaskLifecycleManager
from app.worker.periodic import PeriodicTask
from app.worker.task_runner import TaskRunner

STUCK_TASK_TIMEOUT_MINUTES = 30
STUCK_TASK_MESSAGE = (
    f"Task processing timeout after {STUCK_TASK_TIMEOUT_MINUTES} minutes"
)


class CorrectionScheduler:
    """Two independent periodic actions: drain pending tasks, recover stuck ones.

    Only one scheduler instance may run against a task store; nothing prevents
    two processes from claiming the same PENDING task.
    """

    def __init__(
        self,
        lifecycle: TaskLifecycleManager,
        task_runner: TaskRunner,
        settings: Settings,
    ) -> None:
        self._lifecycle = lifecycle
        self._task_runner = task_runner
        self._batch_size = settings.drain_batch_size
        self.drain_timer = PeriodicTask(
            "drain-pending",
            self.drain_pending,
            settings.drain_interval_ms / 1000,
        )
        self.recovery_timer = PeriodicTask(
            "recover-stuck",
            self.recover_stuck,
            settings.recovery_interval_ms / 1000,
        )

    def start(self) -> None:
        self.drain_timer.start()
        self.recovery_timer.start()

    def stop(self, timeout: float | None = None) -> None:
        self.drain_timer.stop(timeout)
        self.recovery_timer.stop(timeout)

    def drain_pending(self) -> int:
        """Process one batch of pending tasks in order. Returns the batch size."""
        Log.debug("Starting scheduled task processing")
        pending = self._lifecycle.claim_pending(self._batch_size)
        if not pending:
            Log.debug("No pending tasks found")
            return 0

        Log.info(f"Found {len(pending)} pending tasks to process")
        for task in pending:
            try:
                self._task_runner.run(task)
            except Exception as exc:
                Log.exception(f"Could not record outcome of task {task.id}: {exc}")
        return len(pending)

    def recover_stuck(self) -> int:
        """Fail tasks stuck in PROCESSING. Returns the number recovered."""
        Log.info("Checking for stuck tasks...")
        stuck = self._lifecycle.find_stuck(STUCK_TASK_TIMEOUT_MINUTES)
        for task in stuck:
            Log.warning(f"Recovering stuck task: {task.id}")
            try:
                self._lifecycle.mark_failed(task.id, STUCK_TASK_MESSAGE)
            except Exception as exc:
                Log.exception(f"Could not recover stuck task {task.id}: {exc}")
        return len(stuck)
