from unittest.mock import MagicMock

import pytest

from app.correction.engine import CorrectionEngine
from app.speller.example_client_adapter import ExampleSpellerAdapter
from app.tasks.lifecycle import TaskLifecycleManager
from app.tasks.models import Language, TaskStatus
from app.worker.scheduler import CorrectionScheduler
from app.worker.task_runner import TaskRunner


@pytest.mark.integration
class TestDrainAgainstPostgres:
    def test_drain_completes_pending_task(self, pg_lifecycle: TaskLifecycleManager) -> None:
        task = pg_lifecycle.create("Helo world 2026", Language.EN)
        engine = CorrectionEngine(ExampleSpellerAdapter(), max_chunk_size=10000)
        settings = MagicMock(drain_batch_size=10, drain_interval_ms=30000, recovery_interval_ms=300000)
        scheduler = CorrectionScheduler(pg_lifecycle, TaskRunner(pg_lifecycle, engine), settings)

        assert scheduler.drain_pending() == 1

        stored = pg_lifecycle.get(task.id)
        assert stored.status is TaskStatus.COMPLETED
        assert stored.corrected_text == "Helo world 2026"
        assert stored.updated_at >= stored.created_at
