from datetime import datetime, timedelta, timezone

import pytest

from app.database.repositories.memory_task_repository import InMemoryTaskRepository
from app.tasks.lifecycle import TaskLifecycleManager


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 2, 15, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture()
def lifecycle(repository: InMemoryTaskRepository, clock: FakeClock) -> TaskLifecycleManager:
    return TaskLifecycleManager(repository, clock=clock)
