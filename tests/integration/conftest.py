import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from app.config.settings import Settings
from app.database.connection import close_pool, get_connection, init_pool, init_schema
from app.database.repositories.task_repository import PostgresTaskRepository
from app.tasks.lifecycle import TaskLifecycleManager


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "errorfreetext_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        init_schema()
    except Exception as e:
        close_pool()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. Set DB_* env to point at a test database"
        )
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture(autouse=True)
def clean_tasks(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    if "integration_pool" not in request.fixturenames:
        yield
        return
    yield
    with get_connection() as conn:
        conn.execute("DELETE FROM correction_tasks")
        conn.commit()


@pytest.fixture
def pg_repository(integration_pool: None) -> PostgresTaskRepository:
    return PostgresTaskRepository()


@pytest.fixture
def pg_lifecycle(pg_repository: PostgresTaskRepository) -> TaskLifecycleManager:
    return TaskLifecycleManager(pg_repository)
