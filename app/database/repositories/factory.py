from app.config.settings import Settings
from app.database.repositories.base import BaseTaskRepository
from app.database.repositories.memory_task_repository import InMemoryTaskRepository
from app.database.repositories.task_repository import PostgresTaskRepository


class TaskRepositoryFactory:
    """Creates the task store selected by settings."""

    STORES: dict[str, type[BaseTaskRepository]] = {
        "postgres": PostgresTaskRepository,
        "memory": InMemoryTaskRepository,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTaskRepository:
        store = settings.task_store.lower()
        store_cls = cls.STORES.get(store)
        if store_cls is None:
            raise ValueError(
                f"Unknown task store '{store}'. Choose from: {list(cls.STORES)}"
            )
        return store_cls()
