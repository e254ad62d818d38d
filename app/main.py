import uvicorn

from app.api.app import create_app
from app.config.settings import Settings
from app.correction.engine import build_correction_engine
from app.database.connection import close_pool, init_pool, init_schema
from app.database.repositories.factory import TaskRepositoryFactory
from app.logging.logger import Log
from app.tasks.lifecycle import TaskLifecycleManager
from app.worker.scheduler import CorrectionScheduler
from app.worker.task_runner import TaskRunner


def main() -> None:
    """Entry point: initialize store -> build dependencies -> start scheduler -> serve API."""
    settings = Settings()
    Log.configure(settings.log_level)

    uses_postgres = settings.task_store.lower() == "postgres"
    if uses_postgres:
        init_pool(settings)
        init_schema()

    try:
        repository = TaskRepositoryFactory.create(settings)
        lifecycle = TaskLifecycleManager(repository)
        engine = build_correction_engine(settings)
        scheduler = CorrectionScheduler(lifecycle, TaskRunner(lifecycle, engine), settings)
        scheduler.start()
        try:
            uvicorn.run(
                create_app(lifecycle),
                host=settings.api_host,
                port=settings.api_port,
                log_level=settings.log_level.lower(),
            )
        finally:
            scheduler.stop()
            engine.close()
    finally:
        if uses_postgres:
            close_pool()


if __name__ == "__main__":
    main()
