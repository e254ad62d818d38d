"""HTTP API for submitting correction tasks and polling their status.

- POST /api/v1/tasks
- GET  /api/v1/tasks/{task_id}
- GET  /health
"""

from uuid import UUID

from fastapi import APIRouter, FastAPI, Request, status

from app.api.errors import register_exception_handlers
from app.api.schemas import CreateTaskRequest, CreateTaskResponse, TaskResponse
from app.tasks.lifecycle import TaskLifecycleManager

router = APIRouter(prefix="/api/v1/tasks", tags=["Tasks"])


def _lifecycle(request: Request) -> TaskLifecycleManager:
    return request.app.state.lifecycle


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateTaskResponse,
    response_model_by_alias=True,
)
def create_task(body: CreateTaskRequest, request: Request) -> CreateTaskResponse:
    task = _lifecycle(request).create(body.text, body.language)
    return CreateTaskResponse.from_task(task)


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
def get_task(task_id: UUID, request: Request) -> TaskResponse:
    return TaskResponse.from_task(_lifecycle(request).get(task_id))


def create_app(lifecycle: TaskLifecycleManager) -> FastAPI:
    app = FastAPI(title="Error Free Text", version="0.1.0")
    app.state.lifecycle = lifecycle
    register_exception_handlers(app)
    app.include_router(router)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
