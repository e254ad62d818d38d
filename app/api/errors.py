from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.schemas import ErrorResponse
from app.logging.logger import Log
from app.tasks.exceptions import TaskNotFoundError, TaskValidationError
from app.tasks.models import utc_now

REQUEST_VALIDATION_ERROR_CODE = 40000
INTERNAL_ERROR_CODE = 50000


def _error(request: Request, status_code: int, error_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(
        error_code=error_code,
        error_message=message,
        path=request.url.path,
        timestamp=utc_now(),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )


async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    return _error(request, status.HTTP_404_NOT_FOUND, exc.error_code, str(exc))


async def task_validation_handler(request: Request, exc: TaskValidationError) -> JSONResponse:
    Log.info(f"Rejected task input on {request.url.path}: {exc}")
    return _error(request, status.HTTP_400_BAD_REQUEST, exc.error_code, str(exc))


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    Log.info(f"Invalid request on {request.url.path}: {messages}")
    return _error(
        request,
        status.HTTP_400_BAD_REQUEST,
        REQUEST_VALIDATION_ERROR_CODE,
        "; ".join(messages) or "Invalid request",
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return _error(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_ERROR_CODE,
        "Internal server error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(TaskValidationError, task_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
