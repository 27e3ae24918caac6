import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AuraBoardError(Exception):
    """Base error. `error` is what the caller sees; str(exc) is what we log."""

    status_code = 500
    error = "Server error"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.error)


class UnauthorizedError(AuraBoardError):
    status_code = 401
    error = "Unauthorized"


class ValidationError(AuraBoardError):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.error = message


class TaskNotFoundError(AuraBoardError):
    # The store's "record not found" is not exposed to callers.
    status_code = 500

    def __init__(self, task_id: str):
        super().__init__(f"task {task_id!r} not found")
        self.task_id = task_id


async def _handle_app_error(request: Request, exc: AuraBoardError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.warning("%s %s rejected (%d): %s", request.method, request.url.path, exc.status_code, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.error})


async def _handle_request_validation(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid {field}: {first.get('msg')}" if field else f"Invalid body: {first.get('msg')}"
    else:
        message = "Invalid request"
    logger.warning("%s %s rejected (400): %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


async def _catch_unhandled(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("%s %s crashed", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Server error"})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuraBoardError, _handle_app_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.middleware("http")(_catch_unhandled)
