"""Exception-to-response mapping for the storefront API.

Protean's handlers cover domain errors (``ValidationError`` 400,
``ObjectNotFoundError`` 404). On top of those, request-body validation failures
become 400s with the same ``{"error": {field: [messages]}}`` shape, and gate
failures become 401/403.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from sokobo.access.gate import AccessDenied
from sokobo.utils.logging import get_logger

logger = get_logger(__name__)


def field_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    """Collapse pydantic's error list into ``{"field.path": [messages]}``."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        key = ".".join(location) or "body"
        errors.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return errors


def install_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = field_errors(exc)
        logger.info("request_rejected", path=request.url.path, errors=errors)
        return JSONResponse(status_code=400, content={"error": errors})

    @app.exception_handler(AccessDenied)
    async def access_denied_handler(request: Request, exc: AccessDenied) -> JSONResponse:
        logger.info("access_denied", path=request.url.path, status=exc.status_code, reason=exc.message)
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=headers)
