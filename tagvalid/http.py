"""HTTP boundary helpers — hand decoded payloads to the engine and map failures to 422s.

Usage:
    app = FastAPI()
    install(app)

    @app.post("/accounts")
    async def create(account: Account):
        validate_payload(account)
        ...
"""

from typing import Any, TypeVar

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tagvalid.engine import validator
from tagvalid.models import ValidationError

logger = structlog.get_logger()

T = TypeVar("T")


def validate_payload(payload: T) -> T:
    """Validate an already decoded payload; raises ValidationError when it is invalid."""
    return validator.validate_or_raise(payload)


def error_body(exc: ValidationError) -> dict[str, Any]:
    return {
        "error": "validation_error",
        "message": str(exc),
        "errors": exc.errors,
    }


async def validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Render a ValidationError as a flat field → message document."""
    logger.info(
        "request_validation_failed",
        path=request.url.path,
        method=request.method,
        fields=sorted(exc.errors),
    )
    return JSONResponse(status_code=422, content=error_body(exc))


def install(app: FastAPI) -> FastAPI:
    """Register the ValidationError handler on ``app``."""
    app.add_exception_handler(ValidationError, validation_exception_handler)
    return app
