"""Error Handlers: global exception handlers for the prompt enhancer API.

Invariants:
    - PromptEnhancerError -> its http_status and to_response() envelope
    - RequestValidationError -> 400 with the same INVALID_INPUT envelope the
      MCP and tool-dispatch paths produce
    - Exception (catch-all) -> never leaks internal details

Design Decisions:
    - Three-layer handler: domain (PromptEnhancerError), validation (Pydantic), catch-all
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from prompt_enhancer.core.errors import ErrorSeverity, InvalidInputError, PromptEnhancerError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PromptEnhancerError)
    async def prompt_enhancer_error_handler(request: Request, exc: PromptEnhancerError):
        """Handle all prompt enhancer domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"PromptEnhancerError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors as INVALID_INPUT."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "EXECUTION_FAILED",
                    "message": "Execution failed",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Reuse InvalidInputError's envelope; drop the leading "body" location."""
    reasons = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"] if part != "body"]
        reasons.append(f"{'.'.join(loc)}: {e['msg']}" if loc else e["msg"])
    return InvalidInputError(reasons).to_response()
