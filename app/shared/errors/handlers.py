"""
Centralized error handlers for FastAPI.

Every intercepted failure is classified into a FailureCategory and
rendered with the same payload:

    {"timestamp", "status", "error", "message", ["errors"], "path"}

``errors`` is present only for validation failures. Expected outcomes
(item missing, item already exists) never reach these handlers; routes
render them directly.
"""

import logging
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.shared.errors.categories import (
    INTERCEPTED_TYPES,
    FailureCategory,
    classify,
    describe,
)

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header", "cookie"})


def _field_errors(exc: RequestValidationError) -> dict[str, str]:
    """Map each failed field to its complaint. Later entries win on the same field."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(loc) or "request"
        errors[field] = error.get("msg", "Invalid value")
    return errors


def build_error_payload(
    exc: BaseException, category: FailureCategory, path: str
) -> dict[str, object]:
    """Build the error payload for an intercepted failure.

    Args:
        exc: The failure being rendered.
        category: The category exc was classified into.
        path: Literal written to the ``path`` field.

    Returns:
        A JSON-serializable payload.
    """
    spec = describe(category)
    payload: dict[str, object] = {
        "timestamp": datetime.now().isoformat(),
        "status": spec.status,
        "error": spec.label,
        "message": spec.message_for(exc),
    }
    if category is FailureCategory.VALIDATION:
        payload["errors"] = _field_errors(exc)
    payload["path"] = path
    return payload


def register_error_handlers(app: FastAPI, error_path: str) -> None:
    """Register the error normalizer on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        error_path: Literal written to the ``path`` field of every payload.
    """

    async def handle_failure(_request: Request, exc: Exception) -> JSONResponse:
        """Render any intercepted failure as the uniform error payload.

        Registered only for INTERCEPTED_TYPES, so classify() always
        finds a category.
        """
        category = classify(exc)
        payload = build_error_payload(exc, category, error_path)
        status = payload["status"]
        if status >= 500:
            logger.error(
                "%s: %s",
                payload["error"],
                type(exc).__name__,
                exc_info=(type(exc), exc, exc.__traceback__),
            )
        elif category is FailureCategory.VALIDATION:
            logger.warning("Validation failed for fields: %s", sorted(payload["errors"]))
        else:
            logger.warning("%s (%s): %s", payload["error"], type(exc).__name__, exc)
        return JSONResponse(status_code=status, content=payload)

    for exc_type in INTERCEPTED_TYPES:
        app.add_exception_handler(exc_type, handle_failure)
