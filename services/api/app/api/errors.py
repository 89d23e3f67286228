from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from app.api.headers import create_failure_alert
from app.core.config import settings
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

PROBLEM_BASE_URL = "https://www.jhipster.tech/problem"
DEFAULT_TYPE = f"{PROBLEM_BASE_URL}/problem-with-message"
CONSTRAINT_VIOLATION_TYPE = f"{PROBLEM_BASE_URL}/constraint-violation"
PROBLEM_MEDIA_TYPE = "application/problem+json"


class BadRequestAlertException(Exception):
    """A client-supplied value broke a request invariant (e.g. an id on create)."""

    def __init__(self, default_message: str, entity_name: str, error_key: str):
        super().__init__(default_message)
        self.default_message = default_message
        self.entity_name = entity_name
        self.error_key = error_key


def problem_response(
    status: int,
    body: dict[str, Any],
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    content = {"status": status, **body}
    return JSONResponse(
        status_code=status,
        content=content,
        headers=headers,
        media_type=PROBLEM_MEDIA_TYPE,
    )


async def bad_request_alert_handler(
    request: Request, exc: BadRequestAlertException
) -> JSONResponse:
    logger.debug(
        "Bad request on %s %s: %s", request.method, request.url.path, exc.error_key
    )
    return problem_response(
        400,
        {
            "type": DEFAULT_TYPE,
            "title": exc.default_message,
            "message": f"error.{exc.error_key}",
            "params": exc.entity_name,
            "entityName": exc.entity_name,
            "errorKey": exc.error_key,
            "path": request.url.path,
        },
        headers=create_failure_alert(
            settings.client_app_name, exc.entity_name, exc.error_key
        ),
    )


def _field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    out: list[dict[str, str]] = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ())]
        out.append(
            {
                "objectName": loc[0] if loc else "request",
                "field": ".".join(loc[1:]),
                "message": str(err.get("msg", "")),
            }
        )
    return out


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Constraint violations are a plain 400, not FastAPI's 422
    return problem_response(
        400,
        {
            "type": CONSTRAINT_VIOLATION_TYPE,
            "title": "Method argument not valid",
            "message": "error.validation",
            "fieldErrors": _field_errors(exc),
            "path": request.url.path,
        },
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    try:
        title = HTTPStatus(exc.status_code).phrase
    except ValueError:
        title = "Error"
    return problem_response(
        exc.status_code,
        {
            "type": "about:blank",
            "title": title,
            "detail": exc.detail,
            "message": f"error.http.{exc.status_code}",
            "path": request.url.path,
        },
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BadRequestAlertException, bad_request_alert_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
