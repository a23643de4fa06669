"""Exception handlers for the few errors that reach HTTP.

Listing and download failures never get here; the repository browser turns
them into empty results.  A missing login answers 401, bad requests 422 and
anything else 500, all in the ``{"status": "error", "message": "..."}``
envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from github_picker.domain.exceptions import AuthenticationFailure

logger = logging.getLogger(__name__)


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    @app.exception_handler(AuthenticationFailure)
    async def login_required_handler(
        request: Request, exc: AuthenticationFailure
    ) -> JSONResponse:
        logger.info("Login required for %s: %s", request.url.path, exc)
        return _error_json(401, str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = [
            f"{'.'.join(str(p) for p in err.get('loc', []))}: {err.get('msg', 'invalid')}"
            for err in exc.errors()
        ]
        return _error_json(422, "; ".join(messages))

    @app.exception_handler(Exception)
    async def unexpected_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s", request.url.path)
        return _error_json(500, "Unexpected error while talking to the picker.")
