# devconnect/errors.py
"""
API error taxonomy.

Every error carries a field -> message map that is sent as the JSON body,
so clients can show the message next to the offending form field.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 400
    default_errors: Dict[str, str] = {}

    def __init__(self, errors: Optional[Dict[str, str]] = None, status_code: Optional[int] = None):
        self.errors = dict(errors) if errors is not None else dict(self.default_errors)
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.errors)


class ValidationFailed(ApiError):
    status_code = 400


class NotFound(ApiError):
    status_code = 404


class UserNotFound(NotFound):
    default_errors = {"email": "User not found"}


class ProfileNotFound(NotFound):
    default_errors = {"noprofile": "There is no profile for this user"}


class Conflict(ApiError):
    status_code = 400


class DuplicateEmail(Conflict):
    default_errors = {"email": "Email already exists"}


class DuplicateHandle(Conflict):
    default_errors = {"handle": "That handle already exists"}


class InvalidCredentials(ApiError):
    status_code = 400
    default_errors = {"password": "Password incorrect"}


class Internal(ApiError):
    status_code = 500
    default_errors = {"server": "Something went wrong, please try again"}


# ---------- FastAPI wiring ----------
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.errors)
    return JSONResponse(exc.errors, status_code=exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render body/type errors in the same field -> message shape."""
    errors: Dict[str, str] = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = loc[-1] if loc else "body"
        errors.setdefault(field, err.get("msg", "Invalid value"))
    return JSONResponse(errors, status_code=400)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
