"""
HTTP response helpers (error contract + success envelopes).

- success_response(data, status=200)
- created_response(data, location=None)
- error_response(exc)
- register_exception_handlers(app)
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from nexus_kernel.error_codes import DEFAULT_ERROR_CODE, ERROR_CODES, http_status_for, message_for
from nexus_kernel.exceptions import DomainError
from nexus_kernel.http.models import Envelope, ErrorDetail
from nexus_kernel.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


def status_for(code: str) -> int:
    """HTTP status for an error code; unknown codes are internal errors."""
    return http_status_for(code)


def error_detail_for(exc: BaseException) -> ErrorDetail:
    """
    Map any exception to its public error detail.

    Domain errors keep their code, message and details. Domain errors with an
    unregistered or server-side code, and every other exception, become a
    generic internal_error with no internal detail.
    """
    if isinstance(exc, DomainError) and exc.code in ERROR_CODES and status_for(exc.code) < 500:
        return ErrorDetail(code=exc.code, message=exc.message, details=exc.details)
    return ErrorDetail(code=DEFAULT_ERROR_CODE, message=message_for(DEFAULT_ERROR_CODE))


def envelope_for_error(exc: BaseException) -> Envelope:
    return Envelope(success=False, error=error_detail_for(exc))


def success_response(data: Any, status: int = 200, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    body = Envelope(success=True, data=jsonable_encoder(data))
    return JSONResponse(body.model_dump(exclude_none=True), status_code=status, headers=headers or {})


def created_response(data: Any, location: Optional[str] = None) -> JSONResponse:
    headers = {"Location": location} if location else None
    return success_response(data, status=201, headers=headers)


def error_response(exc: BaseException) -> JSONResponse:
    detail = error_detail_for(exc)
    envelope = Envelope(success=False, error=detail)
    return JSONResponse(envelope.model_dump(exclude_none=True), status_code=status_for(detail.code))


# ─────────────────────────── Registration ───────────────────────────

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def handle_domain_error(req: Request, exc: DomainError) -> JSONResponse:
        if status_for(exc.code) >= 500:
            logger.error("Domain error mapped to internal error", code=exc.code, error=exc.message, path=req.url.path)
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(req: Request, exc: RequestValidationError) -> JSONResponse:
        code = "validation_error"
        body = Envelope(
            success=False,
            error=ErrorDetail(code=code, message=message_for(code), details={"errors": jsonable_encoder(exc.errors())}),
        )
        return JSONResponse(body.model_dump(exclude_none=True), status_code=status_for(code))

    @app.exception_handler(Exception)
    async def handle_unhandled(req: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception", path=req.url.path, error_type=exc.__class__.__name__)
        return error_response(exc)
