"""
Response envelope and exception handlers for the HTTP layer.

Every route answers with ``{success, data?, error?: {message, code, details?}}``.
The core never builds this envelope; it returns values or raises
InvalidInputError, and the handlers here map that to HTTP.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from planning.shared.errors import InvalidInputError
from planning.shared.settings import get_settings


logger = logging.getLogger(__name__)


class ApiError(BaseModel):
    """Error member of the envelope."""

    message: str = Field(description="Human-readable error message")
    code: str = Field(description="Machine-readable error code")
    details: Optional[Dict[str, Any]] = Field(
        default=None, description="Diagnostic context"
    )


class ApiResponse(BaseModel):
    """Response envelope shared by every route."""

    success: bool = Field(description="Whether the request succeeded")
    data: Optional[Any] = Field(default=None, description="Payload on success")
    error: Optional[ApiError] = Field(default=None, description="Error on failure")


def success(data: Any) -> ApiResponse:
    """Wrap a payload in a successful envelope."""
    return ApiResponse(success=True, data=data)


def _error_response(
    request: Request,
    status_code: int,
    message: str,
    code: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    summary = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status_code": status_code,
        "endpoint": request.url.path,
    }
    if get_settings().debug_errors and details:
        summary.update(details)
    elif details and "field" in details:
        summary["field"] = details["field"]

    body = ApiResponse(
        success=False,
        error=ApiError(message=message, code=code, details=summary),
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump(exclude_none=True)),
    )


async def _invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.warning(
        f"[api={request.url.path}] Invalid input | field={exc.field}, message={exc.message}"
    )
    error = exc.to_dict()
    return _error_response(
        request, exc.status_code, error["message"], error["code"], error["details"]
    )


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"[api={request.url.path}] Malformed request | errors={len(exc.errors())}")
    return _error_response(
        request,
        400,
        "Request body failed schema validation",
        "VALIDATION_ERROR",
        {"errors": jsonable_encoder(exc.errors())},
    )


async def _unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"[api={request.url.path}] Unhandled error: {exc}")
    return _error_response(
        request,
        500,
        str(exc) or "Internal server error",
        "INTERNAL_SERVER_ERROR",
        {"exception": type(exc).__name__},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on ``app``."""
    app.add_exception_handler(InvalidInputError, _invalid_input_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_handler)
