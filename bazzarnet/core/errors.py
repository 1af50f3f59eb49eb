"""
Error types and FastAPI exception handlers.

Every application error is an ErrorResponse carrying the HTTP status it maps to.
The subclasses name the categories used throughout the catalog service.
"""

import traceback
from typing import Optional

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from bazzarnet.core.config import config
from bazzarnet.core.logger import logger


class ErrorResponse(Exception):
    """Custom exception for application errors"""

    def __init__(self, message: str, status_code: int = 400, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class BadRequestError(ErrorResponse):
    """Malformed input: invalid identifiers, incomplete vendor profile, schema failures"""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=400, details=details)


class ForbiddenError(ErrorResponse):
    """Authorization failure"""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=403, details=details)


class NotFoundError(ErrorResponse):
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=404, details=details)


class ConflictError(ErrorResponse):
    """Duplicate entity. Reported as 400, clients do not expect a 409."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=400, details=details)


class ErrorResponseModel(BaseModel):
    """Pydantic model for error responses"""
    error: str
    details: Optional[dict] = None


def _request_metadata(request: Request, event: str, status_code: int) -> dict:
    metadata = {
        "event": event,
        "status_code": status_code,
        "url": str(request.url),
        "method": request.method,
    }
    if config.environment == "development":
        metadata["traceback"] = traceback.format_exc()
    return metadata


async def error_response_handler(request: Request, exc: ErrorResponse):
    """Handler for ErrorResponse and its subclasses"""
    metadata = {**_request_metadata(request, "error_response", exc.status_code), **exc.details}

    if exc.status_code >= 500:
        logger.error(f"Error: {exc.message}", metadata=metadata)
    else:
        logger.warning(f"Error: {exc.message}", metadata=metadata)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "details": exc.details}
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handler for FastAPI HTTPException"""
    logger.warning(
        f"HTTPException: {exc.detail}",
        metadata=_request_metadata(request, "http_exception", exc.status_code)
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def format_validation_errors(errors) -> list:
    """Flatten pydantic error dicts into 'field: message' strings"""
    formatted = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        formatted.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return formatted


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Schema validation failures are client errors (400)"""
    details = format_validation_errors(exc.errors())
    logger.warning(
        "Request validation failed",
        metadata={**_request_metadata(request, "validation_error", 400), "errors": details}
    )

    return JSONResponse(
        status_code=400,
        content={"error": "Validation error", "details": details}
    )
