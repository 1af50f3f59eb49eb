"""
Core module initialization
"""

from .config import config
from .errors import (
    ErrorResponse,
    ErrorResponseModel,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
)
from .logger import logger

__all__ = [
    "config",
    "ErrorResponse",
    "ErrorResponseModel",
    "BadRequestError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "logger",
]
