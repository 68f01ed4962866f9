import logging
from contextlib import contextmanager
from typing import Iterable, Mapping, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ApiError(HTTPException):
    """Base class of the errors rendered as ``{"error": detail}``."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"

    def __init__(self, detail: Optional[str] = None, status_code: Optional[int] = None, headers=None):
        super().__init__(
            status_code=status_code or type(self).status_code,
            detail=detail or self.default_detail,
            headers=headers,
        )


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "No token provided"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class InvalidCredential(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Invalid or expired token"


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not authorized"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class Conflict(ApiError):
    # Duplicates are reported as 400, clients already depend on it
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Already exists"


class StoreFailure(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Database operation failed"


def missing_fields(payload: Mapping, required: Iterable[str]) -> list:
    """Names of required fields that are absent, None or blank strings."""
    missing = []
    for name in required:
        value = payload.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


def require_fields(payload: Mapping, required: Iterable[str], detail: Optional[str] = None) -> None:
    missing = missing_fields(payload, required)
    if missing:
        raise ValidationError(detail or f"Missing required fields: {', '.join(missing)}")


@contextmanager
def store_guard(message: str):
    """Turn database errors into a StoreFailure carrying only ``message``.

    The driver error text is logged, never sent to the client.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception(f"{message}: {e}")
        raise StoreFailure(message) from e
