"""Small helpers shared by the entity services."""

from __future__ import annotations

import logging
from functools import wraps
from typing import NoReturn, Optional, TypeVar

from pymongo.errors import PyMongoError

from filmorate_api.services.errors import (
    IncorrectParameterFormat,
    ObjectNotFound,
    ValidationFailed,
)

T = TypeVar('T')


def require(value: Optional[T], entity: str, entity_id: int) -> T:
    """Turn a storage ``None`` sentinel into ObjectNotFound."""
    if value is None:
        raise ObjectNotFound.of(entity, entity_id)
    return value


def reject(log: logging.Logger, message: str, **extra) -> NoReturn:
    """Log a validation failure and raise it."""
    log.error('validation_failed', extra={'reason': message, **extra})
    raise ValidationFailed(message)


def positive_count(log: logging.Logger, count: int) -> int:
    if count < 1:
        log.error('incorrect_count', extra={'count': count})
        raise IncorrectParameterFormat(
            f'count must be a positive integer, got {count}')
    return count


def storage_errors(operation: str):
    """Re-raise driver failures as a coded RuntimeError (mapped to 500)."""
    def decorator(fn):
        @wraps(fn)
        async def wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except PyMongoError as error:
                raise RuntimeError(
                    f'mongo_{operation}_error: {error}') from error
        return wrapper
    return decorator
