"""Typed service errors; the API layer maps them onto HTTP statuses."""

from __future__ import annotations


class ServiceError(RuntimeError):
    """Base error carrying a stable text code (e.g. ``film_not_found``)."""

    code = 'service_error'

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class ValidationFailed(ServiceError):
    code = 'validation_failed'


class IncorrectParameterFormat(ServiceError):
    code = 'incorrect_parameter_format'


class ObjectNotFound(ServiceError):
    code = 'object_not_found'

    @classmethod
    def of(cls, entity: str, entity_id: int) -> 'ObjectNotFound':
        return cls(
            f'{entity} with id {entity_id} does not exist',
            code=f'{entity}_not_found',
        )


class ObjectAlreadyExists(ServiceError):
    code = 'object_already_exists'

    @classmethod
    def of(cls, entity: str, entity_id: int) -> 'ObjectAlreadyExists':
        return cls(
            f'{entity} with id {entity_id} already exists',
            code=f'{entity}_already_exists',
        )
