"""Exception hierarchy for carlog."""

from typing import Any, Optional


class CarlogError(Exception):
    """Base exception for all carlog errors."""


class ValidationError(CarlogError):
    """Caller-supplied data violates a business rule."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class NotFoundError(CarlogError):
    """A referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found with ID: {entity_id}")


class ConfigError(CarlogError):
    """Invalid configuration file or environment."""


class ApiError(CarlogError):
    """The HTTP API answered with a failure envelope or bad status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        errors: Any = None,
    ):
        self.status_code = status_code
        self.errors = errors
        super().__init__(message)
