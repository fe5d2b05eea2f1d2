"""Error taxonomy for the Shop & Product API.

Every failure a resource operation can report is a subclass of
ShopApiException, carrying the HTTP status the API layer should answer with.
"""

from typing import Any, Dict, List, Optional


class ShopApiException(Exception):
    """Base exception for Shop & Product API errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}


class ValidationError(ShopApiException):
    """Raised when a payload violates one or more field rules.

    Args:
        errors: Every violation found, as ``{"param": ..., "msg": ...}`` dicts.
    """

    def __init__(self, errors: List[Dict[str, str]]):
        super().__init__(
            message="Validation failed",
            status_code=400,
            details={"errors": errors},
        )
        self.errors = errors


class NotFoundError(ShopApiException):
    """Raised when the requested entity does not exist."""

    def __init__(self, entity: str, entity_id: Any = None):
        super().__init__(
            message=f"{entity} not found",
            status_code=404,
            details={"entity": entity, "id": str(entity_id) if entity_id is not None else None},
        )
        self.entity = entity


class ForeignKeyViolation(ShopApiException):
    """Raised when a record references a parent entity that does not exist."""

    def __init__(self, param: str, entity: str, entity_id: Any = None):
        super().__init__(
            message=f"{entity} not found",
            status_code=400,
            details={"param": param, "entity": entity, "id": str(entity_id) if entity_id is not None else None},
        )
        self.param = param
        self.entity = entity

    @property
    def errors(self) -> List[Dict[str, str]]:
        return [{"param": self.param, "msg": self.message}]


class StorageFailure(ShopApiException):
    """Raised when the datastore fails unexpectedly."""

    def __init__(self, message: str, error: Optional[Exception] = None):
        details = {}
        if error is not None:
            details = {"error": str(error), "error_type": type(error).__name__}
        super().__init__(message=message, status_code=500, details=details)
