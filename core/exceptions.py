"""
Domain exceptions for the violation tracking backend.

Services raise these; app.py maps each one to an HTTP status:

    NotFoundError   -> 404
    ValidationError -> 400
    ConflictError   -> 409
    StorageError    -> 500
"""
from typing import Optional, Any, Dict


class DisciplineError(Exception):
    """Base exception for all domain errors."""

    status_code = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


class NotFoundError(DisciplineError):
    """Update target or referenced entity does not exist."""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(
            f"{resource_type} with id {resource_id} not found",
            code="NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ValidationError(DisciplineError):
    """Input failed a shape or range constraint."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.field = field


class ConflictError(DisciplineError):
    """Uniqueness violation."""

    status_code = 409

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="CONFLICT", details=details)


class StorageError(DisciplineError):
    """Underlying read/write failure."""

    status_code = 500

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message, code="STORAGE_ERROR")
