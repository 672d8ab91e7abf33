"""Custom exceptions for the application."""

from fastapi import status


class BackofficeError(Exception):
    """Base exception for back-office errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class NotFoundError(BackofficeError):
    """Raised when no row matches the requested identifier."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ReferenceConflictError(BackofficeError):
    """Raised when a row cannot be removed because other rows point to it."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, entity: str, entity_id: int, detail: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            detail
            or f"Cannot delete {entity} {entity_id} due to existing references "
            "in other tables. Please check dependencies."
        )


class InvalidDecisionError(BackofficeError):
    """Raised in strict mode when an admission decision is rejected."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, candidature_id: int, reason: str):
        self.candidature_id = candidature_id
        self.reason = reason
        super().__init__(f"Invalid decision for candidature {candidature_id}: {reason}")
