"""Domain exceptions.

All domain-level errors that represent catalog rule violations.
Controllers raise these; the orchestration layer branches on the
exception type, never on the message text.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogError(DomainError):
    """Base class for catalog-related errors."""

    pass


class DuplicateKeyError(CatalogError):
    """Raised when creating a record whose unique key is already taken."""

    def __init__(self, entity_type: str, key: str) -> None:
        """Initialize duplicate key error.

        Args:
            entity_type: Type of entity (e.g., "Category").
            key: The colliding key value.
        """
        super().__init__(
            f"{entity_type} '{key}' already exists",
            details={"entity_type": entity_type, "key": key},
        )
        self.entity_type = entity_type
        self.key = key


class InvalidReferenceError(CatalogError):
    """Raised when a record references an entity that does not exist."""

    def __init__(self, entity_type: str, field: str, value: str) -> None:
        """Initialize invalid reference error.

        Args:
            entity_type: Type of the referenced entity.
            field: Field holding the reference.
            value: The dangling reference value.
        """
        super().__init__(
            f"{field} references unknown {entity_type} '{value}'",
            details={"entity_type": entity_type, "field": field, "value": value},
        )
        self.entity_type = entity_type
        self.field = field
        self.value = value


class NotFoundError(CatalogError):
    """Raised when a lookup or update targets a key that does not exist."""

    def __init__(self, entity_type: str, key: str) -> None:
        """Initialize not found error.

        Args:
            entity_type: Type of entity (e.g., "Product").
            key: The key that was looked up.
        """
        super().__init__(
            f"{entity_type} '{key}' not found",
            details={"entity_type": entity_type, "key": key},
        )
        self.entity_type = entity_type
        self.key = key


class CatalogValidationError(CatalogError):
    """Raised when a catalog payload fails validation."""

    def __init__(self, entity_type: str, errors: list[dict[str, Any]]) -> None:
        """Initialize validation error.

        Args:
            entity_type: Type of entity the payload describes.
            errors: One entry per failing field, with "field" and "message".
        """
        fields = ", ".join(str(e.get("field")) for e in errors) or "payload"
        super().__init__(
            f"Invalid {entity_type} data: {fields}",
            details={"entity_type": entity_type, "errors": errors},
        )
        self.entity_type = entity_type
        self.errors = errors
