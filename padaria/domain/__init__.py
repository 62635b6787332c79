"""Domain layer - record base classes and catalog exceptions.

Example usage:
    from padaria.domain import DuplicateKeyError

    try:
        await categories.create_category({"name": "Pães"})
    except DuplicateKeyError as exc:
        print(exc.key)
"""

from padaria.domain.base import Entity, Record, utcnow
from padaria.domain.exceptions import (
    CatalogError,
    CatalogValidationError,
    DomainError,
    DuplicateKeyError,
    InvalidReferenceError,
    NotFoundError,
)

__all__ = [
    # Base
    "Entity",
    "Record",
    "utcnow",
    # Exceptions
    "CatalogError",
    "CatalogValidationError",
    "DomainError",
    "DuplicateKeyError",
    "InvalidReferenceError",
    "NotFoundError",
]
