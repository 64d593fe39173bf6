# app/
# │
# ├── exceptions/
# │   ├── base.py                    # App-level errors (NotFoundError, DuplicateError, ...)
# │   ├── integrity_classifier.py    # Driver-level constraint classification
# │   └── mapper.py                  # Classification -> app-level errors

from .base import (
    RepositoryError,
    NotFoundError,
    DuplicateError,
    ReferencedEntityNotFoundError,
    IdentityImmutableError,
    ValidationFailedError,
    InvalidFieldError,
    EntityInUseError,
    StorageError,
)

__all__ = [
    "RepositoryError",
    "NotFoundError",
    "DuplicateError",
    "ReferencedEntityNotFoundError",
    "IdentityImmutableError",
    "ValidationFailedError",
    "InvalidFieldError",
    "EntityInUseError",
    "StorageError",
]
