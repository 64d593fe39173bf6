"""
Application-level errors raised by repositories and services.

Every error carries a canonical `error_code`; the HTTP layer never inspects
driver errors, it only asks the exception for `http_status()` and
`to_payload()`.
"""

from typing import Iterable


class RepositoryError(Exception):
    """
    Base exception for repository/service errors.

    - message: human-friendly message (safe to show to clients)
    - fields: optional list of field names related to the error (e.g., ['cid'])
    - constraint: optional DB constraint name (for logs only, never in payloads)
    - error_code: canonical short code (e.g., 'duplicate', 'not_found') used by clients
    """

    # Single status table applied to every resource.
    ERROR_CODE_TO_STATUS = {
        "not_found": 404,
        "duplicate": 409,
        "reference_not_found": 409,
        "in_use": 409,
        "identity_immutable": 400,
        "invalid_id": 400,
        "validation_failed": 422,
        "invalid_field": 422,
        "storage_error": 500,
    }

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 constraint: str | None = None, error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields) if fields else None
        self.constraint = constraint
        self.error_code = error_code

    def __str__(self) -> str:
        base = self.message
        parts = []
        if self.fields:
            parts.append(f"fields: {', '.join(self.fields)}")
        if self.constraint:
            parts.append(f"constraint: {self.constraint}")
        if self.error_code:
            parts.append(f"code: {self.error_code}")
        if parts:
            return f"{base} ({'; '.join(parts)})"
        return base

    def to_payload(self) -> dict:
        """
        Return a JSON-serializable dict suitable for HTTP responses:
            {
                "detail": "warehouse not found",
                "code": "reference_not_found",
                "fields": ["warehouse_id"],
            }
        The constraint name and raw DB messages are never included.
        """
        payload = {"detail": self.message}
        if self.error_code:
            payload["code"] = self.error_code
        if self.fields:
            payload["fields"] = list(self.fields)
        return payload

    def http_status(self) -> int:
        """
        HTTP status for this error, looked up from `error_code`.
        Unknown or missing codes fall back to 400.
        """
        if self.error_code:
            return self.ERROR_CODE_TO_STATUS.get(self.error_code, 400)
        return 400


class NotFoundError(RepositoryError):
    def __init__(self, message: str = "Not found", *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="not_found")


class DuplicateError(RepositoryError):
    """A uniqueness constraint would be violated (conflict)."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None, constraint: str | None = None):
        super().__init__(message, fields=fields, constraint=constraint, error_code="duplicate")


class ReferencedEntityNotFoundError(RepositoryError):
    """
    A foreign-key target does not exist.

    `fields` holds the failing foreign-key column(s) and `reference` the
    referenced table, when the storage engine (or a follow-up probe) could
    tell which reference failed.
    """

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 constraint: str | None = None, reference: str | None = None):
        super().__init__(message, fields=fields, constraint=constraint, error_code="reference_not_found")
        self.reference = reference


class IdentityImmutableError(RepositoryError):
    """Raised when an update tries to change the record's own identity."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="identity_immutable")


class ValidationFailedError(RepositoryError):
    """Caller-supplied data failed required-field or format checks."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 constraint: str | None = None, error_code: str = "validation_failed"):
        super().__init__(message, fields=fields, constraint=constraint, error_code=error_code)


class InvalidFieldError(RepositoryError):
    """Raised when the caller passes unexpected/unknown fields to repository methods."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="invalid_field")


class EntityInUseError(RepositoryError):
    """Delete rejected because other records still reference this one."""

    def __init__(self, message: str, *, constraint: str | None = None):
        super().__init__(message, constraint=constraint, error_code="in_use")


class StorageError(RepositoryError):
    """Any storage failure that could not be classified. Opaque and not retried."""

    def __init__(self, message: str, *, constraint: str | None = None):
        super().__init__(message, constraint=constraint, error_code="storage_error")


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
