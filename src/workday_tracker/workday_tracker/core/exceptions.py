class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee, client or record does not exist."""


class StorageError(DomainError):
    """Raised when the storage backend fails to read, write or decode data."""
