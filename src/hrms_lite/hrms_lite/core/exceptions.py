class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a required field is missing or a value is malformed."""


class ConflictError(DomainError):
    """Raised when a natural key (e.g. employee_id) is already taken."""


class ReferentialError(DomainError):
    """Raised when a referenced record (e.g. the owning employee) does not exist."""


class NotFoundError(DomainError):
    """Raised when the target of an update/delete does not exist."""


class StoreError(DomainError):
    """Raised when the underlying database fails for a reason not classified above."""
