class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced row does not exist."""


class DuplicateError(ValidationError):
    """Raised when a unique constraint rejects an insert."""


class HierarchyCycleError(ValidationError):
    """Raised when a supervisor assignment would close a reporting cycle."""


class ExternalServiceError(DomainError):
    """Raised when a third-party service (API, storage, procurement DB) fails."""
