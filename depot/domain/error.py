"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write would violate a uniqueness invariant."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidInputError(DomainError):
    """Raised for malformed caller-supplied data."""

    def __init__(self, message: str):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when an authenticated account acts on a resource it does not own."""

    def __init__(self, message: str):
        super().__init__(message)


class UnauthenticatedError(DomainError):
    """Raised when no valid session or API token was presented."""

    def __init__(self, message: str = "must be logged in to perform that action"):
        super().__init__(message)


class TransientError(DomainError):
    """Storage was unavailable or timed out; the caller may retry."""

    def __init__(self, message: str):
        super().__init__(message)
