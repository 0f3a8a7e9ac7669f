class DomainError(Exception):
    """Base exception for failures surfaced to the user as a notice."""


class ValidationError(DomainError):
    """Raised when form input is missing or violates a rule (e.g. duplicate id)."""


class NotFoundError(DomainError):
    """Raised when a lookup misses (unknown user or employee id)."""


class AuthorizationError(DomainError):
    """Raised when a session lacks the role for an action."""


class NetworkError(DomainError):
    """Raised when the remote endpoint could not be reached."""


class ServerRejectionError(DomainError):
    """Raised when the remote endpoint answered non-2xx or ``success: false``."""
