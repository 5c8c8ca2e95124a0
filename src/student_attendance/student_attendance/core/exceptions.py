class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when boundary input (API payloads, query parameters) is invalid."""
