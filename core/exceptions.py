# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str,*, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when request data is invalid or violates constraints."""


class NotFoundError(DomainError):
    """Raised when an entity is not found."""


class BusinessRuleError(DomainError):
    """Raised when business rules are violated (e.g., an empty reporting range)."""


class MissingParameterError(ValidationError):
    """Raised when a required report parameter is absent."""
    def __init__(self, message: str, *, code: str | None = "ERRORS.BAD_REQUEST"):
        super().__init__(message, code=code)


class InvalidRangeError(BusinessRuleError):
    """Raised when no accounting period resolves for the requested dates."""
    def __init__(self, message: str, *, code: str | None = "ERRORS.BAD_DATE_INTERVAL"):
        super().__init__(message, code=code)
