"""Domain-level exception hierarchy."""


class DomainError(Exception):
    """Base exception for service-layer errors."""

    def __init__(self, message: str = "Domain error") -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """Raised when a requested record cannot be located."""


class BadRequestError(DomainError):
    """Raised when a required request parameter is missing or blank."""


class HelpPageLoadError(RuntimeError):
    """Raised when a heuristic help page cannot be loaded at startup."""
