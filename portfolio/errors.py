"""Domain error kinds.

Services raise these; the app maps each kind to an HTTP status and a
stable error code (see ``create_app`` in ``portfolio.main``).
"""

from typing import Any


class PortfolioError(RuntimeError):
    """Base class for errors surfaced to API callers."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class NotFoundError(PortfolioError):
    code = "NOT_FOUND"
    status_code = 404


class ConflictError(PortfolioError):
    code = "CONFLICT"
    status_code = 409


class InvalidTransitionError(PortfolioError):
    """Raised when a post is asked to move to the state it is already in."""

    code = "INVALID_TRANSITION"
    status_code = 400


class DomainValidationError(PortfolioError):
    code = "VALIDATION_ERROR"
    status_code = 400


class UnauthorizedError(PortfolioError):
    code = "UNAUTHORIZED"
    status_code = 401


class CaptchaError(PortfolioError):
    code = "CAPTCHA_FAILED"
    status_code = 400
