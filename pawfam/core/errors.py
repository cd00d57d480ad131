# pawfam/core/errors.py
"""
Application error taxonomy.

Services raise these; a single exception handler registered in
`pawfam.main` renders them as `{"message": ..., "field": ...}`.
"""
from http import HTTPStatus


class AppError(Exception):
    status_code: int = HTTPStatus.BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(self, message: str | None = None, *, field: str | None = None):
        self.message = message or self.default_message
        self.field = field
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        payload = {"message": self.message}
        if self.field:
            payload["field"] = self.field
        return payload


class ValidationError(AppError):
    status_code = HTTPStatus.BAD_REQUEST
    default_message = "Invalid request"


class BadRequestError(AppError):
    status_code = HTTPStatus.BAD_REQUEST


class ConflictError(AppError):
    """Duplicate identity. Reported as 400 with the conflicting field."""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"This {field} is already registered", field=field)


class InvalidCredentialsError(AppError):
    # Same message for unknown account and wrong password
    status_code = HTTPStatus.BAD_REQUEST
    default_message = "Invalid credentials"


class UnauthorizedError(AppError):
    status_code = HTTPStatus.UNAUTHORIZED
    default_message = "Authentication required"


class ForbiddenError(AppError):
    status_code = HTTPStatus.FORBIDDEN
    default_message = "Access denied"


class NotFoundError(AppError):
    status_code = HTTPStatus.NOT_FOUND
    default_message = "Not found"


class MailDeliveryError(AppError):
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Failed to send email. Please try again later."
