"""Error taxonomy shared by the CRUD layer, services and HTTP handlers.

Every error carries the HTTP status it maps to; the handlers in
``tenderhub.main`` render them into the ``{success, error: {message}}``
envelope.
"""


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class Unauthenticated(AppError):
    status_code = 401
    default_message = "Access token required"


class InvalidToken(AppError):
    status_code = 403
    default_message = "Invalid or expired token"


class NotFoundOrForbidden(AppError):
    """Resource is absent or not owned by the caller; the two are not distinguished."""
    status_code = 404
    default_message = "Not found or access denied"


class Conflict(AppError):
    status_code = 409
    default_message = "Resource already exists"


class PayloadTooLarge(AppError):
    status_code = 413
    default_message = "File is too large"


class UnsupportedMediaType(AppError):
    status_code = 415
    default_message = "Unsupported file type"


class TenderNotOpen(ValidationError):
    default_message = "Tender is not open for applications"


class DeadlinePassed(ValidationError):
    default_message = "Tender deadline has passed"


class DuplicateApplication(Conflict):
    default_message = "Company has already applied to this tender"


class InvalidTransition(ValidationError):
    default_message = "Status transition is not allowed"
