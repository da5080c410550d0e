class AppError(Exception):
    """Base error carrying the HTTP status used for the failure envelope."""

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    status_code = 400


class DuplicateEntryError(AppError):
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class UnauthenticatedError(AppError):
    status_code = 401


class ForbiddenError(AppError):
    status_code = 403


class DatabaseError(AppError):
    status_code = 500


class DatabaseUnavailableError(RuntimeError):
    """Raised at startup when the database cannot be reached."""
