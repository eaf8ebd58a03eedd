class TravelGoError(Exception):
    """Base error carrying the HTTP status it maps to at the request boundary."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TravelGoError):
    status_code = 400


class DuplicateError(TravelGoError):
    status_code = 400


class UnauthorizedError(TravelGoError):
    status_code = 401


class ForbiddenError(TravelGoError):
    status_code = 403


class InvalidTokenError(ForbiddenError):
    pass


class NotFoundError(TravelGoError):
    """Raised when a resource is missing or belongs to another user."""

    status_code = 404
