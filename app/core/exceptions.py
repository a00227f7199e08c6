# app/core/exceptions.py
"""
Domain errors raised by the service layer.

Services never raise HTTPException; the handlers registered in app.main turn
these into ``{"error": <message>, "code": <code>}`` responses.
"""


class AppError(Exception):
    status_code = 500
    code = "server_error"

    def __init__(self, message: str, code: str = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code


class ValidationError(AppError):
    """Malformed or missing input. Fixed by correcting the request."""
    status_code = 400
    code = "validation_error"


class NotFound(AppError):
    """Missing resource, or one owned by somebody else. Callers can't tell which."""
    status_code = 404
    code = "not_found"


class Unauthenticated(AppError):
    status_code = 401
    code = "unauthenticated"


class Conflict(AppError):
    """Order assignment kept colliding with concurrent inserts."""
    status_code = 409
    code = "conflict"
