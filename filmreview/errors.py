# filmreview/errors.py
from flask import Response


class ApiError(Exception):
    """An error that maps straight onto an HTTP status and a plain-text body."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(ApiError):
    status_code = 400
    default_message = "Invalid request body"


class Unauthorized(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not Found"


class Conflict(ApiError):
    status_code = 409
    default_message = "Conflict"


class InternalError(ApiError):
    pass


def plain_text(message, status):
    return Response(message, status=status, mimetype="text/plain")
