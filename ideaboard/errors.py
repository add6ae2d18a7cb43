"""API error taxonomy.

Route handlers and dependencies raise these; ``ideaboard.main`` renders
them as ``{"message": ...}`` with the matching status code.
"""

from fastapi import status


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error."

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request."


class InvalidCredentials(BadRequest):
    message = "Invalid credentials."


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid or expired token."


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden."


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found."
