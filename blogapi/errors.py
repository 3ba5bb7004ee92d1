"""Errors raised by the blog API and their mapping onto HTTP responses."""

from __future__ import annotations

from http import HTTPStatus


class ApiError(Exception):
    """Base class for every error the API reports to its clients."""

    status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def to_response(self) -> tuple[dict[str, str], int]:
        """Return the JSON body and status code describing this error."""
        return {"error": str(self)}, int(self.status_code)


class PostNotFound(ApiError):
    """The requested post does not exist."""

    status_code = HTTPStatus.NOT_FOUND

    def __init__(self) -> None:
        super().__init__("Post not found")


class CommentNotFound(ApiError):
    """The requested comment does not exist."""

    status_code = HTTPStatus.NOT_FOUND

    def __init__(self) -> None:
        super().__init__("Comment not found")


class ValidationError(ApiError):
    """The request carried data that failed validation."""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, detail: str) -> None:
        super().__init__(f"Validation error: {detail}")
        self.detail = detail


class StorageError(ApiError):
    """Reading or writing the persistent store failed."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, detail: str) -> None:
        super().__init__(f"Storage error: {detail}")
        self.detail = detail


class InternalError(ApiError):
    """An unexpected failure inside the server."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self) -> None:
        super().__init__("Internal server error")


def register_error_handlers(app) -> None:
    """Make a Flask application answer every ApiError with its JSON response."""

    def _handle(error: ApiError):
        return error.to_response()

    app.register_error_handler(ApiError, _handle)