"""
Error taxonomy and translation of store errors into HTTP responses.
"""

from __future__ import annotations

from dataclasses import dataclass

# 400
ERR_BAD_REQUEST = "Bad request"
ERR_MISSING_FIELDS = "One or more required fields is missing"
ERR_BAD_DATE = "The date(s) provided do not conform to the RFC3339 format."
ERR_NO_QUERY = "No query provided"
ERR_QUERY_MUST_BE_INT = "Query parameter must be an integer"
ERR_QUERY_MUST_BE_BOOL = "Query parameter must be a boolean"
ERR_BAD_SECTION_NUMBER = "Invalid section number, must be between 1 and 14"

# 401
ERR_NO_TOKEN = "No authentication token provided"
ERR_BAD_TOKEN = "Bad token"

# 404
ERR_NOT_FOUND = "Item not found"

# 409
ERR_BOOKMARK_CONFLICT = "Bookmark with that link already exists"
ERR_EVENT_SECTION_CONFLICT = "That section is already part of the event"

ERR_UNEXPECTED = "Unexpected error"

HTTP_RESPONSE_CODE_MAP = {
    400: "Bad request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Item not found",
    409: "Conflict",
}


class ApiError(Exception):
    """Base class for errors detected by the API itself."""

    status_code = 500

    def __init__(self, message: str | None = None):
        self.message = message or HTTP_RESPONSE_CODE_MAP.get(
            self.status_code, ERR_UNEXPECTED
        )
        super().__init__(self.message)


class ValidationError(ApiError):
    """Missing field, unparseable date or out-of-range value."""

    status_code = 400


class AuthError(ApiError):
    status_code = 401


class NotFoundError(ApiError):
    status_code = 404


class ConflictError(ApiError):
    status_code = 409


class StoreError(Exception):
    """Failure reported by the document store, tagged with a status code."""

    def __init__(self, status_code: int, detail: str = ""):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"store error {status_code}: {detail}".rstrip(": "))


@dataclass(frozen=True)
class HTTPResponseCode:
    code: int
    message: str


def interpret_error(exc: BaseException) -> HTTPResponseCode:
    """
    Map any exception to the status code and message returned to the client.

    Store errors go through HTTP_RESPONSE_CODE_MAP and keep their code even
    when it is not in the table. Anything unrecognised is a 500 carrying the
    raw error text.
    """
    if isinstance(exc, StoreError):
        message = HTTP_RESPONSE_CODE_MAP.get(exc.status_code, ERR_UNEXPECTED)
        return HTTPResponseCode(code=exc.status_code, message=message)
    if isinstance(exc, ApiError):
        return HTTPResponseCode(code=exc.status_code, message=exc.message)
    return HTTPResponseCode(code=500, message=str(exc))
