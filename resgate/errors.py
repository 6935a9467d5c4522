"""RES error type, the predefined error codes and helpers to convert errors."""

from __future__ import annotations

from typing import Any

CODE_ACCESS_DENIED = "system.accessDenied"
CODE_INTERNAL_ERROR = "system.internalError"
CODE_INVALID_PARAMS = "system.invalidParams"
CODE_INVALID_QUERY = "system.invalidQuery"
CODE_METHOD_NOT_FOUND = "system.methodNotFound"
CODE_NO_SUBSCRIPTION = "system.noSubscription"
CODE_NOT_FOUND = "system.notFound"
CODE_TIMEOUT = "system.timeout"
CODE_INVALID_REQUEST = "system.invalidRequest"
CODE_UNSUPPORTED_PROTOCOL = "system.unsupportedProtocol"
CODE_SUBJECT_TOO_LONG = "system.subjectTooLong"
CODE_DELETED = "system.deleted"
# HTTP only error codes
CODE_BAD_REQUEST = "system.badRequest"
CODE_METHOD_NOT_ALLOWED = "system.methodNotAllowed"
CODE_SERVICE_UNAVAILABLE = "system.serviceUnavailable"
CODE_FORBIDDEN = "system.forbidden"


class ResError(Exception):
    """An error with a RES error code, a message and optional data."""

    def __init__(self, code: str, message: str, data: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ResError(code={self.code!r}, message={self.message!r}, data={self.data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResError):
            return NotImplemented
        return (self.code, self.message, self.data) == (other.code, other.message, other.data)

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of the error; data is left out when None."""
        out: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            out["data"] = self.data
        return out


def internal_error(err: BaseException) -> ResError:
    """Wrap any error as a system.internalError."""
    return ResError(CODE_INTERNAL_ERROR, f"Internal error: {err}")


def res_error(err: BaseException) -> ResError:
    """Return err if it is a ResError, otherwise wrap it as an internal error."""
    if isinstance(err, ResError):
        return err
    return internal_error(err)


def is_error(err: BaseException | None, code: str) -> bool:
    """Report whether err is a ResError carrying the given code."""
    return isinstance(err, ResError) and err.code == code


ERR_ACCESS_DENIED = ResError(CODE_ACCESS_DENIED, "Access denied")
ERR_DISPOSING = ResError(CODE_INTERNAL_ERROR, "Internal error: disposing connection")
ERR_INTERNAL_ERROR = ResError(CODE_INTERNAL_ERROR, "Internal error")
ERR_INVALID_PARAMS = ResError(CODE_INVALID_PARAMS, "Invalid parameters")
ERR_INVALID_QUERY = ResError(CODE_INVALID_QUERY, "Invalid query")
ERR_METHOD_NOT_FOUND = ResError(CODE_METHOD_NOT_FOUND, "Method not found")
ERR_NO_SUBSCRIPTION = ResError(CODE_NO_SUBSCRIPTION, "No subscription")
ERR_NOT_FOUND = ResError(CODE_NOT_FOUND, "Not found")
ERR_TIMEOUT = ResError(CODE_TIMEOUT, "Request timeout")
ERR_INVALID_REQUEST = ResError(CODE_INVALID_REQUEST, "Invalid request")
ERR_UNSUPPORTED_PROTOCOL = ResError(CODE_UNSUPPORTED_PROTOCOL, "Unsupported protocol")
ERR_SUBJECT_TOO_LONG = ResError(CODE_SUBJECT_TOO_LONG, "Subject too long")
ERR_DELETED = ResError(CODE_DELETED, "Deleted")
# HTTP only errors
ERR_BAD_REQUEST = ResError(CODE_BAD_REQUEST, "Bad request")
ERR_METHOD_NOT_ALLOWED = ResError(CODE_METHOD_NOT_ALLOWED, "Method not allowed")
ERR_SERVICE_UNAVAILABLE = ResError(CODE_SERVICE_UNAVAILABLE, "Service unavailable")
ERR_FORBIDDEN_ORIGIN = ResError(CODE_FORBIDDEN, "Forbidden origin")