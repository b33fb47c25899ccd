# errors.py
"""
Error taxonomy for the game backend.

Every failure a handler can produce maps to one of these classes. The
client only ever sees the class's generic message; the detail that
operators need goes to the log at the point where the error is raised.
"""


class ApiError(Exception):
    """Base class for errors that become a JSON failure envelope."""
    status_code = 500
    message = "An unexpected error occurred."

    def __init__(self, message=None, status_code=None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self):
        return {"success": False, "error": self.message, "error_code": self.status_code}

    def to_result(self):
        """Returns the (error_dict, status_code) tuple the route layer expects."""
        return self.to_dict(), self.status_code


class MalformedRequest(ApiError):
    status_code = 400
    message = "The request format is invalid."


class Unauthenticated(ApiError):
    status_code = 401
    message = "ID or password does not match."


class NotFound(ApiError):
    status_code = 404
    message = "The requested resource was not found."


class Conflict(ApiError):
    status_code = 409
    message = "The resource already exists."


class StoreFailure(ApiError):
    status_code = 500
    message = "A server error occurred."


class InternalUnexpected(ApiError):
    status_code = 500
    message = "A server error occurred."


class ContentDecodeError(ValueError):
    """Raised when a stored enum string is not a known member (strict decoding only)."""
    def __init__(self, enum_name, raw_value):
        self.enum_name = enum_name
        self.raw_value = raw_value
        super().__init__(f"Unknown {enum_name} value: {raw_value!r}")


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are missing."""
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing required configuration: {', '.join(self.missing)}")
