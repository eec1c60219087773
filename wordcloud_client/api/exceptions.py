class ApiError(Exception):
    """Raised when a call to the processing service fails."""


class ApiNetworkError(ApiError):
    """Raised when the service cannot be reached (connection, timeout, transport)."""


class ApiResponseError(ApiError):
    """Raised when the service answers with an error status or an unreadable body."""
