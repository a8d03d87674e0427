"""
Exception hierarchy for g2o.

Transport problems, malformed backend replies and capability gaps each get
their own type so callers can decide what to retry or surface.
"""


class G2OError(Exception):
    """Base class for all g2o errors."""

    pass


class BackendRequestError(G2OError):
    """Raised when the backend answers with a non-2xx status."""

    def __init__(self, backend: str, status_code: int, body: str):
        self.backend = backend
        self.status_code = status_code
        self.body = body
        super().__init__(f"{backend} request failed ({status_code}): {body}")


class BackendConnectionError(G2OError):
    """Raised when the backend could not be reached at all."""

    pass


class BackendResponseError(G2OError):
    """Raised when a 2xx reply is not a chat-completion JSON object."""

    pass


class UnsupportedOperationError(G2OError):
    """Raised for operations a backend cannot perform."""

    def __init__(self, backend: str, message: str):
        self.backend = backend
        super().__init__(message)


class ConfigValidationError(G2OError):
    """Raised when configuration validation fails."""

    pass
