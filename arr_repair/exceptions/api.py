"""Sonarr/Radarr API related exceptions."""

from .base import ArrRepairException


class ApiError(ArrRepairException):
    """Base class for errors talking to the media server."""

    pass


class AuthorizationError(ApiError):
    """Raised when the server rejects the API key (HTTP 401)."""

    pass


class ApiConnectionError(ApiError):
    """Raised when the server cannot be reached."""

    pass


class ApiRequestError(ApiError):
    """Raised when the server answers with an error status or unreadable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UnsupportedOperationError(ApiError):
    """Raised when a server flavor does not implement an operation."""

    def __init__(self, server_type: str, operation: str):
        super().__init__(f"{server_type} doesn't implement {operation}")
        self.server_type = server_type
        self.operation = operation


class CommandTimeoutError(ApiError):
    """Raised when a remote command does not complete within its retry budget."""

    def __init__(self, command_name: str, message: str | None = None):
        super().__init__(message or f"timeout checking command {command_name}, not completed")
        self.command_name = command_name
