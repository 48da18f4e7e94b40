"""Base exception classes for Arr Repair."""


class ArrRepairException(Exception):
    """Base exception for all Arr Repair errors.

    All custom exceptions in the arr_repair package should inherit
    from this base class for consistent error handling.
    """

    pass


class ConfigError(ArrRepairException):
    """Raised when required configuration is missing or invalid."""

    pass
