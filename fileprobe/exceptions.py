"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class CommandExecutionError(BaseAppError):
    """Exception raised when a command runner cannot execute a command."""

    pass


class FileInspectionError(BaseAppError):
    """Exception raised for file inspection errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class UnsupportedPlatformError(BaseAppError):
    """Exception raised when no file implementation exists for an OS family."""

    pass
