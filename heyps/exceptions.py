"""
Custom exceptions for heyps.
"""

from typing import Optional


class BaseAppError(Exception):
    """Base exception class for heyps errors."""

    pass


class InputError(BaseAppError):
    """Exception raised for invalid user input (app, target, script path)."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class CommandExecutionError(BaseAppError):
    """Exception raised when an external program cannot be started."""

    pass


class ApplicationError(BaseAppError):
    """Exception raised for application lookup errors."""

    pass


class DiscoveryError(ApplicationError):
    """Exception raised when the Spotlight query itself fails."""

    pass


class ResolutionError(ApplicationError):
    """Exception raised when no installed application matches the request."""

    pass


class ScriptError(BaseAppError):
    """Exception raised for script dispatching errors."""

    pass


class CompatibilityError(ScriptError):
    """Exception raised when a script type cannot run in the target application."""

    pass


class DispatchError(ScriptError):
    """Exception raised when the dispatch command fails."""

    def __init__(
        self, message: str, returncode: int = -1, stderr: Optional[str] = None
    ):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr or ""
