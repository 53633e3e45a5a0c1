"""os-detector Exception Hierarchy."""
from typing import Optional


class OSDetectError(Exception):
    """Base exception for all os-detector errors."""
    pass


class DetectionError(OSDetectError):
    """Raised when the current platform cannot be classified."""
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


class UnknownOSError(DetectionError):
    """Raised when os.name does not map to a known operating system."""
    def __init__(self, raw_name: Optional[str]):
        self.raw_name = raw_name
        super().__init__(f"unknown os.name: {raw_name}")


class ConfigError(OSDetectError):
    """Raised when the configuration file cannot be used."""
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Invalid configuration: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class ValidationError(OSDetectError):
    """Raised when input validation fails."""
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Validation error for '{field}': {message}")


# Name used by build plugins that report detection failures.
DetectionException = DetectionError
