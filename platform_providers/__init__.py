"""Property and file providers used by the detector."""
from typing import Optional

from .base import FileProvider, SystemPropertyProvider
from .system_provider import (
    SimpleFileOperations,
    SimpleSystemProperties,
    reset_live_properties,
)

# Singleton provider instances
_property_provider: Optional[SystemPropertyProvider] = None
_file_provider: Optional[FileProvider] = None


def get_property_provider() -> SystemPropertyProvider:
    """Get the system property provider for this process (singleton)."""
    global _property_provider
    if _property_provider is None:
        _property_provider = SimpleSystemProperties()
    return _property_provider


def get_file_provider() -> FileProvider:
    """Get the file provider for this process (singleton)."""
    global _file_provider
    if _file_provider is None:
        _file_provider = SimpleFileOperations()
    return _file_provider


def reset_providers() -> None:
    """Reset the provider singletons and the live store. Useful for testing."""
    global _property_provider, _file_provider
    _property_provider = None
    _file_provider = None
    reset_live_properties()


__all__ = [
    "SystemPropertyProvider",
    "FileProvider",
    "SimpleSystemProperties",
    "SimpleFileOperations",
    "get_property_provider",
    "get_file_provider",
    "reset_providers",
]
