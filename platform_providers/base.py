from abc import ABC, abstractmethod
from typing import BinaryIO, Optional


class SystemPropertyProvider(ABC):
    """Read and write access to the process-wide system property store."""

    @abstractmethod
    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the property value, or default if it is not set."""
        raise NotImplementedError

    @abstractmethod
    def set(self, name: str, value: str) -> Optional[str]:
        """Set a property and return its previous value."""
        raise NotImplementedError


class FileProvider(ABC):
    """Read access to files on the local machine."""

    @abstractmethod
    def open_read(self, path: str) -> BinaryIO:
        """Open a file for binary reading.

        Raises:
            FileNotFoundError: If the path does not exist.
            OSError: If the file exists but cannot be read.
        """
        raise NotImplementedError
