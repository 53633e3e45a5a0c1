import platform
import struct
from typing import BinaryIO, Dict, Optional

from .base import FileProvider, SystemPropertyProvider

# Process-wide property store, seeded on first use.
_live_properties: Optional[Dict[str, str]] = None


def _os_version(system: str) -> str:
    if system == "Darwin":
        return platform.mac_ver()[0] or platform.release()
    if system == "Windows":
        return platform.version()
    return platform.release()


def default_properties() -> Dict[str, str]:
    """Return the properties describing the running interpreter and OS."""
    system = platform.system()
    return {
        "os.name": system,
        "os.arch": platform.machine(),
        "os.version": _os_version(system),
        "sun.arch.data.model": str(struct.calcsize("P") * 8),
    }


def _store() -> Dict[str, str]:
    global _live_properties
    if _live_properties is None:
        _live_properties = default_properties()
    return _live_properties


def reset_live_properties() -> None:
    """Drop the live property store. Useful for testing."""
    global _live_properties
    _live_properties = None


class SimpleSystemProperties(SystemPropertyProvider):
    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return _store().get(name, default)

    def set(self, name: str, value: str) -> Optional[str]:
        store = _store()
        previous = store.get(name)
        store[name] = value
        return previous

    def clear(self, name: str) -> Optional[str]:
        return _store().pop(name, None)


class SimpleFileOperations(FileProvider):
    def open_read(self, path: str) -> BinaryIO:
        return open(path, "rb")
