"""Linux distribution detection from release files.

Reads /etc/os-release (or /usr/lib/os-release) and falls back to
/etc/redhat-release on older Red Hat family systems. Any failure to read or
parse a file simply moves on to the next source.
"""
import logging
import re
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional

from platform_providers.base import FileProvider

from .schemas import LinuxRelease

logger = logging.getLogger(__name__)

OS_RELEASE_FILES = ("/etc/os-release", "/usr/lib/os-release")
REDHAT_RELEASE_FILE = "/etc/redhat-release"

# Substring of the lowercased first line -> (id, like aliases).
# Checked in order; the first marker found wins.
REDHAT_RELEASES = MappingProxyType({
    "centos": ("centos", ("rhel", "fedora")),
    "fedora": ("fedora", ("fedora",)),
    "red hat enterprise linux": ("rhel", ("fedora",)),
})

_REDHAT_VERSION = re.compile(r"(\d+)")


def _read_lines(files: FileProvider, path: str) -> List[str]:
    with files.open_read(path) as stream:
        return stream.read().decode("utf-8").splitlines()


def _clean_value(value: str) -> str:
    value = value.strip()
    # os-release allows one pair of either quote style
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return value


def _unique(values: Iterable[str]) -> tuple:
    seen: Dict[str, None] = {}
    for value in values:
        if value:
            seen.setdefault(value, None)
    return tuple(seen)


def parse_os_release(lines: Iterable[str]) -> Optional[LinuxRelease]:
    """Parse os-release KEY=VALUE lines.

    Args:
        lines: Lines of an os-release file.

    Returns:
        The release, or None if the file has no ID.
    """
    release_id = None
    version = None
    likes: List[str] = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key == "ID":
            release_id = _clean_value(value).lower()
        elif key == "VERSION_ID":
            version = _clean_value(value)
        elif key == "ID_LIKE":
            likes = _clean_value(value).lower().split()

    if not release_id:
        return None
    return LinuxRelease(id=release_id, version=version or None, like=_unique([release_id] + likes))


def parse_redhat_release(lines: Iterable[str]) -> Optional[LinuxRelease]:
    """Parse the first line of /etc/redhat-release.

    Only the major version can be read reliably from this file.
    """
    first = next(iter(lines), None)
    if first is None:
        return None
    first = first.lower()
    for marker, (release_id, likes) in REDHAT_RELEASES.items():
        if marker in first:
            match = _REDHAT_VERSION.search(first)
            version = match.group(1) if match else None
            return LinuxRelease(id=release_id, version=version, like=_unique((release_id,) + likes))
    return None


def _try_source(files: FileProvider, path: str, parser) -> Optional[LinuxRelease]:
    try:
        return parser(_read_lines(files, path))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.debug(f"Skipping release file {path}: {e}")
        return None


def detect_linux_release(files: FileProvider) -> Optional[LinuxRelease]:
    """Return the distribution of this Linux system, or None if unknown."""
    for path in OS_RELEASE_FILES:
        release = _try_source(files, path, parse_os_release)
        if release is not None:
            return release
    return _try_source(files, REDHAT_RELEASE_FILE, parse_redhat_release)
