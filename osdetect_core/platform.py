"""Platform name normalization.

Turns raw os.name / os.arch values into the fixed vocabulary used by
classifiers. This module is intentionally standalone with no dependencies on
other osdetect modules so that providers and the detector can both import it.
"""
import re
from types import MappingProxyType
from typing import Optional

UNKNOWN = "unknown"

OS_NAMES = (
    "linux", "osx", "windows", "freebsd", "openbsd", "netbsd",
    "sunos", "aix", "hpux", "os400", "zos",
)

ARCH_NAMES = (
    "x86_64", "x86_32", "sparc_32", "sparc_64", "arm_32", "aarch_64",
    "ppc_32", "ppc_64", "ppcle_64", "s390_32", "s390_64",
    "riscv", "riscv64", "loongarch_64",
)

# Raw architecture tokens (already stripped of separators) to canonical names.
ARCH_ALIASES = MappingProxyType({
    "x8664": "x86_64",
    "amd64": "x86_64",
    "ia32e": "x86_64",
    "em64t": "x86_64",
    "x64": "x86_64",
    "x8632": "x86_32",
    "x86": "x86_32",
    "i386": "x86_32",
    "i486": "x86_32",
    "i586": "x86_32",
    "i686": "x86_32",
    "ia32": "x86_32",
    "x32": "x86_32",
    "sparc": "sparc_32",
    "sparc32": "sparc_32",
    "sparcv9": "sparc_64",
    "sparc64": "sparc_64",
    "arm": "arm_32",
    "arm32": "arm_32",
    "armv6l": "arm_32",
    "armv7l": "arm_32",
    "armhf": "arm_32",
    "aarch64": "aarch_64",
    "arm64": "aarch_64",
    "ppc": "ppc_32",
    "ppc32": "ppc_32",
    "ppc64": "ppc_64",
    "ppc64le": "ppcle_64",
    "ppcle64": "ppcle_64",
    "s390": "s390_32",
    "s390x": "s390_64",
    "s39064": "s390_64",
    "riscv": "riscv",
    "riscv32": "riscv",
    "riscv64": "riscv64",
    "loongarch64": "loongarch_64",
})

# Checked in order against the normalized os.name; first prefix wins.
OS_PREFIXES = (
    ("aix", "aix"),
    ("hpux", "hpux"),
    ("os400", "os400"),
    ("linux", "linux"),
    ("darwin", "osx"),
    ("freebsd", "freebsd"),
    ("openbsd", "openbsd"),
    ("netbsd", "netbsd"),
    ("solaris", "sunos"),
    ("sunos", "sunos"),
    ("zos", "zos"),
)

# Matched anywhere in the normalized os.name ("Mac OS X" becomes "macosx").
OS_MARKERS = (
    ("windows", "windows"),
    ("mac", "osx"),
    ("osx", "osx"),
)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def _normalize(value: Optional[str]) -> str:
    if value is None:
        return ""
    return _NON_ALNUM.sub("", value.lower())


def normalize_os(value: Optional[str]) -> str:
    """Return the canonical OS name for a raw os.name value, or 'unknown'."""
    value = _normalize(value)
    for prefix, name in OS_PREFIXES:
        if not value.startswith(prefix):
            continue
        # OS/400 is reported as "OS/400"; "os4000" is something else
        if name == "os400" and len(value) > 5 and value[5].isdigit():
            continue
        return name
    for marker, name in OS_MARKERS:
        if marker in value:
            return name
    return UNKNOWN


def normalize_arch(value: Optional[str]) -> str:
    """Return the canonical architecture for a raw os.arch value, or 'unknown'."""
    return ARCH_ALIASES.get(_normalize(value), UNKNOWN)


def guess_bitness_from_architecture(arch: Optional[str]) -> int:
    """Guess the bitness of a raw or canonical architecture name.

    Args:
        arch: Raw os.arch value (e.g. "amd64") or canonical token (e.g. "arm_32").

    Returns:
        64 or 32, or 0 if the name says nothing about its width.
    """
    if not arch:
        return 0
    for candidate in (arch.lower(), normalize_arch(arch)):
        if candidate.endswith("64"):
            return 64
        if candidate.endswith("32"):
            return 32
    return 0


def is_linux(name: str) -> bool:
    """Check if a canonical OS name is Linux."""
    return name == "linux"
