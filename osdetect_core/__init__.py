"""
osdetect core - operating system and CPU architecture classifier.
"""
__version__ = "0.1.0"

from .exceptions import (
    OSDetectError,
    DetectionError,
    DetectionException,
    UnknownOSError,
    ConfigError,
    ValidationError,
)
from .platform import normalize_os, normalize_arch, guess_bitness_from_architecture
from .schemas import Classification, LinuxRelease
from .detector import Detector, detect
from .config import get_config, get_config_manager

__all__ = [
    "__version__",
    # Exceptions
    "OSDetectError",
    "DetectionError",
    "DetectionException",
    "UnknownOSError",
    "ConfigError",
    "ValidationError",
    # Normalization
    "normalize_os",
    "normalize_arch",
    "guess_bitness_from_architecture",
    # Detection
    "Classification",
    "LinuxRelease",
    "Detector",
    "detect",
    # Config
    "get_config",
    "get_config_manager",
]
