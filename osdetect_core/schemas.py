"""Pydantic schemas for detection results.

Both models are frozen: a result is built once per detection and never
changed afterwards.
"""
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict

DETECTED_NAME = "detected.name"
DETECTED_ARCH = "detected.arch"
DETECTED_BITNESS = "detected.bitness"
DETECTED_VERSION = "detected.version"
DETECTED_VERSION_MAJOR = DETECTED_VERSION + ".major"
DETECTED_VERSION_MINOR = DETECTED_VERSION + ".minor"
DETECTED_CLASSIFIER = "detected.classifier"
DETECTED_RELEASE = "detected.release"
DETECTED_RELEASE_VERSION = DETECTED_RELEASE + ".version"
DETECTED_RELEASE_LIKE_PREFIX = DETECTED_RELEASE + ".like."


class LinuxRelease(BaseModel):
    """Distribution info read from an os-release or redhat-release file."""
    model_config = ConfigDict(frozen=True)

    id: str
    version: Optional[str] = None
    like: Tuple[str, ...] = ()


class Classification(BaseModel):
    """Normalized description of the running platform."""
    model_config = ConfigDict(frozen=True)

    name: str
    arch: str
    bitness: str
    version: Optional[str] = None
    version_major: Optional[str] = None
    version_minor: Optional[str] = None
    release_id: Optional[str] = None
    release_version: Optional[str] = None
    release_like: Tuple[str, ...] = ()
    classifier: str

    def to_properties(self) -> Dict[str, str]:
        """Return the detected.* properties in their fixed write order.

        Absent values are left out rather than written as empty strings.
        """
        props = {
            DETECTED_NAME: self.name,
            DETECTED_ARCH: self.arch,
            DETECTED_BITNESS: self.bitness,
        }
        if self.version is not None:
            props[DETECTED_VERSION] = self.version
        if self.version_major is not None:
            props[DETECTED_VERSION_MAJOR] = self.version_major
        if self.version_minor is not None:
            props[DETECTED_VERSION_MINOR] = self.version_minor
        if self.release_id is not None:
            props[DETECTED_RELEASE] = self.release_id
        if self.release_version is not None:
            props[DETECTED_RELEASE_VERSION] = self.release_version
        for like in self.release_like:
            props[DETECTED_RELEASE_LIKE_PREFIX + like] = "true"
        props[DETECTED_CLASSIFIER] = self.classifier
        return props
