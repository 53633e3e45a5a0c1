"""Operating system and CPU architecture detection.

The Detector reads raw platform values through a SystemPropertyProvider,
normalizes them, and writes the detected.* properties used to pick
platform-specific artifacts.
"""
import logging
import re
from typing import Iterable, MutableMapping, Optional, Sequence, Tuple

from platform_providers import get_file_provider, get_property_provider
from platform_providers.base import FileProvider, SystemPropertyProvider

from .exceptions import UnknownOSError
from .platform import UNKNOWN, guess_bitness_from_architecture, is_linux, normalize_arch, normalize_os
from .release import detect_linux_release
from .schemas import (
    DETECTED_ARCH,
    DETECTED_BITNESS,
    DETECTED_NAME,
    Classification,
    LinuxRelease,
)

logger = logging.getLogger(__name__)

OS_NAME = "os.name"
OS_ARCH = "os.arch"
OS_VERSION = "os.version"
SUN_ARCH_DATA_MODEL = "sun.arch.data.model"
IBM_VM_BITMODE = "com.ibm.vm.bitmode"
FAIL_ON_UNKNOWN_OS = "failOnUnknownOS"

DEFAULT_BITNESS = 32

# Properties copied into the live store when mirroring is enabled.
MIRRORED_PROPERTIES = (DETECTED_NAME, DETECTED_ARCH, DETECTED_BITNESS)

_VERSION_PATTERN = re.compile(r"^(\d+)(?:\.(\d+))?")


def parse_version(raw: Optional[str]) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Split an os.version value into (version, major, minor).

    Components that are missing stay None; "5.4.0-42" gives ("5.4", "5", "4")
    and "10" gives ("10", "10", None).
    """
    match = _VERSION_PATTERN.match((raw or "").strip())
    if not match:
        return None, None, None
    major, minor = match.group(1), match.group(2)
    if minor is None:
        return major, major, None
    return f"{major}.{minor}", major, minor


def build_classifier(
    name: str,
    arch: str,
    qualifiers: Sequence[str] = (),
    release_id: Optional[str] = None,
) -> str:
    """Join name, arch and qualifiers into a classifier.

    A release id is appended after the caller's qualifiers unless one of them
    already names it.
    """
    parts = [name, arch]
    parts.extend(qualifiers)
    if release_id and release_id not in qualifiers:
        parts.append(release_id)
    return "-".join(parts)


class Detector:
    """Detects the current platform and fills a property map."""

    def __init__(
        self,
        properties: Optional[SystemPropertyProvider] = None,
        files: Optional[FileProvider] = None,
        *,
        mirror_system_properties: bool = False,
        append_release_to_classifier: bool = False,
    ):
        """Initialize the detector.

        Args:
            properties: Source of raw platform values. Defaults to the process provider.
            files: Used to read Linux release files. Defaults to the process provider.
            mirror_system_properties: Also write name, arch and bitness back into
                the live system property store.
            append_release_to_classifier: Append the detected Linux release id to
                the classifier when the caller did not already pass it.
        """
        self.properties = properties or get_property_provider()
        self.files = files or get_file_provider()
        self.mirror_system_properties = mirror_system_properties
        self.append_release_to_classifier = append_release_to_classifier

    def detect(
        self,
        output: MutableMapping[str, str],
        classifier_with_likes: Iterable[str] = (),
    ) -> Classification:
        """Detect the platform and write detected.* entries into output.

        Args:
            output: Map receiving the detected properties.
            classifier_with_likes: Extra qualifiers appended to the classifier, in order.

        Returns:
            The detected classification.

        Raises:
            UnknownOSError: If os.name is not recognized and failOnUnknownOS is not "false".
        """
        self.log("Detecting the operating system and CPU architecture")

        qualifiers = list(classifier_with_likes)
        classification = self.classify(qualifiers)

        for name, value in classification.to_properties().items():
            self._set_property(output, name, value)
        return classification

    def classify(self, qualifiers: Sequence[str] = ()) -> Classification:
        """Compute the classification without writing any properties."""
        os_name_raw = self.properties.get(OS_NAME)
        os_arch_raw = self.properties.get(OS_ARCH)
        os_version_raw = self.properties.get(OS_VERSION)

        name = normalize_os(os_name_raw)
        arch = normalize_arch(os_arch_raw)

        if name == UNKNOWN and self._fail_on_unknown_os():
            raise UnknownOSError(os_name_raw)

        bitness = self.resolve_bitness(os_arch_raw)
        version, version_major, version_minor = parse_version(os_version_raw)

        release: Optional[LinuxRelease] = None
        if is_linux(name):
            release = detect_linux_release(self.files)

        release_id = release.id if release else None
        classifier = build_classifier(
            name,
            arch,
            qualifiers,
            release_id if self.append_release_to_classifier else None,
        )

        return Classification(
            name=name,
            arch=arch,
            bitness=str(bitness),
            version=version,
            version_major=version_major,
            version_minor=version_minor,
            release_id=release_id,
            release_version=release.version if release else None,
            release_like=release.like if release else (),
            classifier=classifier,
        )

    def resolve_bitness(self, os_arch_raw: Optional[str]) -> int:
        """Determine 32 or 64 bit from the JVM-style properties, then the architecture."""
        for prop in (SUN_ARCH_DATA_MODEL, IBM_VM_BITMODE):
            bitness = _parse_bitness(self.properties.get(prop, ""))
            if bitness:
                return bitness

        bitness = guess_bitness_from_architecture(os_arch_raw)
        if bitness:
            return bitness
        return DEFAULT_BITNESS

    def _fail_on_unknown_os(self) -> bool:
        value = self.properties.get(FAIL_ON_UNKNOWN_OS)
        return value is None or value.strip().lower() != "false"

    def _set_property(self, output: MutableMapping[str, str], name: str, value: str) -> None:
        output[name] = value
        if self.mirror_system_properties and name in MIRRORED_PROPERTIES:
            self.properties.set(name, value)
        self.log_property(name, value)

    def log(self, message: str) -> None:
        logger.info(message)

    def log_property(self, name: str, value: str) -> None:
        logger.info(f"{name}: {value}")


def _parse_bitness(value: Optional[str]) -> int:
    value = (value or "").strip()
    if value in ("32", "64"):
        return int(value)
    return 0


def detect(
    output: Optional[MutableMapping[str, str]] = None,
    classifier_with_likes: Iterable[str] = (),
    **kwargs,
) -> Classification:
    """Run a detection with the process providers.

    Args:
        output: Map receiving the properties. A new dict is used if None.
        classifier_with_likes: Extra classifier qualifiers.
        **kwargs: Passed to Detector (mirror_system_properties, append_release_to_classifier).
    """
    if output is None:
        output = {}
    return Detector(**kwargs).detect(output, classifier_with_likes)
