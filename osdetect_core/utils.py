"""Utility functions for os-detector."""
import re
from pathlib import Path
from typing import Mapping, Tuple

from .exceptions import OSDetectError, ValidationError

# Property names as accepted by -D: dotted identifiers such as os.name
PROPERTY_NAME_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_.\-]*$')


def parse_definition(definition: str) -> Tuple[str, str]:
    """Parse a KEY=VALUE property definition.

    Args:
        definition: String like "os.name=Linux". A missing "=VALUE" sets "true".

    Returns:
        Tuple of (key, value).

    Raises:
        ValidationError: If the key is empty or malformed.
    """
    key, sep, value = definition.partition("=")
    key = key.strip()
    if not key:
        raise ValidationError("define", "Property name cannot be empty")
    if not PROPERTY_NAME_PATTERN.match(key):
        raise ValidationError("define", f"Invalid property name: {key}")
    return key, value if sep else "true"


def _escape(text: str, is_key: bool = False) -> str:
    text = text.replace("\\", "\\\\").replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
    if is_key:
        text = text.replace("=", "\\=").replace(":", "\\:").replace(" ", "\\ ")
    return text


def format_properties(properties: Mapping[str, str]) -> str:
    """Format a mapping as .properties text, one key=value per line, in map order."""
    return "".join(f"{_escape(k, is_key=True)}={_escape(v)}\n" for k, v in properties.items())


def write_properties_file(path: Path, properties: Mapping[str, str]) -> None:
    """Write properties to a file, creating parent directories.

    Args:
        path: Destination file.
        properties: Entries to write.

    Raises:
        OSDetectError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(format_properties(properties))
    except OSError as e:
        raise OSDetectError(f"Cannot write {path}: {e}") from e
