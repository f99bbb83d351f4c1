"""
Track descriptors and the filename helpers shared by both resolvers.
"""

import posixpath
import re
from dataclasses import dataclass, asdict
from typing import Optional
from urllib.parse import unquote

# Fixed extension -> MIME table; keys are lower-case without the dot
MIME_TYPES: dict[str, str] = {
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "m4a": "audio/mp4",
    "ogg": "audio/ogg",
    "flac": "audio/flac",
    "aac": "audio/aac",
    "mp4": "video/mp4",
}

SUPPORTED_EXTENSIONS = frozenset(MIME_TYPES)

DEFAULT_MIME = "audio/*"

_WORD_START = re.compile(r"\b\w")


@dataclass(frozen=True)
class TrackDescriptor:
    """One playable media resource."""

    title: str
    url: str
    mime: str

    def to_dict(self) -> dict:
        return asdict(self)


def get_extension(filename: str) -> Optional[str]:
    """Pure function - lower-cased extension of the last path segment, or None."""
    name = posixpath.basename(filename)
    if "." not in name:
        return None
    return name.rsplit(".", 1)[1].lower()


def is_supported(filename: str) -> bool:
    """Pure function - case-insensitive check against the supported set."""
    return get_extension(filename) in SUPPORTED_EXTENSIONS


def mime_for(filename: str) -> str:
    """Pure function - deterministic MIME type from the fixed table."""
    return MIME_TYPES.get(get_extension(filename) or "", DEFAULT_MIME)


def title_from_filename(filename: str) -> str:
    """Derive a display title from a (possibly percent-encoded) filename.

    Example:
        "my-awesome_song.mp3" -> "My Awesome Song"
    """
    name = unquote(posixpath.basename(filename))
    stem = name.rsplit(".", 1)[0] if "." in name else name
    title = _WORD_START.sub(
        lambda m: m.group(0).upper(), re.sub(r"[-_]", " ", stem)
    ).strip()
    # Dot-files like ".mp3" have no stem
    return title or name
