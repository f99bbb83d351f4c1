"""
Input validation for playlist sources.

Both validators are pure string functions: they never touch the network or
the filesystem, so they can run before any I/O is attempted.
"""

import posixpath
import re
from urllib.parse import urlsplit, urlunsplit

from requests.utils import requote_uri

from .errors import DirectoryTraversalError, InvalidUrlError

ALLOWED_SCHEMES = ("http", "https")

# scheme://host.tld[/path], checked against the raw input
_URL_SHAPE = re.compile(r"https?://[a-zA-Z0-9][\w\-.]+\.[a-zA-Z]{2,}(/.*)?", re.ASCII)


def validate_url(candidate: str) -> str:
    """Validate a remote playlist URL and return its canonical form.

    Args:
        candidate: Untrusted URL string

    Returns:
        Canonical absolute URL (lower-case scheme and host, "/" for an
        empty path, unsafe characters percent-encoded)

    Raises:
        InvalidUrlError: reason "malformed", "protocol" or "format". The
            "protocol" message is never wrapped.
    """
    try:
        parts = urlsplit(candidate)
        scheme = parts.scheme.lower()
        hostname = parts.hostname
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidUrlError(InvalidUrlError.MALFORMED, "malformed URL") from e

    if not scheme:
        raise InvalidUrlError(InvalidUrlError.MALFORMED, "malformed URL")

    if scheme not in ALLOWED_SCHEMES:
        raise InvalidUrlError(InvalidUrlError.PROTOCOL)

    if not hostname:
        raise InvalidUrlError(InvalidUrlError.MALFORMED, "malformed URL")

    if not _URL_SHAPE.fullmatch(candidate):
        raise InvalidUrlError(InvalidUrlError.FORMAT, "URL format is invalid")

    canonical = urlunsplit(
        (scheme, parts.netloc.lower(), parts.path or "/", parts.query, parts.fragment)
    )
    return requote_uri(canonical)


def validate_folder_path(candidate: str) -> str:
    """Normalize a folder path relative to the static-media root.

    Examples:
        "/music/"            -> "music"
        "music/subfolder/"   -> "music/subfolder"
        "music/../../etc"    -> DirectoryTraversalError

    Raises:
        DirectoryTraversalError: If any ".." survives normalization
    """
    sanitized = candidate.lstrip("/")
    sanitized = posixpath.normpath(sanitized)
    # Backslashes are only separators after normalization, so "a\..\b" stays
    # un-collapsed and is caught by the ".." check below
    sanitized = sanitized.replace("\\", "/")
    sanitized = sanitized.strip("/")

    if ".." in sanitized:
        raise DirectoryTraversalError()

    if sanitized == ".":
        return ""
    return sanitized
