"""Playlists domain - resolve remote pages and local folders into track lists.

This domain handles:
- URL and folder path validation
- Track link extraction from HTML directory listings
- Remote and local playlist resolution
"""

from .errors import (
    PROTOCOL_NOT_ALLOWED,
    TRAVERSAL_NOT_ALLOWED,
    MISSING_PARAMETER,
    PlaylistError,
    MissingParameterError,
    InvalidUrlError,
    DirectoryTraversalError,
    RemoteFetchError,
    LocalReadError,
)
from .tracks import (
    MIME_TYPES,
    SUPPORTED_EXTENSIONS,
    TrackDescriptor,
    title_from_filename,
)
from .validation import validate_url, validate_folder_path
from .extraction import extract_track_links
from .resolver import (
    UrlContext,
    fetch_page,
    list_directory,
    resolve_remote,
    resolve_local,
    get_playlist,
)

__all__ = [
    "PROTOCOL_NOT_ALLOWED",
    "TRAVERSAL_NOT_ALLOWED",
    "MISSING_PARAMETER",
    "PlaylistError",
    "MissingParameterError",
    "InvalidUrlError",
    "DirectoryTraversalError",
    "RemoteFetchError",
    "LocalReadError",
    "MIME_TYPES",
    "SUPPORTED_EXTENSIONS",
    "TrackDescriptor",
    "title_from_filename",
    "validate_url",
    "validate_folder_path",
    "extract_track_links",
    "UrlContext",
    "fetch_page",
    "list_directory",
    "resolve_remote",
    "resolve_local",
    "get_playlist",
]
