"""
Playlist resolvers.

Turn a playlist source reference (remote URL or local folder) into a list of
track descriptors. Each resolver performs exactly one I/O call through an
injectable collaborator, so tests can swap the network and filesystem out.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional
from urllib.parse import quote

import requests
from loguru import logger

from .errors import (
    DirectoryTraversalError,
    LocalReadError,
    MissingParameterError,
    PlaylistError,
    RemoteFetchError,
)
from .extraction import extract_track_links
from .tracks import TrackDescriptor, is_supported, mime_for, title_from_filename
from .validation import validate_folder_path, validate_url

DEFAULT_MEDIA_ROOT = "public/music"
DEFAULT_TIMEOUT_SECONDS = 10.0

Fetcher = Callable[[str], str]
DirectoryLister = Callable[[Path], List[str]]


@dataclass(frozen=True)
class UrlContext:
    """Origin used to build URLs for locally served tracks."""

    protocol: str
    host: str

    @property
    def origin(self) -> str:
        return f"{self.protocol}://{self.host}"


def fetch_page(
    url: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    user_agent: Optional[str] = None,
) -> str:
    """Fetch a page body with a bounded timeout.

    Raises:
        requests.RequestException: On connection errors, timeouts and
            non-2xx responses
    """
    headers = {"User-Agent": user_agent} if user_agent else None
    response = requests.get(url, headers=headers, timeout=timeout)
    response.raise_for_status()
    return response.text


def list_directory(path: Path) -> List[str]:
    """List entry names of a directory, sorted for stable output."""
    return sorted(os.listdir(path))


def is_path_within_root(path: Path, root: Path) -> bool:
    """Pure function - True if path resolves inside root (symlinks followed).

    Raises:
        OSError, ValueError, RuntimeError: From Path.resolve() for paths that
            cannot be resolved (name too long, embedded NUL, symlink loop)
    """
    resolved_path = path.resolve()
    resolved_root = root.resolve()
    try:
        resolved_path.relative_to(resolved_root)
        return True
    except ValueError:
        return False


def resolve_remote(url: str, fetch: Fetcher = fetch_page) -> List[TrackDescriptor]:
    """Get playlist tracks from a remote directory-listing page.

    Args:
        url: Untrusted page URL
        fetch: Callable returning the page body for a URL

    Raises:
        RemoteFetchError: Wrapping a validation, network or parse failure
    """
    try:
        validated_url = validate_url(url)
        logger.debug(f"Fetching remote playlist {validated_url}")
        body = fetch(validated_url)
        tracks = extract_track_links(body, validated_url)
    except Exception as e:
        logger.warning(f"Remote playlist failed for {url!r}: {e}")
        raise RemoteFetchError(str(e)) from e

    logger.info(f"Resolved {len(tracks)} tracks from {validated_url}")
    return tracks


def build_local_url(url_context: UrlContext, *segments: str) -> str:
    """Join origin and raw path segments into a percent-encoded URL.

    Segments are filesystem names, so every reserved character (including
    "#", "?" and "%") is escaped. Pieces are encoded from their on-disk
    bytes, so undecodable names round-trip.
    """
    parts = [
        quote(os.fsencode(piece), safe="")
        for segment in segments
        for piece in segment.replace("\\", "/").split("/")
        if piece
    ]
    return f"{url_context.origin}/{'/'.join(parts)}"


def display_name(entry: str) -> str:
    """Pure function - filesystem name with undecodable bytes replaced by U+FFFD."""
    return os.fsencode(entry).decode("utf-8", errors="replace")


def resolve_local(
    folder_path: str,
    url_context: UrlContext,
    media_root: str = DEFAULT_MEDIA_ROOT,
    list_dir: DirectoryLister = list_directory,
) -> List[TrackDescriptor]:
    """Get playlist tracks from a folder under the static-media root.

    Args:
        folder_path: Untrusted folder path relative to media_root
        url_context: Protocol and host the track URLs are built from
        media_root: Static-media root, also the URL prefix files are served at
        list_dir: Callable returning the entry names of a directory

    Raises:
        LocalReadError: Wrapping a validation or filesystem failure
    """
    try:
        validated_path = validate_folder_path(folder_path)
        root = Path(media_root)
        directory = root / validated_path if validated_path else root
        if not is_path_within_root(directory, root):
            raise DirectoryTraversalError()

        logger.debug(f"Listing local playlist {directory}")
        entries = list_dir(directory)
    except Exception as e:
        logger.warning(f"Local playlist failed for {folder_path!r}: {e}")
        raise LocalReadError(str(e)) from e

    tracks = [
        TrackDescriptor(
            title=title_from_filename(display_name(entry)),
            url=build_local_url(url_context, media_root, validated_path, entry),
            mime=mime_for(entry),
        )
        for entry in entries
        if is_supported(entry)
    ]
    logger.info(f"Resolved {len(tracks)} tracks from {directory}")
    return tracks


def get_playlist(
    url: Optional[str] = None,
    folder: Optional[str] = None,
    url_context: Optional[UrlContext] = None,
    media_root: str = DEFAULT_MEDIA_ROOT,
    fetch: Fetcher = fetch_page,
    list_dir: DirectoryLister = list_directory,
) -> List[TrackDescriptor]:
    """Resolve a playlist from either a remote URL or a local folder.

    url takes precedence when both are given.

    Raises:
        MissingParameterError: If neither url nor folder is given
        RemoteFetchError: From resolve_remote
        LocalReadError: From resolve_local
    """
    if url:
        return resolve_remote(url, fetch=fetch)
    if folder:
        if url_context is None:
            raise PlaylistError("URL context is required for local playlists")
        return resolve_local(folder, url_context, media_root=media_root, list_dir=list_dir)
    raise MissingParameterError()
