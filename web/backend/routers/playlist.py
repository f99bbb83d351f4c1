from fastapi import APIRouter, Depends
from loguru import logger
from typing import Optional

from wavelist.core.config import Config
from wavelist.domain.playlists import UrlContext, get_playlist
from wavelist.domain.playlists.resolver import DirectoryLister, Fetcher
from ..cache import ResponseCache
from ..deps import (
    get_config,
    get_directory_lister,
    get_fetcher,
    get_playlist_cache,
    get_url_context,
)
from ..schemas import PlaylistResponse, TrackOut

router = APIRouter()


def _cache_key(url: Optional[str], folder: Optional[str], url_context: UrlContext):
    if url:
        return ("url", url)
    # Local track URLs embed the request origin
    return ("folder", folder, url_context.origin)


@router.get("/playlist", response_model=PlaylistResponse)
def get_playlist_endpoint(
    url: Optional[str] = None,
    folder: Optional[str] = None,
    config: Config = Depends(get_config),
    url_context: UrlContext = Depends(get_url_context),
    fetch: Fetcher = Depends(get_fetcher),
    list_dir: DirectoryLister = Depends(get_directory_lister),
    cache: Optional[ResponseCache] = Depends(get_playlist_cache),
):
    """Get a playlist from a remote URL or a folder under the media root.

    Errors are raised as PlaylistError and rendered by the app-level handler.
    """
    key = _cache_key(url, folder, url_context) if (url or folder) else None
    if cache is not None and key is not None:
        cached = cache.get(key)
        if cached is not None:
            logger.debug(f"Playlist cache hit for {key}")
            return cached

    tracks = get_playlist(
        url=url,
        folder=folder,
        url_context=url_context,
        media_root=config.media.root,
        fetch=fetch,
        list_dir=list_dir,
    )

    response = PlaylistResponse(
        count=len(tracks),
        data=[TrackOut(**track.to_dict()) for track in tracks],
    )
    if cache is not None and key is not None:
        cache.set(key, response)
    return response
