from functools import lru_cache, partial

from fastapi import Depends, Request

from wavelist.core.config import Config, load_config
from wavelist.domain.playlists.resolver import (
    DirectoryLister,
    Fetcher,
    UrlContext,
    fetch_page,
    list_directory,
)
from .cache import ResponseCache


@lru_cache(maxsize=1)
def get_config() -> Config:
    """FastAPI dependency for configuration, loaded once per process."""
    return load_config()


def get_url_context(request: Request) -> UrlContext:
    """Origin of the incoming request, used for locally served track URLs."""
    host = request.headers.get("host") or request.url.netloc
    return UrlContext(protocol=request.url.scheme, host=host)


def get_fetcher(config: Config = Depends(get_config)) -> Fetcher:
    """FastAPI dependency for the outbound page fetcher."""
    return partial(
        fetch_page,
        timeout=config.http.timeout_seconds,
        user_agent=config.http.user_agent,
    )


def get_directory_lister() -> DirectoryLister:
    """FastAPI dependency for the directory listing collaborator."""
    return list_directory


@lru_cache(maxsize=1)
def _playlist_cache(ttl_seconds: int, max_entries: int) -> ResponseCache:
    return ResponseCache(maxsize=max_entries, ttl=ttl_seconds)


def get_playlist_cache(config: Config = Depends(get_config)):
    """Playlist response cache, or None when caching is disabled."""
    if config.playlist.cache_ttl_seconds <= 0:
        return None
    return _playlist_cache(
        config.playlist.cache_ttl_seconds, config.playlist.cache_max_entries
    )


@lru_cache(maxsize=1)
def _charts_cache(ttl_seconds: int) -> ResponseCache:
    return ResponseCache(maxsize=256, ttl=ttl_seconds)


def get_charts_cache(config: Config = Depends(get_config)) -> ResponseCache:
    """Charts response cache, one entry per storefront."""
    return _charts_cache(config.charts.cache_ttl_seconds)
