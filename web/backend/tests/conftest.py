"""Pytest configuration for backend tests.

Every test gets fresh config and caches through dependency overrides, and
runs from a temp working directory so the media root is isolated.
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from wavelist.core.config import Config
from web.backend.cache import ResponseCache
from web.backend.deps import (
    get_charts_cache,
    get_config,
    get_directory_lister,
    get_fetcher,
    get_playlist_cache,
)
from web.backend.main import app

LISTING_HTML = """
<html><body>
  <a href="../">Parent Directory</a>
  <a href="intro.mp3">Intro</a>
  <a href="deep%20cut.flac">deep%20cut.flac</a>
  <a href="/other/live_set.ogg?dl=1"></a>
  <a href="cover.jpg">Cover</a>
</body></html>
"""


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def media_root(tmp_path, monkeypatch, config):
    """Working directory with an empty public/music tree."""
    monkeypatch.chdir(tmp_path)
    root = tmp_path / config.media.root
    root.mkdir(parents=True)
    return root


@pytest.fixture
def fetcher():
    return Mock(return_value=LISTING_HTML)


@pytest.fixture
def lister():
    return Mock(return_value=["b-side.wav", "notes.txt", "a_side.mp3", "cover.png"])


@pytest.fixture
def charts_cache():
    return ResponseCache(maxsize=16, ttl=900)


@pytest.fixture
def client(config, media_root, fetcher, lister, charts_cache):
    app.dependency_overrides[get_config] = lambda: config
    app.dependency_overrides[get_fetcher] = lambda: fetcher
    app.dependency_overrides[get_directory_lister] = lambda: lister
    app.dependency_overrides[get_playlist_cache] = lambda: None
    app.dependency_overrides[get_charts_cache] = lambda: charts_cache
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
