"""Tests for the Apple Music charts client."""

from unittest.mock import Mock, patch

import pytest
import requests

from wavelist.domain.charts.apple import (
    ChartsError,
    ChartTrack,
    InvalidStorefrontError,
    StorefrontNotFoundError,
    build_feed_url,
    fetch_most_played,
    parse_feed,
    validate_storefront,
)

FEED = {
    "feed": {
        "updated": "2024-05-01T00:00:00Z",
        "results": [
            {
                "name": "Track One",
                "artistName": "Artist A",
                "artworkUrl100": "https://is1.mzstatic.com/image/100x100bb.jpg",
                "url": "https://music.apple.com/us/album/1",
                "contentAdvisoryRating": "Explicit",
            },
            {
                "name": "Track Two",
                "artistName": "Artist B",
                "artworkUrl100": "https://is1.mzstatic.com/image/100x100bb.jpg",
                "url": "https://music.apple.com/us/album/2",
            },
        ],
    }
}


class TestValidateStorefront:
    @pytest.mark.parametrize("code, expected", [("us", "us"), ("GB", "gb"), ("zh-tw", "zh-tw")])
    def test_valid_codes(self, code, expected):
        assert validate_storefront(code) == expected

    @pytest.mark.parametrize("code", ["", "x", "toolong"])
    def test_invalid_codes(self, code):
        with pytest.raises(InvalidStorefrontError, match="Invalid storefront code"):
            validate_storefront(code)


def test_build_feed_url():
    assert build_feed_url("us") == (
        "https://rss.applemarketingtools.com/api/v2/us/music/most-played/50/songs.json"
    )
    assert "/most-played/10/" in build_feed_url("gb", limit=10)


class TestParseFeed:
    def test_normalizes_results(self):
        payload = parse_feed(FEED)

        assert payload.updated == "2024-05-01T00:00:00Z"
        assert payload.tracks[0] == ChartTrack(
            title="Track One",
            artist="Artist A",
            art="https://is1.mzstatic.com/image/400x400bb.jpg",
            link="https://music.apple.com/us/album/1",
            explicit=True,
        )
        assert payload.tracks[1].explicit is False

    def test_to_dict_shape(self):
        result = parse_feed(FEED).to_dict()

        assert set(result) == {"updated", "tracks"}
        assert set(result["tracks"][0]) == {"title", "artist", "art", "link", "explicit"}

    @pytest.mark.parametrize("data", [None, {}, {"feed": {}}, {"feed": {"results": None}}, []])
    def test_invalid_response(self, data):
        with pytest.raises(ChartsError, match="Invalid response from Apple Music charts"):
            parse_feed(data)


class TestFetchMostPlayed:
    @patch("wavelist.domain.charts.apple.requests.get")
    def test_success(self, mock_get):
        mock_get.return_value.json.return_value = FEED

        payload = fetch_most_played("us", limit=50, timeout=3)

        mock_get.assert_called_once_with(build_feed_url("us", 50), timeout=3)
        assert len(payload.tracks) == 2

    @patch("wavelist.domain.charts.apple.requests.get")
    def test_not_found(self, mock_get):
        mock_get.return_value.raise_for_status.side_effect = requests.HTTPError(
            "404 Client Error", response=Mock(status_code=404)
        )

        with pytest.raises(StorefrontNotFoundError):
            fetch_most_played("zz")

    @patch("wavelist.domain.charts.apple.requests.get")
    def test_server_error(self, mock_get):
        mock_get.return_value.raise_for_status.side_effect = requests.HTTPError(
            "503 Server Error", response=Mock(status_code=503)
        )

        with pytest.raises(ChartsError, match="503 Server Error") as exc_info:
            fetch_most_played("us")
        assert not isinstance(exc_info.value, StorefrontNotFoundError)

    @patch("wavelist.domain.charts.apple.requests.get")
    def test_network_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(ChartsError, match="connection refused"):
            fetch_most_played("us")

    @patch("wavelist.domain.charts.apple.requests.get")
    def test_invalid_json(self, mock_get):
        mock_get.return_value.json.side_effect = ValueError("Expecting value")

        with pytest.raises(ChartsError, match="Expecting value"):
            fetch_most_played("us")
