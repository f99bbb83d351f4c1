"""
Apple Music "Most Played" charts.

Fetches the public RSS feed for a storefront and normalizes it into the
shape the frontend renders.
"""

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional

import requests
from loguru import logger
from requests.exceptions import HTTPError

FEED_BASE_URL = "https://rss.applemarketingtools.com/api/v2"
DEFAULT_LIMIT = 50


class ChartsError(Exception):
    """Charts could not be fetched or parsed."""


class InvalidStorefrontError(ChartsError):
    """Storefront code failed basic validation."""


class StorefrontNotFoundError(ChartsError):
    """Upstream feed does not exist for the storefront."""


@dataclass(frozen=True)
class ChartTrack:
    title: str
    artist: str
    art: str
    link: str
    explicit: bool


@dataclass(frozen=True)
class ChartsPayload:
    updated: Optional[str]
    tracks: List[ChartTrack] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def validate_storefront(code: str) -> str:
    """Lower-case and length-check a storefront code (e.g. "us", "gb").

    Raises:
        InvalidStorefrontError: If the code is not 2-5 characters long
    """
    normalized = (code or "").strip().lower()
    if len(normalized) < 2 or len(normalized) > 5:
        raise InvalidStorefrontError("Invalid storefront code")
    return normalized


def build_feed_url(code: str, limit: int = DEFAULT_LIMIT) -> str:
    return f"{FEED_BASE_URL}/{code}/music/most-played/{limit}/songs.json"


def parse_chart_result(result: Dict[str, Any]) -> ChartTrack:
    """Normalize one feed result; artwork is upscaled from 100x100 to 400x400."""
    return ChartTrack(
        title=result.get("name", ""),
        artist=result.get("artistName", ""),
        art=(result.get("artworkUrl100") or "").replace("100x100", "400x400"),
        link=result.get("url", ""),
        explicit=result.get("contentAdvisoryRating") == "Explicit",
    )


def parse_feed(data: Any) -> ChartsPayload:
    """Build a ChartsPayload from the decoded feed JSON.

    Raises:
        ChartsError: If the feed has no results list
    """
    feed = data.get("feed") if isinstance(data, dict) else None
    if not isinstance(feed, dict) or not isinstance(feed.get("results"), list):
        raise ChartsError("Invalid response from Apple Music charts")

    return ChartsPayload(
        updated=feed.get("updated"),
        tracks=[parse_chart_result(result) for result in feed["results"]],
    )


def fetch_most_played(
    code: str,
    limit: int = DEFAULT_LIMIT,
    timeout: float = 10.0,
) -> ChartsPayload:
    """Fetch the most-played songs chart for a storefront.

    Args:
        code: Storefront code, already validated
        limit: Number of chart entries to request
        timeout: Request timeout in seconds

    Raises:
        StorefrontNotFoundError: Upstream returned 404
        ChartsError: Any other network, HTTP or parse failure
    """
    url = build_feed_url(code, limit)
    logger.debug(f"Fetching charts feed {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except HTTPError as e:
        if e.response is not None and e.response.status_code == 404:
            raise StorefrontNotFoundError(f"Storefront {code!r} not found") from e
        raise ChartsError(str(e)) from e
    except (requests.RequestException, ValueError) as e:
        raise ChartsError(str(e)) from e

    return parse_feed(data)
