"""Charts domain - Apple Music most-played charts per storefront."""

from .apple import (
    ChartsError,
    InvalidStorefrontError,
    StorefrontNotFoundError,
    ChartTrack,
    ChartsPayload,
    validate_storefront,
    build_feed_url,
    parse_feed,
    fetch_most_played,
)

__all__ = [
    "ChartsError",
    "InvalidStorefrontError",
    "StorefrontNotFoundError",
    "ChartTrack",
    "ChartsPayload",
    "validate_storefront",
    "build_feed_url",
    "parse_feed",
    "fetch_most_played",
]
