"""
Track link extraction from directory-listing style HTML pages.
"""

from typing import List
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup
from requests.utils import requote_uri

from .tracks import TrackDescriptor, is_supported, mime_for, title_from_filename
from .validation import ALLOWED_SCHEMES


def extract_track_links(markup: str, base_url: str) -> List[TrackDescriptor]:
    """Extract playable track links from HTML content.

    Only <a> elements whose href path ends in a supported extension and
    resolves to an http(s) URL are kept, in document order. Relative hrefs
    are resolved against base_url.

    Args:
        markup: HTML content
        base_url: URL the markup was fetched from

    Returns:
        List of TrackDescriptor, one per matching anchor
    """
    soup = BeautifulSoup(markup, "html.parser")
    tracks = []

    for anchor in soup.find_all("a", href=True):
        href = anchor["href"]
        if not isinstance(href, str) or not href:
            continue

        try:
            href_path = urlsplit(href).path
            if not is_supported(href_path):
                continue
            absolute_url = urljoin(base_url, href)
            # javascript:, data: and similar hrefs can still end in ".mp3"
            if urlsplit(absolute_url).scheme.lower() not in ALLOWED_SCHEMES:
                continue
            url = requote_uri(absolute_url)
        except ValueError:
            # Unresolvable href, e.g. a broken IPv6 literal
            continue

        title = anchor.get_text().strip()
        if not title or title == href:
            title = title_from_filename(href_path)

        tracks.append(TrackDescriptor(title=title, url=url, mime=mime_for(href_path)))

    return tracks
