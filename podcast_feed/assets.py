"""Fill in missing enclosure details by probing the asset URLs."""

from pathlib import PurePosixPath
from urllib.parse import urlparse

import requests
from retry import retry

from podcast_feed.podcast import ENCLOSURE_TYPES


@retry(exceptions=requests.RequestException, tries=5, delay=1, backoff=2, logger=None)
def _make_http_request(url):
    """Make HTTP request with retry logic"""
    return requests.head(url, allow_redirects=True, timeout=30)


def get_file_info(url):
    """Get information about a file from its URL.

    Args:
        url (str): URL of the file.

    Returns:
        dict: content-length (int or None) and content-type of the file.
    """
    print(f"Attempting to get file info for {url}...")
    response = _make_http_request(url)
    length = response.headers.get("content-length")
    return {
        "content-length": int(length) if length and length.isdigit() else None,
        "content-type": response.headers.get("content-type"),
    }


def audio_type_from_url(url):
    """Return the type token for a URL's file extension, or "" if it is not known."""
    suffix = PurePosixPath(urlparse(url).path).suffix.lower().lstrip(".")
    return suffix if suffix in ENCLOSURE_TYPES else ""


def audio_type_from_content_type(content_type):
    """Return the type token for a MIME type such as "audio/mpeg; charset=binary"."""
    if not content_type:
        return ""
    mime = content_type.split(";")[0].strip().lower()
    for token, known in ENCLOSURE_TYPES.items():
        if known == mime:
            return token
    return ""


def probe_enclosures(feed):
    """Complete audio_type and audio_size of every item that has an audio_href.

    Items that already carry a size and a type are not requested. The type
    comes from the URL suffix, then from the reported content-type. An asset
    that still fails after all retries is left as it is.
    """
    for item in feed.items:
        itunes = item.itunes
        if not itunes.audio_href:
            continue

        if not itunes.audio_type:
            itunes.audio_type = audio_type_from_url(itunes.audio_href)

        if itunes.audio_size > 0 and itunes.audio_type:
            continue

        try:
            file_info = get_file_info(itunes.audio_href)
        except requests.RequestException as e:
            print(f"Warning: could not get file info for {itunes.audio_href}: {e}")
            continue

        if not itunes.audio_size and file_info["content-length"]:
            itunes.audio_size = file_info["content-length"]
        if not itunes.audio_type:
            itunes.audio_type = audio_type_from_content_type(file_info["content-type"])
    return feed
