"""
Spotify URI helpers for Spotify Code Generator
Parses scheme:type:id identifiers and converts open.spotify.com links
"""

import re
from dataclasses import dataclass
from enum import Enum

from spotifycode.errors import InvalidURIError, UnsupportedResourceError


class ResourceType(Enum):
    """Content types that can appear in a Spotify URI"""

    ALBUM = 'album'
    ARTIST = 'artist'
    TRACK = 'track'
    PLAYLIST = 'playlist'
    SHOW = 'show'
    EPISODE = 'episode'


@dataclass(frozen=True)
class SpotifyURI:
    scheme: str
    resource_type: ResourceType
    resource_id: str

    def __str__(self):
        return f"{self.scheme}:{self.resource_type.value}:{self.resource_id}"


def parse_spotify_uri(uri):
    """
    Split a Spotify URI into its three parts

    Args:
        uri: Spotify URI (e.g., spotify:album:6BzxX6zkDsYKFJ04ziU5xQ)

    Returns:
        SpotifyURI: Parsed identifier

    Raises:
        InvalidURIError: If the URI does not have exactly three non-empty parts
        UnsupportedResourceError: If the content type is unknown
    """
    parts = uri.split(':')
    if len(parts) != 3 or not all(parts):
        raise InvalidURIError(f"Spotify URI is malformed: {uri!r}")

    scheme, content_type, resource_id = parts
    try:
        resource_type = ResourceType(content_type)
    except ValueError:
        raise UnsupportedResourceError(f"Unknown content type {content_type!r} in {uri!r}") from None

    return SpotifyURI(scheme, resource_type, resource_id)


def convert_spotify_url_to_uri(url):
    """Convert a Spotify URL to a Spotify URI"""
    # Pattern: https://open.spotify.com/{type}/{id}?...
    types = '|'.join(t.value for t in ResourceType)
    pattern = rf'https://open\.spotify\.com/(?:intl-[a-z]+/)?({types})/([a-zA-Z0-9]+)'
    match = re.search(pattern, url)
    if match:
        content_type = match.group(1)
        content_id = match.group(2)
        return f"spotify:{content_type}:{content_id}"
    return None


def normalize_uri(text):
    """
    Turn user input into a Spotify URI

    Links are converted; anything else is returned stripped and left for
    parse_spotify_uri to accept or reject.
    """
    text = text.strip()
    if text.startswith('http'):
        converted = convert_spotify_url_to_uri(text)
        if converted:
            return converted
    return text
