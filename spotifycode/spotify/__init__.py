"""Spotify modules for Spotify Code Generator"""

from .client import SpotifyClient
from .codes import build_code_url, get_code_image
from .uri import ResourceType, SpotifyURI, parse_spotify_uri

__all__ = [
    'SpotifyClient',
    'build_code_url',
    'get_code_image',
    'ResourceType',
    'SpotifyURI',
    'parse_spotify_uri',
]
