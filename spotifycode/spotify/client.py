"""
Spotify Client module for Spotify Code Generator
Handles Spotify authentication and cover art lookup
"""

from dataclasses import dataclass
from typing import Optional

import requests
import spotipy
from spotipy.cache_handler import MemoryCacheHandler
from spotipy.oauth2 import SpotifyClientCredentials, SpotifyOauthError

from spotifycode.config.settings import REQUEST_TIMEOUT
from spotifycode.errors import (
    AuthenticationError,
    DecodeError,
    TransportError,
    UnsupportedResourceError,
)
from spotifycode.imaging.download import download_image
from spotifycode.spotify.uri import ResourceType, parse_spotify_uri


@dataclass(frozen=True)
class AccessToken:
    access_token: str
    token_type: str = 'Bearer'
    expires_in: Optional[int] = None


class SpotifyClient:
    """Wrapper for the Spotify Web API using the client-credentials flow"""

    def __init__(self, client_id, client_secret, session=None, verbose=False):
        self.client_id = client_id
        self.client_secret = client_secret
        self.session = session or requests.Session()
        self.verbose = verbose
        self.token = self._authenticate()
        # The token is used as-is for the client's lifetime; no refresh
        self.sp = spotipy.Spotify(
            auth=self.token.access_token,
            requests_timeout=REQUEST_TIMEOUT,
            retries=0,
            status_retries=0,
        )

    def _authenticate(self):
        """
        Exchange the client credentials for an access token

        Returns:
            AccessToken: Token issued by the accounts service

        Raises:
            AuthenticationError: If the exchange fails for any reason
        """
        # Keep the token in memory only; spotipy would otherwise write a .cache file
        cache_handler = MemoryCacheHandler()
        try:
            auth_manager = SpotifyClientCredentials(
                client_id=self.client_id,
                client_secret=self.client_secret,
                cache_handler=cache_handler,
                requests_timeout=REQUEST_TIMEOUT,
            )
            access_token = auth_manager.get_access_token(as_dict=False)
        except (SpotifyOauthError, requests.exceptions.RequestException, ValueError) as e:
            raise AuthenticationError(f"Failed to authenticate with Spotify: {e}") from e

        if not access_token:
            raise AuthenticationError("Spotify did not return an access token")

        token_info = cache_handler.get_cached_token() or {}
        token = AccessToken(
            access_token=access_token,
            token_type=token_info.get('token_type', 'Bearer'),
            expires_in=token_info.get('expires_in'),
        )
        if self.verbose:
            print(f"✓ Spotify access token acquired (expires in {token.expires_in}s)")
        return token

    def get_album_image_url(self, album_id):
        """
        Look up an album and return its first cover image URL

        The first entry is used regardless of how many variants are listed
        or what size they are.

        Args:
            album_id: Spotify album ID

        Returns:
            str: Cover image URL
        """
        try:
            album = self.sp.album(album_id)
        except (spotipy.SpotifyException, requests.exceptions.RequestException) as e:
            raise TransportError(f"Error looking up album {album_id}: {e}") from e

        # spotipy returns None when the body is not JSON
        if not isinstance(album, dict):
            raise DecodeError(f"Error decoding album response for {album_id}")

        images = album.get('images')
        if not images:
            raise DecodeError(f"Album {album_id} has no cover images")

        url = images[0].get('url')
        if not url:
            raise DecodeError(f"Album {album_id} cover image has no URL")
        return url

    def get_cover_image(self, uri):
        """
        Resolve a Spotify URI to its cover image

        Args:
            uri: Spotify URI (only albums are supported)

        Returns:
            PIL.Image.Image: Decoded cover image
        """
        spotify_uri = parse_spotify_uri(uri)

        if spotify_uri.resource_type is ResourceType.ALBUM:
            url = self.get_album_image_url(spotify_uri.resource_id)
        else:
            raise UnsupportedResourceError(
                f"No implemented behavior for content type {spotify_uri.resource_type.value!r}"
            )

        if self.verbose:
            print(f"→ Cover art: {url}")
        return download_image(url, session=self.session)
