"""Shared fixtures: in-memory images and fake HTTP/Spotify endpoints"""

from io import BytesIO
from types import SimpleNamespace

import pytest
import requests
from PIL import Image

from spotifycode.spotify import client as client_module


ALBUM_URI = 'spotify:album:6BzxX6zkDsYKFJ04ziU5xQ'
ALBUM_ID = '6BzxX6zkDsYKFJ04ziU5xQ'
COVER_URL = 'https://i.scdn.co/image/ab67616d0000b273cover'
TOKEN_INFO = {'access_token': 'tok123', 'token_type': 'Bearer', 'expires_in': 3600}


def png_bytes(image, image_format='PNG'):
    buffer = BytesIO()
    image.save(buffer, format=image_format)
    return buffer.getvalue()


class FakeResponse:
    def __init__(self, content=b'', status_code=200):
        self.content = content
        self.status_code = status_code
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class FakeSession:
    """Stands in for requests.Session; unknown URLs answer 404"""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requests = []
        self.responses = []

    def get(self, url, timeout=None):
        self.requests.append(url)
        route = self.routes.get(url)
        if isinstance(route, Exception):
            raise route
        response = route if route is not None else FakeResponse(status_code=404)
        self.responses.append(response)
        return response


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def spotify_api(monkeypatch):
    """
    Replace the accounts service and Web API

    Tests tweak the returned namespace: set token_error or album_error to
    make a call fail, or album_payload to change the album response.
    """
    api = SimpleNamespace(
        token_info=dict(TOKEN_INFO),
        token_error=None,
        token_requests=[],
        album_payload={'images': [{'url': COVER_URL, 'width': 640, 'height': 640}]},
        album_error=None,
        album_calls=[],
        spotify_auth=[],
    )

    class FakeCredentials:
        def __init__(self, client_id=None, client_secret=None, cache_handler=None, **kwargs):
            self.client_id = client_id
            self.client_secret = client_secret
            self.cache_handler = cache_handler

        def get_access_token(self, as_dict=True, check_cache=True):
            api.token_requests.append((self.client_id, self.client_secret))
            if api.token_error is not None:
                raise api.token_error
            self.cache_handler.save_token_to_cache(dict(api.token_info))
            return api.token_info['access_token']

    class FakeSpotify:
        def __init__(self, auth=None, **kwargs):
            api.spotify_auth.append(auth)

        def album(self, album_id, market=None):
            api.album_calls.append(album_id)
            if api.album_error is not None:
                raise api.album_error
            return api.album_payload

    monkeypatch.setattr(client_module, 'SpotifyClientCredentials', FakeCredentials)
    monkeypatch.setattr(client_module.spotipy, 'Spotify', FakeSpotify)
    return api


@pytest.fixture
def cover_image():
    return Image.new('RGB', (640, 640), (30, 60, 90))


@pytest.fixture
def code_image():
    image = Image.new('RGB', (640, 160), (30, 60, 90))
    for x in range(100, 540, 20):
        for y in range(40, 120):
            image.putpixel((x, y), (255, 255, 255))
    return image
