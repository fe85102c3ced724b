import pytest
import requests
from PIL import Image

from spotifycode.errors import DecodeError, TransportError
from spotifycode.imaging.download import decode_image, download_image

from conftest import FakeResponse, FakeSession, png_bytes

URL = 'https://i.scdn.co/image/abc'


def test_download_decodes_image():
    response = FakeResponse(png_bytes(Image.new('RGB', (8, 4), (1, 2, 3))))
    session = FakeSession({URL: response})

    image = download_image(URL, session=session)

    assert image.size == (8, 4)
    assert image.convert('RGB').getpixel((0, 0)) == (1, 2, 3)
    assert session.requests == [URL]
    assert response.closed


def test_download_decodes_jpeg():
    response = FakeResponse(png_bytes(Image.new('RGB', (16, 16), (0, 0, 0)), 'JPEG'))
    image = download_image(URL, session=FakeSession({URL: response}))
    assert image.size == (16, 16)


def test_download_http_error_is_transport_error():
    response = FakeResponse(b'oops', status_code=500)

    with pytest.raises(TransportError):
        download_image(URL, session=FakeSession({URL: response}))
    assert response.closed


def test_download_connection_error_is_transport_error():
    session = FakeSession({URL: requests.ConnectionError('connection refused')})

    with pytest.raises(TransportError):
        download_image(URL, session=session)


def test_download_non_image_is_decode_error():
    response = FakeResponse(b'<html>not an image</html>')

    with pytest.raises(DecodeError):
        download_image(URL, session=FakeSession({URL: response}))
    assert response.closed


def test_decode_truncated_png():
    image = Image.new('RGB', (64, 64))
    image.putdata([(x * 4 % 256, y * 4 % 256, x * y % 256) for y in range(64) for x in range(64)])
    data = png_bytes(image)

    with pytest.raises(DecodeError):
        decode_image(data[:len(data) // 2])
