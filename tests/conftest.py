import json

import numpy as np
import pytest
import requests

from tilechecker.imaging import encode_png, to_texture


def solid(size, rgba):
    """size x size RGBA array filled with one colour."""
    pixels = np.zeros((size, size, 4), dtype=np.uint8)
    pixels[:, :] = rgba
    return pixels


def gradient(width, height, seed=0):
    """Image where every pixel differs, so misplaced copies show up."""
    rows, cols = np.mgrid[0:height, 0:width]
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[..., 0] = (cols * 7 + seed) % 256
    pixels[..., 1] = (rows * 13 + seed) % 256
    pixels[..., 2] = (rows * cols + seed * 31) % 256
    pixels[..., 3] = 255
    return pixels


def png_bytes(pixels):
    return encode_png(to_texture(pixels))


def make_response(url, status=200, body=b"", content_type="image/png"):
    response = requests.Response()
    response.url = url
    response.status_code = status
    response.reason = "OK" if status < 400 else "Error"
    response._content = body
    response.encoding = "utf-8"
    response.headers["Content-Type"] = content_type
    return response


class FakeSession:
    """Stands in for requests.Session; answers from a url -> response map."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        route = self.routes.get(url)
        if route is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(route, Exception):
            raise route
        return route


def tile_list_response(url, tiles):
    return make_response(url, body=json.dumps(tiles).encode(), content_type="application/json")


@pytest.fixture
def session():
    return FakeSession()
