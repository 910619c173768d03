"""
Pixel buffer helpers shared by the downloader and the compositor.

A PixelImage is a numpy uint8 array of shape (height, width, 4) holding RGBA
rows top to bottom. pygame does the decoding and PNG encoding; a pygame
Surface is the committed, render-ready form of a composite.
"""
import io
import posixpath
from urllib.parse import urlparse

import numpy as np
import pygame


def namehint_for(url):
    """File name pygame can use to guess the format of downloaded bytes."""
    name = posixpath.basename(urlparse(url).path)
    return name or "tile"


def decode_surface(data, namehint=""):
    """Decode encoded image bytes. Raises pygame.error on failure."""
    return pygame.image.load(io.BytesIO(data), namehint)


def surface_to_array(surface) -> np.ndarray:
    width, height = surface.get_size()
    raw = pygame.image.tobytes(surface, "RGBA")
    return np.frombuffer(raw, dtype=np.uint8).reshape(height, width, 4).copy()


def to_texture(pixels: np.ndarray):
    """Commit a PixelImage into a pygame Surface."""
    height, width = pixels.shape[:2]
    data = np.ascontiguousarray(pixels, dtype=np.uint8).tobytes()
    return pygame.image.frombytes(data, (width, height), "RGBA")


def encode_png(surface) -> bytes:
    buffer = io.BytesIO()
    pygame.image.save(surface, buffer, "tile.png")
    return buffer.getvalue()


def load_pixels(path) -> np.ndarray:
    """Read an image file into a PixelImage. Raises pygame.error on failure."""
    return surface_to_array(pygame.image.load(str(path)))


def save_pixels(pixels: np.ndarray, path):
    pygame.image.save(to_texture(pixels), str(path))
