import logging

import numpy as np
import pygame

from tilechecker.config import PATTERN_SIZE
from tilechecker.errors import DecodeError
from tilechecker.imaging import load_pixels
from tilechecker.tile_store import require_pair

logger = logging.getLogger(__name__)


def checker_array(images, pattern_size=PATTERN_SIZE) -> np.ndarray:
    """
    Tile two RGBA arrays into a pattern_size x pattern_size checkerboard.

    Cells are counted from the bottom-left, as on a texture: cell (x, y)
    holds images[(x + y) % 2], so the bottom-left cell is images[0]. With
    rows stored top first, the r-th band of cells from the top is y = pattern_size - 1 - r.
    The cell size is the width of images[0]. Sources of another size are
    sampled with wrap-around indexing rather than rejected.
    """
    tile_size = images[0].shape[1]
    side = pattern_size * tile_size
    checker = np.zeros((side, side, 4), dtype=np.uint8)

    blocks = []
    for image in images[:2]:
        rows = np.arange(tile_size) % image.shape[0]
        cols = np.arange(tile_size) % image.shape[1]
        blocks.append(image[np.ix_(rows, cols)])

    for y in range(pattern_size):
        for x in range(pattern_size):
            block = blocks[(x + y) % 2]
            row = pattern_size - 1 - y
            checker[
                row * tile_size:(row + 1) * tile_size,
                x * tile_size:(x + 1) * tile_size,
            ] = block

    return checker


def load_sources(image_paths):
    sources = []
    for path in require_pair(image_paths):
        try:
            sources.append(load_pixels(path))
        except (pygame.error, OSError) as e:
            raise DecodeError(f"Could not decode tile file {path}: {e}") from e
    return sources


def compose_checker(image_paths, pattern_size=PATTERN_SIZE) -> np.ndarray:
    """Load the first two tile files and build the checker composite."""
    sources = load_sources(image_paths)
    checker = checker_array(sources, pattern_size)
    logger.info(
        "Checker pattern %dx%d from %s",
        checker.shape[1],
        checker.shape[0],
        ", ".join(str(p) for p in image_paths[:2]),
    )
    return checker
