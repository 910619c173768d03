import logging
from pathlib import Path

import pygame
import requests

from tilechecker.config import REQUEST_TIMEOUT
from tilechecker.errors import DownloadError
from tilechecker.imaging import decode_surface, encode_png, namehint_for
from tilechecker.tile_store import tile_path

logger = logging.getLogger(__name__)


class DownloadReport:
    def __init__(self):
        self.attempted = 0
        self.written = []
        self.failed = []  # (index, url, message)

    @property
    def ok(self):
        return not self.failed

    def __repr__(self):
        return (
            f"DownloadReport(attempted={self.attempted}, "
            f"written={len(self.written)}, failed={len(self.failed)})"
        )


def _is_svg(response, url):
    content_type = response.headers.get("Content-Type", "")
    return "svg" in content_type or url.lower().split("?")[0].endswith(".svg")


def _rasterize_svg(data, descriptor):
    try:
        import cairosvg
    except (ImportError, OSError) as e:
        raise DownloadError(
            descriptor.url, f"SVG tile needs CairoSVG and libcairo: {e}"
        ) from e

    try:
        return cairosvg.svg2png(
            bytestring=data,
            output_width=descriptor.width,
            output_height=descriptor.height,
        )
    except Exception as e:
        raise DownloadError(descriptor.url, f"could not rasterize SVG: {e}") from e


def download_tile(descriptor, index, dest_dir, session=None, timeout=REQUEST_TIMEOUT) -> Path:
    """
    Fetch one tile, decode it, and write it as PNG to dest_dir/Tile<index>.png.

    Raises DownloadError when the request, the decode or the write fails.
    """
    http = session or requests
    url = descriptor.url
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise DownloadError(url, str(e)) from e

    data = response.content
    namehint = namehint_for(url)
    if _is_svg(response, url):
        data = _rasterize_svg(data, descriptor)
        namehint = "tile.png"

    try:
        surface = decode_surface(data, namehint)
        png = encode_png(surface)
    except pygame.error as e:
        raise DownloadError(url, f"could not decode image: {e}") from e

    output_path = tile_path(dest_dir, index)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(png)
    except OSError as e:
        raise DownloadError(url, f"could not write {output_path}: {e}") from e

    logger.debug("Saved %s (%dx%d)", output_path, *surface.get_size())
    return output_path


def download_tiles(descriptors, dest_dir, session=None, timeout=REQUEST_TIMEOUT) -> DownloadReport:
    """Download every tile in order; a failed tile is logged and skipped."""
    report = DownloadReport()
    for index, descriptor in enumerate(descriptors):
        report.attempted += 1
        try:
            path = download_tile(descriptor, index, dest_dir, session=session, timeout=timeout)
        except DownloadError as e:
            logger.error("Failed to download tile: %s", e)
            report.failed.append((index, descriptor.url, e.message))
            continue
        report.written.append(path)

    logger.info(
        "Downloaded %d of %d tiles into %s",
        len(report.written),
        report.attempted,
        dest_dir,
    )
    return report
