"""
Stage sequencing for the tile checker.

fetch -> download -> enumerate -> compose -> apply. Per-tile download errors
are skipped; every other TileCheckerError ends the run before any composite
is produced.
"""
import logging

from tilechecker.checker import compose_checker
from tilechecker.downloader import download_tiles
from tilechecker.errors import TileCheckerError
from tilechecker.fetcher import fetch_tile_list
from tilechecker.imaging import to_texture
from tilechecker.scene import apply_texture
from tilechecker.tile_store import list_tile_files

logger = logging.getLogger(__name__)


class PipelineResult:
    def __init__(self, tiles, report, tile_files, checker, texture, target):
        self.tiles = tiles
        self.report = report
        self.tile_files = tile_files
        self.checker = checker
        self.texture = texture
        self.target = target


def run_pipeline(settings, target=None, session=None) -> PipelineResult:
    try:
        tiles = fetch_tile_list(settings.api_url, session=session, timeout=settings.timeout)
        report = download_tiles(
            tiles, settings.tile_dir, session=session, timeout=settings.timeout
        )

        tile_files = list_tile_files(settings.tile_dir, order=settings.order)
        checker = compose_checker(tile_files)
        texture = to_texture(checker)

        if target is not None:
            apply_texture(target, texture)
    except TileCheckerError as e:
        logger.error("%s: %s", type(e).__name__, e)
        raise

    return PipelineResult(tiles, report, tile_files, checker, texture, target)
