"""
Download the tile list into <data-dir>/Tiles without building the pattern.
Run from project root: python download_tiles.py
"""
import argparse
import logging
import sys
from pathlib import Path

from tilechecker.config import load_settings
from tilechecker.downloader import download_tiles
from tilechecker.errors import TileCheckerError
from tilechecker.fetcher import fetch_tile_list


def main():
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Download tiles from the tile API")
    parser.add_argument("--api-url", default=settings.api_url)
    parser.add_argument("--data-dir", default=str(settings.data_root))
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    settings.api_url = args.api_url
    settings.data_root = Path(args.data_dir)

    try:
        tiles = fetch_tile_list(settings.api_url, timeout=settings.timeout)
    except TileCheckerError as e:
        logging.error("%s", e)
        sys.exit(1)

    report = download_tiles(tiles, settings.tile_dir, timeout=settings.timeout)
    for index, url, message in report.failed:
        print(f"Failed: Tile{index} {url} ({message})")
    print(f"Downloaded {len(report.written)}/{report.attempted} tiles to {settings.tile_dir}")


if __name__ == "__main__":
    main()
