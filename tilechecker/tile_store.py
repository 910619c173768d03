import os
import re
from pathlib import Path

from tilechecker.config import ORDERS
from tilechecker.errors import InsufficientTilesError

TILE_NAME = re.compile(r"^Tile(\d+)\.png$")


def tile_filename(index):
    return f"Tile{index}.png"


def tile_path(dest_dir, index) -> Path:
    return Path(dest_dir) / tile_filename(index)


def _index_key(name):
    match = TILE_NAME.match(name)
    if match:
        return (0, int(match.group(1)), name)
    return (1, 0, name)


def list_tile_files(dest_dir, order="index"):
    """
    List the regular files directly under dest_dir.

    order="index" returns Tile<i>.png files in numeric i order (the order the
    downloader wrote them), followed by any other files by name.
    order="lexical" sorts by name only, so Tile10.png comes before Tile2.png.
    """
    if order not in ORDERS:
        raise ValueError(f"Unknown tile order {order!r}, expected one of {ORDERS}")

    dest_dir = Path(dest_dir)
    if not dest_dir.is_dir():
        return []

    with os.scandir(dest_dir) as entries:
        names = [entry.name for entry in entries if entry.is_file()]

    if order == "index":
        names.sort(key=_index_key)
    else:
        names.sort()
    return [dest_dir / name for name in names]


def require_pair(paths):
    """First two tile paths, or InsufficientTilesError."""
    if len(paths) < 2:
        raise InsufficientTilesError(len(paths))
    return list(paths[:2])
