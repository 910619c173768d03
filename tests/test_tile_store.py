import pytest

from tilechecker.errors import InsufficientTilesError
from tilechecker.tile_store import list_tile_files, require_pair, tile_path


def touch(directory, *names):
    for name in names:
        (directory / name).write_bytes(b"x")


def test_missing_directory_lists_nothing(tmp_path):
    assert list_tile_files(tmp_path / "Tiles") == []


def test_lists_only_direct_regular_files(tmp_path):
    touch(tmp_path, "Tile0.png", "Tile1.png")
    (tmp_path / "nested").mkdir()
    touch(tmp_path / "nested", "Tile5.png")

    names = [p.name for p in list_tile_files(tmp_path)]
    assert names == ["Tile0.png", "Tile1.png"]


def test_index_order_follows_download_index(tmp_path):
    touch(tmp_path, *[f"Tile{i}.png" for i in range(12)], "notes.txt")

    names = [p.name for p in list_tile_files(tmp_path)]
    assert names[:3] == ["Tile0.png", "Tile1.png", "Tile2.png"]
    assert names[10:] == ["Tile10.png", "Tile11.png", "notes.txt"]


def test_lexical_order_puts_tile10_before_tile2(tmp_path):
    touch(tmp_path, *[f"Tile{i}.png" for i in range(12)])

    names = [p.name for p in list_tile_files(tmp_path, order="lexical")]
    assert names[:4] == ["Tile0.png", "Tile1.png", "Tile10.png", "Tile11.png"]


def test_unknown_order_rejected(tmp_path):
    with pytest.raises(ValueError):
        list_tile_files(tmp_path, order="mtime")


def test_tile_path_uses_index_name(tmp_path):
    assert tile_path(tmp_path, 7) == tmp_path / "Tile7.png"


@pytest.mark.parametrize("count", [0, 1])
def test_require_pair_needs_two(tmp_path, count):
    paths = [tmp_path / f"Tile{i}.png" for i in range(count)]
    with pytest.raises(InsufficientTilesError) as excinfo:
        require_pair(paths)
    assert excinfo.value.found == count


def test_require_pair_takes_first_two(tmp_path):
    paths = [tmp_path / f"Tile{i}.png" for i in range(3)]
    assert require_pair(paths) == paths[:2]
