import pytest

from tilechecker.errors import HostLookupError
from tilechecker.imaging import to_texture
from tilechecker.scene import Scene, SceneObject, apply_texture, default_scene

from conftest import solid


def test_default_scene_has_plane():
    assert default_scene().find("Plane").name == "Plane"


def test_unknown_object_raises_lookup_error():
    scene = Scene([SceneObject("Cube")])
    with pytest.raises(HostLookupError, match="Plane"):
        scene.find("Plane")


def test_apply_texture_sets_main_texture():
    target = SceneObject("Plane")
    texture = to_texture(solid(4, (5, 6, 7, 255)))

    assert apply_texture(target, texture) is target
    assert target.main_texture is texture
    assert target.main_texture.get_size() == (4, 4)
