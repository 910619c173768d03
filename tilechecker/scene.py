import logging

from tilechecker.config import PLANE_NAME
from tilechecker.errors import HostLookupError

logger = logging.getLogger(__name__)


class SceneObject:
    """A named object whose surface is drawn with main_texture."""

    def __init__(self, name, rect=None):
        self.name = name
        self.rect = rect
        self.main_texture = None

    def __repr__(self):
        return f"SceneObject({self.name!r})"


class Scene:
    def __init__(self, objects=None):
        self.objects = {}
        for obj in objects or []:
            self.add(obj)

    def add(self, obj):
        self.objects[obj.name] = obj
        return obj

    def find(self, name):
        try:
            return self.objects[name]
        except KeyError:
            raise HostLookupError(f"No scene object named {name!r}") from None


def default_scene():
    return Scene([SceneObject(PLANE_NAME)])


def apply_texture(target, texture):
    """Make texture the visible surface of target."""
    target.main_texture = texture
    logger.info("Applied %dx%d texture to %s", *texture.get_size(), target.name)
    return target
