from dataclasses import dataclass

from tilechecker.errors import ParseError


@dataclass(frozen=True)
class TileDescriptor:
    url: str
    width: int
    height: int

    @classmethod
    def from_json(cls, item):
        """Build a descriptor from one element of the tile list array."""
        if not isinstance(item, dict):
            raise ParseError(f"Tile entry must be an object, got {type(item).__name__}")

        url = item.get("url")
        if not isinstance(url, str) or not url:
            raise ParseError(f"Tile entry has no usable 'url': {item!r}")

        for key in ("width", "height"):
            value = item.get(key)
            # bool is an int subclass; "width": true is not a size
            if not isinstance(value, int) or isinstance(value, bool):
                raise ParseError(f"Tile entry '{key}' must be an integer: {item!r}")

        return cls(url=url, width=item["width"], height=item["height"])
