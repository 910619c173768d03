class TileCheckerError(Exception):
    """Base class for every failure the tile pipeline reports."""


class FetchError(TileCheckerError):
    """The tile list could not be retrieved."""


class ParseError(TileCheckerError):
    """The tile list body is not a JSON array of tile objects."""


class DownloadError(TileCheckerError):
    """A single tile could not be downloaded, decoded or written."""

    def __init__(self, url, message):
        super().__init__(f"{url}: {message}")
        self.url = url
        self.message = message


class InsufficientTilesError(TileCheckerError):
    """Fewer than two tile files are available for the checker pattern."""

    def __init__(self, found):
        super().__init__(f"Not enough tile files available (found {found}, need 2)")
        self.found = found


class DecodeError(TileCheckerError):
    """A local tile file could not be decoded into pixels."""


class HostLookupError(TileCheckerError):
    """No scene object carries the requested name."""
