import math
import os
from pathlib import Path


API_URL = "https://quicklook.orientbell.com/Task/gettiles.php"
LOCAL_PATH = "Tiles"  # relative to the persistent root
PATTERN_SIZE = 8
PLANE_NAME = "Plane"
REQUEST_TIMEOUT = 30
ORDERS = ("index", "lexical")
DEFAULT_ORDER = "index"


def default_data_root():
    return Path.home() / ".tilechecker"


class Settings:
    def __init__(
        self,
        api_url=API_URL,
        data_root=None,
        timeout=REQUEST_TIMEOUT,
        order=DEFAULT_ORDER,
        plane_name=PLANE_NAME,
    ):
        self.api_url = api_url
        self.data_root = Path(data_root) if data_root else default_data_root()
        self.timeout = timeout
        self.order = order
        self.plane_name = plane_name

    @property
    def tile_dir(self) -> Path:
        return self.data_root / LOCAL_PATH

    def __repr__(self):
        return (
            f"Settings(api_url={self.api_url!r}, data_root={str(self.data_root)!r}, "
            f"timeout={self.timeout}, order={self.order!r})"
        )


def parse_timeout(value):
    """Seconds as a positive, finite float. Raises ValueError otherwise."""
    timeout = float(value)
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(f"timeout must be a positive number of seconds, got {value!r}")
    return timeout


def load_settings(environ=None) -> Settings:
    """Read overrides from TILECHECKER_* environment variables."""
    env = os.environ if environ is None else environ

    try:
        timeout = parse_timeout(env.get("TILECHECKER_TIMEOUT", REQUEST_TIMEOUT))
    except ValueError:
        timeout = REQUEST_TIMEOUT

    order = env.get("TILECHECKER_ORDER", DEFAULT_ORDER)
    if order not in ORDERS:
        order = DEFAULT_ORDER

    return Settings(
        api_url=env.get("TILECHECKER_API_URL", API_URL),
        data_root=env.get("TILECHECKER_DATA_DIR") or None,
        timeout=timeout,
        order=order,
    )
