from importlib.metadata import PackageNotFoundError, version

from .config import Config
from .exceptions import CommandError, ConfigError, DewdropError, LoggingError

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("dewdrop")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    "CommandError",
    "Config",
    "ConfigError",
    "DewdropError",
    "LoggingError",
]
