from importlib.metadata import PackageNotFoundError, version

from .api import Ref, delete, exists, get, ref, set
from .cell import Cell
from .config import AccessConfig
from .exceptions import (
    ConfigError,
    DeepPathError,
    InvalidKeyError,
    InvocationError,
    TraversalError,
)
from .keys import Attr, Index, Key, KeyKind, MapKey, Method, normalize_key
from .kinds import ContainerKind, Scalar, classify
from .path import format_path, parse_path

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("deeppath")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Entry points
    "exists",
    "get",
    "set",
    "delete",
    "ref",
    "Ref",
    # Data model
    "Cell",
    "Key",
    "KeyKind",
    "MapKey",
    "Index",
    "Method",
    "Attr",
    "normalize_key",
    "ContainerKind",
    "Scalar",
    "classify",
    # Paths
    "parse_path",
    "format_path",
    # Config
    "AccessConfig",
    # Exceptions
    "DeepPathError",
    "TraversalError",
    "InvocationError",
    "InvalidKeyError",
    "ConfigError",
]
