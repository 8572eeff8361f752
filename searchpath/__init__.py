"""Search for a file in a path-like environment variable."""

__all__ = [
    "searchpath",
    "searchpath_all",
    "searchpath_in",
    "search",
    "search_path_list",
    "resolve_config",
    "SearchConfig",
    "ResultMode",
    "exceptions",
    "__version__",
]

import logging
from importlib.metadata import PackageNotFoundError, version

from . import exceptions
from .config import SearchConfig, resolve_config
from .search import (
    ResultMode,
    search,
    search_path_list,
    searchpath,
    searchpath_all,
    searchpath_in,
)

try:
    __version__ = version("searchpath")
except PackageNotFoundError:  # Not installed, e.g. running from a source checkout
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
