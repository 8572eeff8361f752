"""Module for resolving the options of a path search."""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Union

from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_ENV_VAR = "PATH"
"""The executable search variable, searched when no other is named."""

PathLike = Union[str, "os.PathLike[str]"]


def _relative_path(value: PathLike, what: str) -> str:
    """
    Convert a path argument to a string and make sure it is not absolute.

    :param value: The path to check.
    :type value: Union[str, os.PathLike]
    :param what: Human readable name of the argument, used in the error message.
    :type what: str
    :return: The path as a string.
    :rtype: str
    :raises InvalidArgumentError: If the path is absolute.
    """
    path = os.fspath(value)
    if os.path.isabs(path):
        err = f"Supplied {what} to searchpath uses an absolute path: {path!r}"
        raise InvalidArgumentError(err)
    return path


@dataclass(frozen=True)
class SearchConfig:
    """
    Fully resolved options of a single search.

    Instances are normally built by :func:`resolve_config`, which applies every
    default, so the search loop never has to decide anything about its options.
    Every field must be given when building one directly; ``filename`` and
    ``subdir`` are checked here so no configuration can hold an absolute path.
    This class is frozen (immutable) so a configuration cannot change while a
    search is running.

    :raises InvalidArgumentError: If ``filename`` or ``subdir`` is absolute.
    """

    filename: str
    """Relative name of the file to locate. May contain directories."""

    env: str
    """Name of the path-like environment variable to search."""

    exe: bool
    """Whether only executable files count as matches."""

    subdir: str
    """Relative directory inserted between each searched directory and the filename."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "filename", _relative_path(self.filename, "filename"))
        object.__setattr__(self, "subdir", _relative_path(self.subdir, "subdir"))


def resolve_config(
    filename: PathLike,
    env: Optional[str] = None,
    exe: Optional[bool] = None,
    subdir: Optional[PathLike] = None,
) -> SearchConfig:
    """
    Build a :class:`SearchConfig`, filling in the defaults.

    The ``exe`` default depends on the variable being searched: it is true for
    ``PATH`` and false for every other variable.

    :param filename: Name of the file to locate. Must not be absolute.
    :type filename: Union[str, os.PathLike]
    :param env: Name of the environment variable to search. Defaults to ``PATH``.
    :type env: Optional[str]
    :param exe: Only match executable files. Defaults to ``env == "PATH"``.
    :type exe: Optional[bool]
    :param subdir: Directory below each searched directory to look in.
                   Defaults to the current directory marker.
    :type subdir: Optional[Union[str, os.PathLike]]
    :return: The resolved configuration.
    :rtype: SearchConfig
    :raises InvalidArgumentError: If ``filename`` or ``subdir`` is absolute.
    """
    if env is None:
        env = DEFAULT_ENV_VAR
    if exe is None:
        exe = env == DEFAULT_ENV_VAR

    if subdir is None:
        subdir = os.curdir

    config = SearchConfig(filename=filename, env=env, exe=bool(exe), subdir=subdir)
    logger.debug("Resolved search config: %r", config)
    return config
