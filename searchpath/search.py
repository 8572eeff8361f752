"""Search for a file in a path-like environment variable."""

import logging
import os
from enum import Enum
from typing import List, Optional, Union

from .config import PathLike, SearchConfig, resolve_config
from .pathlist import PathListSplitter, get_default_splitter
from .probe import EnvironmentReader, FilesystemProber

__all__ = [
    "ResultMode",
    "search",
    "search_path_list",
    "searchpath",
    "searchpath_all",
    "searchpath_in",
]

logger = logging.getLogger(__name__)

SearchResult = Union[Optional[str], List[str]]


class ResultMode(Enum):
    FIRST = "first"
    ALL = "all"


def _candidate(directory: str, config: SearchConfig) -> str:
    """
    Build the path of the file below one searched directory.

    :param directory: An entry of the path list. Blank means the current directory.
    :type directory: str
    :param config: The search configuration.
    :type config: SearchConfig
    :return: The candidate path.
    :rtype: str
    """
    if not directory:
        directory = os.curdir
    if config.subdir == os.curdir:
        return os.path.join(directory, config.filename)
    return os.path.join(directory, config.subdir, config.filename)


def search_path_list(
    config: SearchConfig,
    path_list: str,
    mode: ResultMode = ResultMode.FIRST,
    *,
    prober: Optional[FilesystemProber] = None,
    splitter: Optional[PathListSplitter] = None,
) -> SearchResult:
    """
    Search the directories of a raw path-list string.
    The environment is not consulted, so this never raises an environment error.

    :param config: The search configuration. ``config.env`` is ignored.
    :type config: SearchConfig
    :param path_list: The raw path list, e.g. ``"/usr/local/bin:/usr/bin"``.
    :type path_list: str
    :param mode: Return the first match or all of them.
    :type mode: ResultMode
    :param prober: Filesystem access. Defaults to the real filesystem.
    :type prober: Optional[FilesystemProber]
    :param splitter: How to split ``path_list``. Defaults to the platform convention.
    :type splitter: Optional[PathListSplitter]
    :return: The first match or None in ``FIRST`` mode, the list of matches in ``ALL`` mode.
    :rtype: Union[Optional[str], List[str]]
    """
    if prober is None:
        prober = FilesystemProber()
    if splitter is None:
        splitter = get_default_splitter()

    directories = splitter.split(path_list)
    logger.debug("Searching %s in %r", config.filename, directories)

    matches: List[str] = []
    for directory in directories:
        candidate = _candidate(directory, config)
        if not prober.matches(candidate, config.exe):
            continue
        logger.debug("Found %s", candidate)
        matches.append(candidate)
        if mode is ResultMode.FIRST:
            break

    if mode is ResultMode.ALL:
        return matches
    return matches[0] if matches else None


def search(
    config: SearchConfig,
    mode: ResultMode = ResultMode.FIRST,
    *,
    reader: Optional[EnvironmentReader] = None,
    prober: Optional[FilesystemProber] = None,
    splitter: Optional[PathListSplitter] = None,
) -> SearchResult:
    """
    Search the directories listed in ``config.env``.

    :param config: The search configuration.
    :type config: SearchConfig
    :param mode: Return the first match or all of them.
    :type mode: ResultMode
    :param reader: Environment access. Defaults to ``os.environ``.
    :type reader: Optional[EnvironmentReader]
    :param prober: Filesystem access. Defaults to the real filesystem.
    :type prober: Optional[FilesystemProber]
    :param splitter: How to split the variable. Defaults to the platform convention.
    :type splitter: Optional[PathListSplitter]
    :return: The first match or None in ``FIRST`` mode, the list of matches in ``ALL`` mode.
    :rtype: Union[Optional[str], List[str]]
    :raises MissingEnvironmentVariableError: If the variable is not set.
    :raises UndefinedEnvironmentVariableError: If the variable has no value.
    """
    if reader is None:
        reader = EnvironmentReader()
    raw = reader.read(config.env)
    return search_path_list(config, raw, mode, prober=prober, splitter=splitter)


def searchpath(
    filename: PathLike,
    env: Optional[str] = None,
    exe: Optional[bool] = None,
    subdir: Optional[PathLike] = None,
) -> Optional[str]:
    """
    Locate a file in a path-like environment variable.

    By default ``PATH`` is searched for an executable file::

        >>> searchpath("ls")  # doctest: +SKIP
        '/bin/ls'
        >>> searchpath("libperl.a", env="LD_LIBRARY_PATH")  # doctest: +SKIP

    A blank entry in the variable, or a variable set to the empty string, means
    the current directory.

    :param filename: Name of the file. Must not be absolute but may contain directories.
    :type filename: Union[str, os.PathLike]
    :param env: Environment variable to search. Defaults to ``PATH``.
    :type env: Optional[str]
    :param exe: Only match executable files. Defaults to true for ``PATH`` and
                false for any other variable.
    :type exe: Optional[bool]
    :param subdir: Directory below each searched directory in which the file lives.
    :type subdir: Optional[Union[str, os.PathLike]]
    :return: The first match, or None if there is none.
    :rtype: Optional[str]
    :raises InvalidArgumentError: If ``filename`` is absolute.
    :raises MissingEnvironmentVariableError: If ``env`` is not set.
    :raises UndefinedEnvironmentVariableError: If ``env`` has no value.
    """
    config = resolve_config(filename, env=env, exe=exe, subdir=subdir)
    return search(config, ResultMode.FIRST)


def searchpath_all(
    filename: PathLike,
    env: Optional[str] = None,
    exe: Optional[bool] = None,
    subdir: Optional[PathLike] = None,
) -> List[str]:
    """
    Like :func:`searchpath`, but return every match in the order the
    directories appear in the variable.

    :rtype: List[str]
    """
    config = resolve_config(filename, env=env, exe=exe, subdir=subdir)
    return search(config, ResultMode.ALL)


def searchpath_in(
    filename: PathLike,
    path_list: str,
    exe: bool = False,
    subdir: Optional[PathLike] = None,
    all_matches: bool = False,
) -> SearchResult:
    """
    Search a path list given as a string rather than through a variable name.

    :param filename: Name of the file. Must not be absolute.
    :type filename: Union[str, os.PathLike]
    :param path_list: The raw path list.
    :type path_list: str
    :param exe: Only match executable files.
    :type exe: bool
    :param subdir: Directory below each searched directory in which the file lives.
    :type subdir: Optional[Union[str, os.PathLike]]
    :param all_matches: Return the list of all matches instead of the first one.
    :type all_matches: bool
    :return: The first match or None, or the list of matches.
    :rtype: Union[Optional[str], List[str]]
    :raises InvalidArgumentError: If ``filename`` is absolute.
    """
    config = resolve_config(filename, exe=exe, subdir=subdir)
    mode = ResultMode.ALL if all_matches else ResultMode.FIRST
    return search_path_list(config, path_list, mode)
