"""Splitting of path-like environment values into directory lists."""

import os
from typing import List

__all__ = [
    "PathListSplitter",
    "ColonSplitter",
    "PlatformSplitter",
    "get_default_splitter",
]


class PathListSplitter:
    """Turn the raw value of a path-like variable into an ordered list of directories."""

    def split(self, raw: str) -> List[str]:
        """Return the directories of ``raw`` in order, blank entries included."""
        raise NotImplementedError


class ColonSplitter(PathListSplitter):
    """
    Split on colons, whatever the platform.

    Empty fields are kept, including a trailing one (``"a:b:"`` gives
    ``["a", "b", ""]``), and are later searched as the current directory.
    """

    def split(self, raw: str) -> List[str]:
        return raw.split(":")


class PlatformSplitter(PathListSplitter):
    """
    Split on the separator of the running platform (``os.pathsep``).

    On Windows, entries may be wrapped in double quotes so that they can
    contain the separator; those quotes are removed.
    As with :class:`ColonSplitter`, empty fields are kept, a trailing one
    included, and are later searched as the current directory.
    """

    def __init__(
        self,
        pathsep: str = os.pathsep,
        strip_quotes: bool = os.name == "nt",
    ):
        self.pathsep = pathsep
        self.strip_quotes = strip_quotes

    def split(self, raw: str) -> List[str]:
        if not self.strip_quotes:
            return raw.split(self.pathsep)

        entries = []
        current = []
        quoted = False
        for char in raw:
            if char == '"':
                quoted = not quoted
            elif char == self.pathsep and not quoted:
                entries.append("".join(current))
                current = []
            else:
                current.append(char)
        entries.append("".join(current))
        return entries


def get_default_splitter() -> PathListSplitter:
    return PlatformSplitter()
