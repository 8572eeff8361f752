"""Access to the process environment and the filesystem."""

import logging
import os
from typing import Mapping, Optional

from .exceptions import (
    MissingEnvironmentVariableError,
    UndefinedEnvironmentVariableError,
)

logger = logging.getLogger(__name__)


class EnvironmentReader:
    """
    Read-only view of environment variables.

    :param environ: Mapping to read from. Defaults to ``os.environ``.
    :type environ: Optional[Mapping[str, Optional[str]]]
    """

    def __init__(self, environ: Optional[Mapping[str, Optional[str]]] = None):
        self.environ = os.environ if environ is None else environ

    def read(self, name: str) -> str:
        """
        Return the value of an environment variable.

        :param name: Name of the variable.
        :type name: str
        :return: The raw value, possibly an empty string.
        :rtype: str
        :raises MissingEnvironmentVariableError: If the variable is not set.
        :raises UndefinedEnvironmentVariableError: If the variable is set but has no value.
        """
        if name not in self.environ:
            raise MissingEnvironmentVariableError(name)
        value = self.environ[name]
        if value is None:
            raise UndefinedEnvironmentVariableError(name)
        return value


class FilesystemProber:
    """Answer existence and permission questions about candidate paths."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_executable(self, path: str) -> bool:
        return os.access(path, os.X_OK)

    def matches(self, path: str, exe: bool) -> bool:
        """
        Check whether a candidate path is a match.
        An error while probing one candidate is treated as a miss so the search
        can go on with the next directory.

        :param path: The candidate path.
        :type path: str
        :param exe: Whether the candidate must also be executable.
        :type exe: bool
        :return: True if the candidate exists (and is executable when required).
        :rtype: bool
        """
        try:
            if not self.exists(path):
                return False
            if exe and not self.is_executable(path):
                logger.debug("Skipping non-executable candidate %s", path)
                return False
        except OSError as e:
            logger.debug("Could not probe candidate %s: %s", path, e)
            return False
        return True
