class SearchPathError(Exception):
    """
    Exception raised for errors in the searchpath library.
    This is the base class of every error the library raises. It always means
    that a search could not be attempted; a search that runs and finds nothing
    is not an error.
    """

    pass


class InvalidArgumentError(SearchPathError, ValueError):
    """
    Exception raised when a search is requested with an unusable argument.
    This error is raised when the filename (or the subdirectory) to look for is
    an absolute path, so joining it to the searched directories would discard
    them.
    """

    pass


class MissingEnvironmentVariableError(SearchPathError, LookupError):
    """
    Exception raised when the path-list environment variable is not set.

    :param name: Name of the variable that was looked up.
    :type name: str
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Environment variable {name} is not defined. Unable to search it"
        )


class UndefinedEnvironmentVariableError(SearchPathError, LookupError):
    """
    Exception raised when the path-list environment variable exists but holds
    no value at all.
    A variable holding an empty string is not undefined: it is searched as the
    current directory.

    :param name: Name of the variable that was looked up.
    :type name: str
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Environment variable {name} does exist but it is not defined. "
            "Unable to search it"
        )
