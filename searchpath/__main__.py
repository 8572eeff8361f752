"""Search for files in a path-like environment variable."""

import argparse
import importlib.resources
import logging
import sys
import traceback
from logging.config import dictConfig
from typing import Optional, Sequence

import toml

from . import __version__
from .exceptions import SearchPathError
from .search import searchpath, searchpath_all

logger = logging.getLogger(__name__)
with (
    importlib.resources.as_file(
        importlib.resources.files("searchpath").joinpath("logging.toml")
    ) as config_path,
    open(config_path, "rb") as f,
):
    log_config = toml.loads(f.read().decode("utf-8"))
dictConfig(log_config)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    :return: parsed arguments
    :rtype: argparse.Namespace
    """
    parser = argparse.ArgumentParser(
        description=__doc__.strip() if __doc__ else None,
        prog="searchpath",
    )
    parser.add_argument("files", nargs="+", help="relative name of a file to locate")
    parser.add_argument(
        "-e",
        "--env",
        metavar="NAME",
        help="environment variable to search (default: PATH)",
    )
    parser.add_argument(
        "--exe",
        dest="exe",
        action="store_const",
        const=True,
        default=None,
        help="only match executable files (default for PATH)",
    )
    parser.add_argument(
        "--no-exe",
        dest="exe",
        action="store_const",
        const=False,
        help="match any existing file (default for other variables)",
    )
    parser.add_argument(
        "-s",
        "--subdir",
        metavar="DIR",
        help="subdirectory of each searched directory to look in",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="all_matches",
        action="store_true",
        help="print every match instead of the first one",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="show version",
    )
    parser.add_argument("--verbose", action="store_true", help="enable verbose output")

    return parser.parse_args(argv)


def print_exception(exc: Exception, debug: bool) -> None:
    """
    Print an exception message to stderr, optionally including a stack trace.

    :param exc: The exception to print.
    :type exc: Exception
    :param debug: Whether to include a stack trace.
    :type debug: bool
    """
    if debug:
        traceback.print_exc()
    else:
        print(exc, file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Locate each file given on the command line and print the matches.

    :return: 0 if every file was found, 1 if one was not, 2 if a search failed.
    :rtype: int
    """
    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    status = 0

    for filename in args.files:
        try:
            if args.all_matches:
                matches = searchpath_all(
                    filename, env=args.env, exe=args.exe, subdir=args.subdir
                )
            else:
                match = searchpath(
                    filename, env=args.env, exe=args.exe, subdir=args.subdir
                )
                matches = [match] if match is not None else []
        except SearchPathError as exception:
            print_exception(exception, args.verbose)
            status = 2
            continue

        if not matches:
            logger.info("%s not found", filename)
            status = max(status, 1)
        for path in matches:
            print(path)

    return status


if __name__ == "__main__":
    raise SystemExit(main())
