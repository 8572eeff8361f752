"""Shared fixtures for the searchpath tests."""

from pathlib import Path
from typing import Callable

import pytest

MakeFile = Callable[..., str]


@pytest.fixture  # type: ignore[misc]
def make_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> MakeFile:
    """
    Fixture that creates files below a temporary working directory.
    The current directory is changed to ``tmp_path`` so that relative paths
    such as ``t/a/file2`` can be used in the path lists of the tests.

    :return: A function taking a relative path and an ``executable`` flag,
             returning the relative path of the created file.
    :rtype: Callable[..., str]
    """
    monkeypatch.chdir(tmp_path)

    def _make(relpath: str, executable: bool = False) -> str:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("")
        path.chmod(0o755 if executable else 0o644)
        return relpath

    return _make
