from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Union

from github_content.errors import WriteError


def destination_for(folder: Union[str, Path], relative_path: str) -> Path:
    """Output path for a repository file: the folder plus the file's basename."""
    name = PurePosixPath(relative_path).name
    if not name:
        raise WriteError(f"cannot derive a file name from {relative_path!r}")
    return Path(folder) / name


def write_file(
    folder: Union[str, Path],
    relative_path: str,
    content: bytes,
    logger: logging.Logger,
) -> Path:
    """
    Write `content` to <folder>/<basename of relative_path>, replacing any
    existing file. The folder itself must already exist.
    """
    folder = Path(folder)
    if not folder.is_dir():
        raise WriteError(f"output folder {folder} does not exist or is not a directory")

    dest = destination_for(folder, relative_path)
    try:
        with dest.open("wb") as f:
            f.write(content)
    except OSError as e:
        raise WriteError(f"error in writing file {dest}: {e}") from e

    logger.info("written file %s", dest)
    return dest


__all__ = ["write_file", "destination_for"]
