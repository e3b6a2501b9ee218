"""Locate a resource directory and make it the working directory."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Union

_MAX_LEVELS_UP = 3


def _application_dir() -> Path:
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).resolve().parent
    return Path.cwd()


def search_and_set_resource_dir(
    folder_name: str, app_dir: Optional[Union[str, os.PathLike]] = None
) -> bool:
    """Find folder_name and change into it.

    The working directory is tried first, then the application directory
    and up to three levels above it. Returns False, leaving the working
    directory unchanged, when none of them holds the folder.
    """
    in_cwd = Path.cwd() / folder_name
    if in_cwd.is_dir():
        os.chdir(in_cwd)
        return True

    base = Path(app_dir) if app_dir is not None else _application_dir()
    for levels in range(_MAX_LEVELS_UP + 1):
        candidate = base.joinpath(*([".."] * levels), folder_name)
        if candidate.is_dir():
            os.chdir(candidate)
            return True
    return False