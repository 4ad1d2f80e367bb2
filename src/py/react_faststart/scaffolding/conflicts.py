"""Handling of pre-existing project directories."""

import shutil
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from react_faststart.console import logger

__all__ = ("ConflictResolution", "remove_path", "resolve_directory_conflict")


class ConflictResolution(str, Enum):
    """Result of checking the target directory."""

    CLEAN = "clean"
    """Nothing existed at the target path."""
    OVERWRITTEN = "overwritten"
    """The existing path was removed after confirmation."""
    ABORTED = "aborted"
    """The user declined to overwrite; nothing was touched."""


def remove_path(path: Path) -> None:
    """Remove a file or directory tree.

    A path that disappears while being removed is treated as already removed.
    """
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except FileNotFoundError:
        logger.debug("%s vanished before removal", path)


def resolve_directory_conflict(path: Path, confirm: "Callable[[str], bool]") -> ConflictResolution:
    """Make sure ``path`` is free before the generator runs.

    Args:
        path: The target project directory.
        confirm: Asks the user a yes/no question. Only called when ``path`` exists.

    Returns:
        ``CLEAN`` when nothing existed, ``OVERWRITTEN`` when the user agreed to
        replace the existing path, ``ABORTED`` when they declined.
    """
    if not path.exists() and not path.is_symlink():
        return ConflictResolution.CLEAN

    if not confirm(f"Directory '{path.name}' already exists. Overwrite?"):
        return ConflictResolution.ABORTED

    logger.debug("Removing %s", path)
    remove_path(path)
    return ConflictResolution.OVERWRITTEN
