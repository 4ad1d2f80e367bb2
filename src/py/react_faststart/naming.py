"""Project name normalization and validation."""

import os
import re

from react_faststart.exceptions import InvalidProjectNameError

__all__ = ("PROJECT_NAME_PATTERN", "normalize_project_name", "validate_project_name")

PROJECT_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")
_WHITESPACE = re.compile(r"\s+")
_SEPARATORS = frozenset({"/", "\\", os.sep, *([os.altsep] if os.altsep else [])})


def normalize_project_name(raw: str) -> str:
    """Lower-case ``raw`` and replace whitespace runs with underscores.

    Returns:
        The normalized project name.
    """
    return _WHITESPACE.sub("_", raw.lower())


def _check_path_safety(raw: str) -> None:
    if any(sep in raw for sep in _SEPARATORS):
        raise InvalidProjectNameError(raw, "Project names must not contain path separators.")
    if ".." in raw:
        raise InvalidProjectNameError(raw, "Project names must not reference a parent directory.")


def validate_project_name(raw: str) -> str:
    """Validate user input and return the normalized project name.

    Path separators and parent-directory references are rejected before the
    name pattern is checked, so ``"../evil"`` never reaches the filesystem.

    Args:
        raw: Project name as typed by the user.

    Raises:
        InvalidProjectNameError: If the name is empty, unsafe or does not match
            ``^[a-z][a-z0-9_]*$`` after normalization.

    Returns:
        The normalized project name.
    """
    _check_path_safety(raw)
    name = normalize_project_name(raw)
    if not name:
        raise InvalidProjectNameError(raw, "A project name is required.")
    if not PROJECT_NAME_PATTERN.fullmatch(name):
        raise InvalidProjectNameError(
            raw,
            "Project name must start with a letter and can only contain lowercase letters, numbers, "
            "and underscores.",
        )
    return name
