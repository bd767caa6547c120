"""Path utilities for export output."""

import logging
import os
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def ensure_directory(path: Union[str, Path]) -> Path:
    """Create the directory (and parents) if it does not exist yet.

    Args:
        path: Directory to create.

    Returns:
        The directory as a Path.

    Raises:
        OSError: If the directory cannot be created or the path is a file.
    """
    directory = Path(path).expanduser()
    if directory.exists() and not directory.is_dir():
        raise NotADirectoryError(f"{directory} exists and is not a directory")

    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Created export directory %s", directory)

    return directory


def with_suffix(path: Union[str, Path], suffix: str) -> Path:
    """Ensure an output path ends with the given extension.

    Args:
        path: Output path from the user.
        suffix: Extension including the dot, e.g. ".ics".

    Returns:
        Path with the extension appended when it was missing.
    """
    path = Path(os.fspath(path))
    if path.suffix.lower() == suffix.lower():
        return path
    return path.with_name(path.name + suffix)
