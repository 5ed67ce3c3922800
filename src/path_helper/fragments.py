"""Enumeration of drop-in fragment files."""

from __future__ import annotations

import os
from pathlib import Path

from py_app_dev.core.logging import logger

from path_helper.domain import FragmentFile
from path_helper.errors import FragmentDirectoryError


def list_fragment_files(directory: Path) -> list[FragmentFile]:
    """
    Return the regular files directly inside *directory*, sorted case-insensitively by name.

    Symbolic links are not followed and subdirectories are skipped without
    being descended into.

    Raises:
        FragmentDirectoryError: If *directory* cannot be opened for listing.

    """
    try:
        with os.scandir(directory) as entries:
            fragments = [FragmentFile(name=entry.name, path=directory / entry.name) for entry in entries if entry.is_file(follow_symlinks=False)]
    except OSError as e:
        raise FragmentDirectoryError(directory, e.strerror or str(e)) from e

    logger.debug(f"Found {len(fragments)} fragment file(s) in {directory}")
    return sorted(fragments, key=lambda fragment: fragment.sort_key)
