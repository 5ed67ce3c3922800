"""Shared pytest fixtures for path_helper tests."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import pytest
from py_app_dev.core.logging import logger


@dataclass
class HelperEnv:
    """A self-contained configuration root with ``etc/paths`` and ``etc/manpaths`` layouts."""

    root_dir: Path
    paths_file: Path
    paths_dir: Path
    manpaths_file: Path
    manpaths_dir: Path

    def write_paths(self, *segments: str) -> Path:
        """Write the PATH defaults file, one segment per line."""
        return write_lines(self.paths_file, segments)

    def add_path_fragment(self, name: str, *segments: str) -> Path:
        """Write a fragment file into ``etc/paths.d``."""
        return write_lines(self.paths_dir / name, segments)

    def write_manpaths(self, *segments: str) -> Path:
        return write_lines(self.manpaths_file, segments)

    def add_manpath_fragment(self, name: str, *segments: str) -> Path:
        return write_lines(self.manpaths_dir / name, segments)


def write_lines(file_path: Path, lines: tuple[str, ...] | list[str]) -> Path:
    file_path.write_text("".join(f"{line}\n" for line in lines))
    return file_path


@pytest.fixture
def helper_env(tmp_path: Path) -> HelperEnv:
    """Provide an empty path_helper configuration root in a temporary directory."""
    root_dir = tmp_path / "root"
    etc_dir = root_dir / "etc"
    paths_dir = etc_dir / "paths.d"
    paths_dir.mkdir(parents=True)
    manpaths_dir = etc_dir / "manpaths.d"
    manpaths_dir.mkdir()

    return HelperEnv(
        root_dir=root_dir,
        paths_file=etc_dir / "paths",
        paths_dir=paths_dir,
        manpaths_file=etc_dir / "manpaths",
        manpaths_dir=manpaths_dir,
    )


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
