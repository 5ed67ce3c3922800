"""path_helper domain models for fragment files and managed variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath


@dataclass(frozen=True)
class FragmentFile:
    """A regular file inside a fragment directory contributing one segment per line."""

    #: File name, used as the case-insensitive sort key
    name: str
    #: Path to the file (fragment directory joined with the name)
    path: Path

    @property
    def sort_key(self) -> tuple[bytes, bytes]:
        """Byte-wise key with ASCII letters folded, ties broken by the raw name."""
        raw = os.fsencode(self.name)
        return raw.lower(), raw


@dataclass(frozen=True)
class PathVariable:
    """A search-path environment variable and the files it is built from."""

    name: str
    #: Defaults file, relative to the configuration root
    defaults_file: PurePosixPath
    #: Fragment directory, relative to the configuration root
    fragments_dir: PurePosixPath
    #: Only build the variable when it is already set in the environment
    only_if_set: bool = False

    def resolve(self, root: Path) -> tuple[Path, Path]:
        """Return ``(defaults_file, fragments_dir)`` located under *root*."""
        return root / self.defaults_file, root / self.fragments_dir


class ShellStyle(Enum):
    """Syntax used for the emitted export statements."""

    CSH = "csh"
    SH = "sh"


DEFAULT_VARIABLES: tuple[PathVariable, ...] = (
    PathVariable(name="PATH", defaults_file=PurePosixPath("etc/paths"), fragments_dir=PurePosixPath("etc/paths.d")),
    PathVariable(
        name="MANPATH",
        defaults_file=PurePosixPath("etc/manpaths"),
        fragments_dir=PurePosixPath("etc/manpaths.d"),
        only_if_set=True,
    ),
)
