"""Construction of search-path values from defaults, fragments and the environment."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from py_app_dev.core.logging import logger

from path_helper.accumulator import SEPARATOR, PathAccumulator
from path_helper.domain import PathVariable
from path_helper.fragments import list_fragment_files
from path_helper.sanitizer import sanitize_segment


class PathBuilder:
    """Merge a defaults file, a fragment directory and an existing variable value into one path list."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """
        Initialize the builder with a read-only environment.

        Args:
            environ: Variables to merge from. Defaults to the process environment.

        """
        self.environ: Mapping[str, str] = os.environ if environ is None else environ

    def build(self, env_var: str, defaults_file: Path, fragments_dir: Path) -> str:
        """
        Build the value of *env_var*.

        Segments are taken from *defaults_file*, then from each file in
        *fragments_dir* in case-insensitive name order, then from the current
        value of *env_var*. Later duplicates are dropped.

        Raises:
            FragmentDirectoryError: If *fragments_dir* cannot be listed.

        """
        path = PathAccumulator()
        self._append_file(path, defaults_file)
        for fragment in list_fragment_files(fragments_dir):
            self._append_file(path, fragment.path)

        existing = self.environ.get(env_var)
        if existing is not None:
            # Already in the environment, so already shell-safe
            path.extend(existing.split(SEPARATOR))
        return path.value

    def build_variables(self, variables: Iterable[PathVariable], root: Path) -> dict[str, str]:
        """
        Build every variable in *variables* with its files located under *root*.

        Variables marked ``only_if_set`` are skipped when absent from the
        environment. An empty value still counts as set.
        """
        result: dict[str, str] = {}
        for variable in variables:
            if variable.only_if_set and variable.name not in self.environ:
                logger.debug(f"Skipping {variable.name}: not set in the environment")
                continue
            defaults_file, fragments_dir = variable.resolve(root)
            result[variable.name] = self.build(variable.name, defaults_file, fragments_dir)
        return result

    def _append_file(self, path: PathAccumulator, file_path: Path) -> None:
        try:
            with file_path.open(encoding="utf-8", errors="surrogateescape", newline="\n") as fh:
                logger.debug(f"Reading segments from {file_path}")
                for line in fh:
                    path.append(sanitize_segment(line))
        except OSError as e:
            logger.error(f"{file_path}: {e.strerror or e}")
