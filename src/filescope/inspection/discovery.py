"""Expand path and glob patterns into the files to inspect."""

from __future__ import annotations

import glob
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DiscoveredPath:
    """A regular file to inspect, or a directory about to be walked."""

    path: Path
    is_directory: bool = False


class PathExpander:
    """Turn user-supplied patterns into an ordered stream of regular files."""

    def __init__(
        self,
        *,
        recursive: bool,
        include_hidden: bool = True,
        follow_symlinks: bool = True,
    ) -> None:
        self.recursive = recursive
        self.include_hidden = include_hidden
        self.follow_symlinks = follow_symlinks

    def expand(self, pattern: str) -> Iterator[DiscoveredPath]:
        """Yield files and directory notices for one pattern.

        Matches are visited in sorted order. Matched directories are listed;
        their subdirectories are only entered when ``recursive`` is set.
        """
        expanded = os.path.expanduser(pattern)
        matches = sorted(
            glob.glob(expanded, recursive=True, include_hidden=self.include_hidden)
        )
        if not matches:
            LOGGER.warning("No files matched pattern %r.", pattern)
            return

        visited: set[Path] = set()
        emitted: set[Path] = set()
        for discovered in self._visit_matches(matches, visited):
            if not discovered.is_directory:
                if discovered.path in emitted:
                    continue
                emitted.add(discovered.path)
            yield discovered

    def _visit_matches(self, matches: list[str], visited: set[Path]) -> Iterator[DiscoveredPath]:
        for match in matches:
            path = Path(match)
            if self._skip_link(path):
                continue
            if path.is_dir():
                yield from self._walk(path, visited)
            elif path.is_file():
                yield DiscoveredPath(path)
            else:
                LOGGER.debug("Skipping %s: not a regular file or directory.", path)

    def _walk(self, directory: Path, visited: set[Path]) -> Iterator[DiscoveredPath]:
        resolved = directory.resolve()
        if resolved in visited:
            LOGGER.debug("Skipping %s: directory already visited.", directory)
            return
        visited.add(resolved)

        yield DiscoveredPath(directory, is_directory=True)
        try:
            entries = sorted(directory.iterdir())
        except OSError as exc:
            LOGGER.warning("Failed to read directory %s: %s", directory, exc)
            return

        for entry in entries:
            if not self.include_hidden and entry.name.startswith("."):
                continue
            if self._skip_link(entry):
                continue
            if entry.is_file():
                yield DiscoveredPath(entry)
            elif entry.is_dir() and self.recursive:
                yield from self._walk(entry, visited)

    def _skip_link(self, path: Path) -> bool:
        return not self.follow_symlinks and path.is_symlink()


__all__ = ["DiscoveredPath", "PathExpander"]
