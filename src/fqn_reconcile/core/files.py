from __future__ import annotations

import fnmatch
import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path

from fqn_reconcile.core.languages import is_source_file
from fqn_reconcile.core.ports.freshness import FreshnessCheck

logger = logging.getLogger(__name__)


def matches_any(relative_path: str, patterns: Sequence[str]) -> bool:
    name = relative_path.rsplit("/", 1)[-1]
    return any(fnmatch.fnmatch(relative_path, p) or fnmatch.fnmatch(name, p) for p in patterns)


class FilesystemFileListProvider:
    """List the source files below ``root`` that should be (re)checked."""

    def __init__(
        self,
        root: str | Path,
        include_patterns: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
        follow_symlinks: bool = False,
    ) -> None:
        self._root = Path(root).resolve()
        self._include_patterns = list(include_patterns)
        self._exclude_patterns = list(exclude_patterns)
        self._follow_symlinks = follow_symlinks

    @property
    def root(self) -> Path:
        return self._root

    def provide_file_list(
        self,
        freshness: FreshnessCheck | None = None,
        sub_path: str | Path | None = None,
    ) -> list[Path]:
        if sub_path is not None and Path(sub_path).is_file():
            return [Path(sub_path)]

        within = Path(sub_path).resolve() if sub_path is not None else None
        seen: set[Path] = set()
        files: list[Path] = []
        for path in self._walk():
            resolved = path.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)

            relative = self._relative(path)
            if self._include_patterns and not matches_any(relative, self._include_patterns):
                continue
            if self._exclude_patterns and matches_any(relative, self._exclude_patterns):
                continue
            if within is not None and not _is_within(resolved, within):
                continue
            if within is None and freshness is not None and freshness.is_fresh(path):
                continue
            files.append(path)

        logger.debug("Listed %d file(s) under %s", len(files), self._root)
        return sorted(files)

    def _walk(self) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(self._root, followlinks=self._follow_symlinks):
            dirnames.sort()
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if is_source_file(path):
                    yield path

    def _relative(self, path: Path) -> str:
        try:
            return path.relative_to(self._root).as_posix()
        except ValueError:
            return path.as_posix()


def _is_within(path: Path, directory: Path) -> bool:
    return path == directory or directory in path.parents
