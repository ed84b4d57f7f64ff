from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path, PurePath

from pydantic import ValidationError

from fqn_reconcile.core.errors import NoCandidateError
from fqn_reconcile.models import ClassName

logger = logging.getLogger(__name__)

_AUTOLOAD_SECTIONS = ("autoload", "autoload-dev")


class Psr4CandidateResolver:
    """Derive class names from file paths through PSR-4 prefix mappings.

    ``mappings`` maps a namespace prefix (``"Acme\\"``, or ``""`` for the
    global fallback) to one or more base directories relative to ``root``.
    """

    def __init__(self, mappings: Mapping[str, str | Sequence[str]], root: str | Path = ".") -> None:
        self._root = Path(root).resolve()
        self._entries: list[tuple[str, Path]] = []
        for prefix, directories in mappings.items():
            if isinstance(directories, str):
                directories = [directories]
            normalized_prefix = prefix.strip("\\")
            for directory in directories:
                self._entries.append((normalized_prefix, (self._root / directory).resolve()))

    @classmethod
    def from_composer(cls, project_root: str | Path) -> Psr4CandidateResolver:
        root = Path(project_root)
        composer_file = root / "composer.json"
        try:
            composer = json.loads(composer_file.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.warning("No composer.json found in %s", root)
            return cls({}, root)
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Could not parse %s", composer_file)
            return cls({}, root)

        mappings: dict[str, list[str]] = {}
        for section in _AUTOLOAD_SECTIONS:
            autoload = composer.get(section) or {}
            if not isinstance(autoload, dict):
                continue
            for prefix, directories in (autoload.get("psr-4") or {}).items():
                if isinstance(directories, str):
                    directories = [directories]
                mappings.setdefault(prefix, []).extend(directories)
        return cls(mappings, root)

    @property
    def root(self) -> Path:
        return self._root

    def candidates(self, path: str) -> list[ClassName]:
        file_path = Path(path)
        if not file_path.is_absolute():
            file_path = self._root / file_path
        file_path = file_path.resolve()

        matches: list[tuple[int, int, ClassName]] = []
        for order, (prefix, directory) in enumerate(self._entries):
            try:
                relative = file_path.relative_to(directory)
            except ValueError:
                continue
            class_name = _class_name_for(prefix, relative)
            if class_name is not None:
                matches.append((-len(directory.parts), order, class_name))

        seen: set[ClassName] = set()
        ranked: list[ClassName] = []
        for _, _, class_name in sorted(matches, key=lambda m: (m[0], m[1])):
            if class_name not in seen:
                seen.add(class_name)
                ranked.append(class_name)
        return ranked

    def best_candidate(self, path: str) -> ClassName:
        candidates = self.candidates(path)
        if not candidates:
            raise NoCandidateError(f"Could not derive a class name for {path}")
        return candidates[0]


class StaticCandidateResolver:
    """Resolve paths from a fixed path to class-name table."""

    def __init__(self, mapping: Mapping[str, str | ClassName]) -> None:
        self._mapping = {
            os.path.normpath(path): value if isinstance(value, ClassName) else ClassName.from_string(value)
            for path, value in mapping.items()
        }

    def candidates(self, path: str) -> list[ClassName]:
        class_name = self._mapping.get(os.path.normpath(path))
        return [class_name] if class_name is not None else []

    def best_candidate(self, path: str) -> ClassName:
        candidates = self.candidates(path)
        if not candidates:
            raise NoCandidateError(f"No class name registered for {path}")
        return candidates[0]


def _class_name_for(prefix: str, relative: PurePath) -> ClassName | None:
    parts = list(relative.parts)
    if not parts:
        return None
    parts[-1] = PurePath(parts[-1]).stem
    segments = [prefix, *parts] if prefix else parts
    try:
        return ClassName.from_string("\\".join(segments))
    except ValidationError:
        return None
