from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def content_hash(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()


class FreshnessIndex:
    """Remember the content hash each file had when it was last checked.

    Implements the ``FreshnessCheck`` protocol.
    """

    def __init__(self, hashes: dict[str, str] | None = None) -> None:
        self._hashes: dict[str, str] = dict(hashes or {})

    @staticmethod
    def _key(path: Path) -> str:
        return str(Path(path).resolve())

    def __len__(self) -> int:
        return len(self._hashes)

    def is_fresh(self, path: Path) -> bool:
        recorded = self._hashes.get(self._key(path))
        if recorded is None:
            return False
        try:
            return content_hash(Path(path)) == recorded
        except OSError:
            return False

    def mark(self, path: Path) -> None:
        self._hashes[self._key(path)] = content_hash(Path(path))

    def forget(self, path: Path) -> None:
        self._hashes.pop(self._key(path), None)

    @classmethod
    def load(cls, cache_file: Path) -> FreshnessIndex:
        try:
            data = json.loads(Path(cache_file).read_text(encoding="utf-8"))
        except FileNotFoundError:
            return cls()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Ignoring unreadable freshness cache %s", cache_file)
            return cls()
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed freshness cache %s", cache_file)
            return cls()
        return cls({str(k): str(v) for k, v in data.items()})

    def save(self, cache_file: Path) -> None:
        Path(cache_file).write_text(json.dumps(self._hashes, indent=2, sort_keys=True), encoding="utf-8")
