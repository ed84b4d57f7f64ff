from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine, Sequence
from pathlib import Path
from typing import Any

from watchfiles import Change, awatch

from fqn_reconcile.core.files import matches_any
from fqn_reconcile.core.languages import is_source_file

logger = logging.getLogger(__name__)


class WatchfilesWatcher:
    """Watch a project for PHP source changes and hand them to a callback.

    Deleted files are not reported; files matching ``exclude_patterns``
    (relative to the watched directory) are ignored.
    """

    def __init__(
        self,
        directory: str | Path,
        on_change: Callable[[set[Path]], Coroutine[Any, Any, None]],
        exclude_patterns: Sequence[str] = (),
    ) -> None:
        self._directory = Path(directory)
        self._on_change = on_change
        self._exclude_patterns = list(exclude_patterns)
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watcher started for %s", self._directory)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Watcher stopped for %s", self._directory)

    def _wanted(self, change: Change | int, path: Path) -> bool:
        if change == Change.deleted or not is_source_file(path):
            return False
        if not self._exclude_patterns:
            return True
        try:
            relative = path.relative_to(self._directory).as_posix()
        except ValueError:
            relative = path.as_posix()
        return not matches_any(relative, self._exclude_patterns)

    async def _watch(self) -> None:
        async for changes in awatch(self._directory):
            paths = {Path(p) for change, p in changes if self._wanted(change, Path(p))}
            if paths:
                logger.info("Detected changes in %d file(s)", len(paths))
                try:
                    await self._on_change(paths)
                except Exception:
                    logger.exception("Error in watcher callback")
