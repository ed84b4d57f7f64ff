import asyncio
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

from rich.console import Console

from fqn_reconcile.cli.check import render_reports
from fqn_reconcile.cli.options import ExcludeOption, RootOption, resolve_settings
from fqn_reconcile.core.batch import check_files
from fqn_reconcile.core.factory import create_reconciler
from fqn_reconcile.core.freshness import FreshnessIndex
from fqn_reconcile.core.reconciler import IdentityReconciler
from fqn_reconcile.watcher.watchfiles_adapter import WatchfilesWatcher

console = Console()


def make_change_handler(
    reconciler: IdentityReconciler, index: FreshnessIndex
) -> Callable[[set[Path]], Coroutine[Any, Any, None]]:
    async def _on_change(paths: set[Path]) -> None:
        stale = sorted(p for p in paths if p.is_file() and not index.is_fresh(p))
        if not stale:
            return
        reports = await asyncio.to_thread(check_files, reconciler, stale)
        render_reports(reports)
        for report in reports:
            if report.error is None:
                index.mark(report.path)

    return _on_change


def watch(
    root: RootOption = None,
    exclude: ExcludeOption = None,
) -> None:
    """Watch the project and report mismatches as files change."""
    settings = resolve_settings(root, None, exclude)
    reconciler = create_reconciler(settings)
    watcher = WatchfilesWatcher(
        settings.project_root,
        make_change_handler(reconciler, FreshnessIndex()),
        exclude_patterns=settings.exclude_patterns,
    )

    async def _run() -> None:
        await watcher.start()
        try:
            await asyncio.Event().wait()
        finally:
            await watcher.stop()

    console.print(f"[green]Watching[/green] {settings.project_root} (Ctrl+C to stop)")
    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        console.print("Stopped.")
