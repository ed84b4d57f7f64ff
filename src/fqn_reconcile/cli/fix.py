from typing import Annotated

import typer
from rich.console import Console

from fqn_reconcile.cli.options import ExcludeOption, IncludeOption, PathArgument, RootOption, resolve_settings
from fqn_reconcile.core.batch import fix_files
from fqn_reconcile.core.factory import create_file_list_provider, create_reconciler

console = Console()


def fix(
    path: PathArgument = None,
    root: RootOption = None,
    include: IncludeOption = None,
    exclude: ExcludeOption = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would change without writing files.")] = False,
) -> None:
    """Rewrite namespaces and class names to match file paths."""
    settings = resolve_settings(root, include, exclude)
    reconciler = create_reconciler(settings)
    files = create_file_list_provider(settings).provide_file_list(sub_path=path)

    reports = fix_files(reconciler, files, dry_run=dry_run)
    changed = 0
    failed = 0
    for report in reports:
        if report.error is not None:
            failed += 1
            console.print(f"[red]Failed[/red] {report.path}: {report.error}")
        elif not report.edits.is_empty():
            changed += 1
            verb = "Would fix" if dry_run else "Fixed"
            console.print(f"[green]{verb}[/green] {report.path} ({len(report.edits)} edit(s))")

    console.print(f"({changed} changed, {failed} failed, {len(reports)} files)")
    if failed:
        raise typer.Exit(1)
