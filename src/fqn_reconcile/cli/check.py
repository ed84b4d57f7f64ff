from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from fqn_reconcile.cli.options import ExcludeOption, IncludeOption, PathArgument, RootOption, resolve_settings
from fqn_reconcile.core.batch import FileReport, check_files
from fqn_reconcile.core.factory import create_file_list_provider, create_reconciler
from fqn_reconcile.core.freshness import FreshnessIndex

console = Console()


def render_reports(reports: list[FileReport]) -> int:
    """Print a table of findings and return the number of diagnostics."""
    table = Table(show_lines=False)
    for header in ("file", "line", "column", "severity", "message"):
        table.add_column(header)

    count = 0
    for report in reports:
        if report.error is not None:
            console.print(f"[red]Error[/red] {report.path}: {report.error}")
        for located in report.diagnostics:
            count += 1
            table.add_row(
                str(report.path),
                str(located.start.row + 1),
                str(located.start.column + 1),
                located.diagnostic.severity.value,
                located.diagnostic.message,
            )

    if count:
        console.print(table)
    console.print(f"({count} diagnostics in {len(reports)} files)")
    return count


def check(
    path: PathArgument = None,
    root: RootOption = None,
    include: IncludeOption = None,
    exclude: ExcludeOption = None,
    incremental: Annotated[
        bool, typer.Option(help="Skip files unchanged since the last clean check (uses the freshness cache).")
    ] = False,
) -> None:
    """Report files whose namespace or class name does not match their path."""
    settings = resolve_settings(root, include, exclude)
    reconciler = create_reconciler(settings)
    provider = create_file_list_provider(settings)

    index = FreshnessIndex.load(settings.cache_path) if incremental else None
    files = provider.provide_file_list(freshness=index, sub_path=path)
    reports = check_files(reconciler, files)
    count = render_reports(reports)

    if index is not None:
        for report in reports:
            if report.error is None and not report.diagnostics:
                index.mark(report.path)
            else:
                index.forget(report.path)
        index.save(settings.cache_path)

    if count:
        raise typer.Exit(1)
