"""Options shared by the commands that operate on a project tree."""

from pathlib import Path
from typing import Annotated

import typer

from fqn_reconcile.config import Settings, get_settings

PathArgument = Annotated[
    Path | None,
    typer.Argument(help="File or directory to process. Defaults to the whole project."),
]
RootOption = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Project root containing composer.json."),
]
IncludeOption = Annotated[
    list[str] | None,
    typer.Option("--include", help="Only process files matching this glob (repeatable)."),
]
ExcludeOption = Annotated[
    list[str] | None,
    typer.Option("--exclude", help="Skip files matching this glob (repeatable)."),
]


def resolve_settings(root: Path | None, include: list[str] | None, exclude: list[str] | None) -> Settings:
    return get_settings(project_root=root, include_patterns=include or None, exclude_patterns=exclude or None)
