from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from fqn_reconcile.core.errors import ReconcileError
from fqn_reconcile.core.reconciler import IdentityReconciler
from fqn_reconcile.models import Diagnostic, Position, SourceUnit, TextEdits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocatedDiagnostic:
    diagnostic: Diagnostic
    start: Position
    end: Position


@dataclass(frozen=True)
class FileReport:
    path: Path
    diagnostics: list[LocatedDiagnostic] = field(default_factory=list)
    error: str | None = None


@dataclass(frozen=True)
class FixReport:
    path: Path
    edits: TextEdits = field(default_factory=TextEdits.none)
    written: bool = False
    error: str | None = None


def offset_to_position(source: bytes, offset: int) -> Position:
    """Zero-based row and byte column of ``offset`` in ``source``."""
    line_start = source.rfind(b"\n", 0, offset) + 1
    return Position(row=source.count(b"\n", 0, offset), column=offset - line_start)


def check_file(reconciler: IdentityReconciler, path: Path) -> FileReport:
    unit = SourceUnit.from_path(path)
    source = unit.text.encode("utf-8")
    located = [
        LocatedDiagnostic(
            diagnostic=diagnostic,
            start=offset_to_position(source, diagnostic.range.start),
            end=offset_to_position(source, diagnostic.range.end),
        )
        for diagnostic in reconciler.inspect(unit)
    ]
    return FileReport(path=path, diagnostics=located)


def check_files(reconciler: IdentityReconciler, paths: Iterable[Path]) -> list[FileReport]:
    reports: list[FileReport] = []
    for path in paths:
        path = Path(path)
        try:
            reports.append(check_file(reconciler, path))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", path, exc)
            reports.append(FileReport(path=path, error=str(exc)))
    return reports


def fix_file(reconciler: IdentityReconciler, path: Path, dry_run: bool = False) -> FixReport:
    """Reconcile a file and write the corrected text back unless ``dry_run``."""
    unit = SourceUnit.from_path(path)
    edits = reconciler.reconcile(unit)
    if edits.is_empty() or dry_run:
        return FixReport(path=path, edits=edits)

    path.write_bytes(edits.apply_to(unit.text).encode("utf-8"))
    logger.info("Fixed %s (%d edit(s))", path, len(edits))
    return FixReport(path=path, edits=edits, written=True)


def fix_files(reconciler: IdentityReconciler, paths: Iterable[Path], dry_run: bool = False) -> list[FixReport]:
    reports: list[FixReport] = []
    for path in paths:
        path = Path(path)
        try:
            reports.append(fix_file(reconciler, path, dry_run=dry_run))
        except (ReconcileError, OSError, ValueError) as exc:
            logger.warning("Could not fix %s: %s", path, exc)
            reports.append(FixReport(path=path, error=str(exc)))
    return reports
