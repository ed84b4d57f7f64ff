"""FastMCP server exposing fqn-reconcile tools."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fastmcp import FastMCP

from fqn_reconcile.core.batch import fix_file as _fix_file
from fqn_reconcile.core.errors import ReconcileError
from fqn_reconcile.core.reconciler import IdentityReconciler
from fqn_reconcile.models import DocumentUri, SourceUnit


def _unit(text: str, path: str | None) -> SourceUnit:
    return SourceUnit(text=text, uri=DocumentUri.from_string(path) if path else None)


def create_mcp_server(reconciler: IdentityReconciler) -> FastMCP:
    """Create a FastMCP server wired to the given reconciler."""

    mcp = FastMCP(
        "fqn-reconcile",
        instructions="Check and fix PHP namespaces and class names so they match the file path.",
    )

    @mcp.tool()
    async def reconcile(text: str, path: str | None = None) -> list[dict[str, Any]] | str:
        """Compute the edits that make a PHP source match the class name implied by its path."""
        try:
            edits = reconciler.reconcile(_unit(text, path))
        except ReconcileError as exc:
            return f"Error: {exc}"
        return [edit.model_dump() for edit in edits.edits]

    @mcp.tool()
    async def inspect(text: str, path: str | None = None) -> list[dict[str, Any]]:
        """Report namespace and class name mismatches as warnings."""
        return [diagnostic.model_dump(mode="json") for diagnostic in reconciler.inspect(_unit(text, path))]

    @mcp.tool()
    async def fix_file(path: str, dry_run: bool = False) -> str:
        """Rewrite a PHP file in place so its namespace and class name match its path."""
        try:
            report = _fix_file(reconciler, Path(path), dry_run=dry_run)
        except (ReconcileError, OSError, ValueError) as exc:
            return f"Error: {exc}"
        if report.edits.is_empty():
            return f"{path} is already correct"
        verb = "Would apply" if dry_run else "Applied"
        return f"{verb} {len(report.edits)} edit(s) to {path}"

    return mcp
