from __future__ import annotations

import logging

from fqn_reconcile.core.corrections import (
    CorrectionOutcome,
    Corrections,
    NamespaceCorrection,
    TypeNameCorrection,
)
from fqn_reconcile.core.diagnostics import project_diagnostics
from fqn_reconcile.core.errors import LocationKindError, NoCandidateError, ResolutionError
from fqn_reconcile.core.ports.resolver import CandidateResolver
from fqn_reconcile.core.ports.syntax import SyntaxTreeProvider
from fqn_reconcile.core.syntax import SyntaxTree
from fqn_reconcile.models import Diagnostic, SourceUnit, TextEdit, TextEdits

logger = logging.getLogger(__name__)

OPENING_MARKER = "<?php"
EOL = "\n"


class IdentityReconciler:
    """Check that a file declares the namespace and type name its path implies.

    ``reconcile`` returns the edits that fix a mismatch and fails loudly when no
    expected name can be derived; ``inspect`` reports the same mismatches as
    warnings and returns nothing when it cannot tell.
    """

    def __init__(self, resolver: CandidateResolver, syntax_provider: SyntaxTreeProvider) -> None:
        self._resolver = resolver
        self._syntax_provider = syntax_provider

    def reconcile(self, unit: SourceUnit) -> TextEdits:
        outcome = self.compute(unit)
        if outcome.failure is not None:
            raise outcome.failure
        assert outcome.corrections is not None
        return TextEdits.from_edits(outcome.corrections.edits())

    def inspect(self, unit: SourceUnit) -> list[Diagnostic]:
        outcome = self.compute(unit)
        if outcome.failure is not None:
            logger.debug("No diagnostics for %s: %s", unit.path, outcome.failure)
            return []
        assert outcome.corrections is not None
        return project_diagnostics(outcome.corrections)

    def compute(self, unit: SourceUnit) -> CorrectionOutcome:
        if unit.uri is None:
            return CorrectionOutcome.failed(LocationKindError("Source has no location associated with it"))
        if unit.uri.scheme != "file":
            return CorrectionOutcome.failed(LocationKindError(f'Source is not a file:// it is "{unit.uri.scheme}"'))

        try:
            class_name = self._resolver.best_candidate(unit.uri.path)
        except NoCandidateError as exc:
            failure = ResolutionError(f"Could not determine class name for {unit.uri.path}: {exc}")
            failure.__cause__ = exc
            return CorrectionOutcome.failed(failure)

        tree = self._syntax_provider.parse(unit.text)
        return CorrectionOutcome.success(
            Corrections(
                class_name=class_name,
                namespace=fix_namespace(tree, class_name.namespace),
                type_name=fix_type_name(tree, class_name.name),
            )
        )


def fix_namespace(tree: SyntaxTree, namespace: str) -> NamespaceCorrection | None:
    # An empty namespace never inserts, rewrites or removes a clause.
    if not namespace:
        return None

    clause = tree.namespace_clause()
    if clause is None:
        span = tree.leading_non_code_span()
        offset = span[1] if span is not None else 0
        statement = f"{EOL}namespace {namespace};{EOL}"
        if offset == 0:
            statement = OPENING_MARKER + EOL + statement
        return NamespaceCorrection(edit=TextEdit.create(offset, 0, statement), namespace=namespace, clause=None)

    if clause.name == namespace:
        return None

    statement = f"namespace {namespace}" if clause.braced else f"namespace {namespace};"
    return NamespaceCorrection(
        edit=TextEdit.create(clause.start_byte, clause.header_end_byte - clause.start_byte, statement),
        namespace=namespace,
        clause=clause,
    )


def fix_type_name(tree: SyntaxTree, name: str) -> TypeNameCorrection | None:
    declaration = tree.type_declaration()
    if declaration is None or declaration.name is None or declaration.name_start_byte is None:
        return None
    if declaration.name == name:
        return None

    current_length = len(declaration.name.encode("utf-8"))
    return TypeNameCorrection(
        edit=TextEdit.create(declaration.name_start_byte, current_length, name),
        name=name,
        declaration=declaration,
    )
