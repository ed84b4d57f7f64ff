from __future__ import annotations

from dataclasses import dataclass

from fqn_reconcile.core.errors import ReconcileError
from fqn_reconcile.core.syntax import NamespaceClause, TypeDeclaration
from fqn_reconcile.models import ClassName, TextEdit


@dataclass(frozen=True)
class NamespaceCorrection:
    edit: TextEdit
    namespace: str
    clause: NamespaceClause | None


@dataclass(frozen=True)
class TypeNameCorrection:
    edit: TextEdit
    name: str
    declaration: TypeDeclaration


@dataclass(frozen=True)
class Corrections:
    class_name: ClassName
    namespace: NamespaceCorrection | None = None
    type_name: TypeNameCorrection | None = None

    def edits(self) -> list[TextEdit]:
        """Edits in discovery order: namespace first."""
        found = [self.namespace, self.type_name]
        return [correction.edit for correction in found if correction is not None]


@dataclass(frozen=True)
class CorrectionOutcome:
    """Either the corrections for a unit or the reason none could be computed."""

    corrections: Corrections | None = None
    failure: ReconcileError | None = None

    @classmethod
    def success(cls, corrections: Corrections) -> CorrectionOutcome:
        return cls(corrections=corrections)

    @classmethod
    def failed(cls, failure: ReconcileError) -> CorrectionOutcome:
        return cls(failure=failure)
