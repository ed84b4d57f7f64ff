from fqn_reconcile.core.corrections import Corrections
from fqn_reconcile.models import ByteOffsetRange, Diagnostic, DiagnosticSeverity

NAMESPACE_MESSAGE = 'Namespace should probably be "{}"'
CLASS_NAME_MESSAGE = 'Class name should probably be "{}"'


def project_diagnostics(corrections: Corrections) -> list[Diagnostic]:
    """Describe each correction as a warning spanning the whole clause or declaration.

    A namespace that would be inserted has no clause yet; it is reported at 0..0.
    """
    diagnostics: list[Diagnostic] = []

    if corrections.namespace is not None:
        clause = corrections.namespace.clause
        diagnostics.append(
            Diagnostic(
                range=ByteOffsetRange.from_ints(
                    clause.start_byte if clause else 0,
                    clause.end_byte if clause else 0,
                ),
                message=NAMESPACE_MESSAGE.format(corrections.namespace.namespace),
                severity=DiagnosticSeverity.WARNING,
            )
        )

    if corrections.type_name is not None:
        declaration = corrections.type_name.declaration
        diagnostics.append(
            Diagnostic(
                range=ByteOffsetRange.from_ints(declaration.start_byte, declaration.end_byte),
                message=CLASS_NAME_MESSAGE.format(corrections.type_name.name),
                severity=DiagnosticSeverity.WARNING,
            )
        )

    return diagnostics
