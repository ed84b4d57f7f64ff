from __future__ import annotations

from pydantic import BaseModel, field_validator

from fqn_reconcile.core.languages import normalize_language
from fqn_reconcile.models import Diagnostic, DocumentUri, SourceUnit, TextEdit


class SourceRequest(BaseModel):
    """Body of POST /reconcile and POST /inspect."""

    text: str
    uri: str | None = None
    language: str = "php"

    @field_validator("language")
    @classmethod
    def _known_language(cls, value: str) -> str:
        return normalize_language(value)

    def to_unit(self) -> SourceUnit:
        uri = DocumentUri.from_string(self.uri) if self.uri else None
        return SourceUnit(text=self.text, uri=uri, language=self.language)


class ReconcileResponse(BaseModel):
    edits: list[TextEdit]
    text: str


class InspectResponse(BaseModel):
    diagnostics: list[Diagnostic]


class HealthResponse(BaseModel):
    status: str = "ok"
