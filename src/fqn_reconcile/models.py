from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from urllib.parse import unquote, urlparse

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fqn_reconcile.core.errors import OverlappingEditsError
from fqn_reconcile.core.languages import resolve_language


class Position(BaseModel):
    row: int
    column: int


class ByteOffsetRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> ByteOffsetRange:
        if self.end < self.start:
            raise ValueError(f"Range end {self.end} precedes start {self.start}")
        return self

    @classmethod
    def from_ints(cls, start: int, end: int) -> ByteOffsetRange:
        return cls(start=start, end=end)


class TextEdit(BaseModel):
    """Remove ``length`` bytes at ``offset`` and insert ``replacement`` there."""

    model_config = ConfigDict(frozen=True)

    offset: int = Field(ge=0)
    length: int = Field(ge=0)
    replacement: str

    @classmethod
    def create(cls, offset: int, length: int, replacement: str) -> TextEdit:
        return cls(offset=offset, length=length, replacement=replacement)

    @property
    def end(self) -> int:
        return self.offset + self.length


class TextEdits(BaseModel):
    """Ordered edits computed against one text; offsets are UTF-8 byte offsets."""

    model_config = ConfigDict(frozen=True)

    edits: tuple[TextEdit, ...] = ()

    @classmethod
    def from_edits(cls, edits: Iterable[TextEdit]) -> TextEdits:
        return cls(edits=tuple(edits))

    @classmethod
    def none(cls) -> TextEdits:
        return cls()

    def __len__(self) -> int:
        return len(self.edits)

    def is_empty(self) -> bool:
        return not self.edits

    def apply_to(self, text: str) -> str:
        data = text.encode("utf-8")
        # sorted() is stable, so insertions sharing an offset keep discovery order
        ordered = sorted(self.edits, key=lambda e: e.offset)
        for previous, current in zip(ordered, ordered[1:]):
            if previous.end > current.offset:
                raise OverlappingEditsError(
                    f"Edit at {previous.offset}..{previous.end} overlaps edit at {current.offset}..{current.end}"
                )
        if ordered and ordered[-1].end > len(data):
            raise ValueError(f"Edit ends at byte {ordered[-1].end} but text is only {len(data)} bytes long")

        for edit in reversed(ordered):
            data = data[: edit.offset] + edit.replacement.encode("utf-8") + data[edit.end :]
        return data.decode("utf-8")


class DiagnosticSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    HINT = "hint"


class Diagnostic(BaseModel):
    model_config = ConfigDict(frozen=True)

    range: ByteOffsetRange
    message: str
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING


class ClassName(BaseModel):
    """A fully-qualified type name split into namespace and short name."""

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    name: str = Field(min_length=1)

    @classmethod
    def from_string(cls, fqn: str) -> ClassName:
        fqn = fqn.strip().lstrip("\\")
        namespace, _, name = fqn.rpartition("\\")
        return cls(namespace=namespace, name=name)

    def __str__(self) -> str:
        if not self.namespace:
            return self.name
        return f"{self.namespace}\\{self.name}"


class DocumentUri(BaseModel):
    model_config = ConfigDict(frozen=True)

    scheme: str
    path: str

    @classmethod
    def from_string(cls, uri: str) -> DocumentUri:
        parsed = urlparse(uri)
        # Bare paths and Windows drive letters ("C:\...") carry no real scheme.
        if len(parsed.scheme) <= 1:
            return cls(scheme="file", path=uri)
        if parsed.scheme == "file":
            return cls(scheme="file", path=unquote(parsed.path))
        return cls(scheme=parsed.scheme, path=unquote(uri[len(parsed.scheme) + 1 :]))

    @classmethod
    def from_path(cls, path: str | Path) -> DocumentUri:
        return cls(scheme="file", path=str(Path(path).resolve()))

    def __str__(self) -> str:
        if self.scheme == "file":
            return Path(self.path).as_uri() if Path(self.path).is_absolute() else f"file://{self.path}"
        return f"{self.scheme}:{self.path}"


class SourceUnit(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    uri: DocumentUri | None = None
    language: str = "php"

    @classmethod
    def from_path(cls, path: str | Path, language: str | None = None) -> SourceUnit:
        file_path = Path(path)
        try:
            text = file_path.read_bytes().decode("utf-8")
        except FileNotFoundError:
            raise FileNotFoundError(f"File not found: {path}") from None
        return cls(text=text, uri=DocumentUri.from_path(file_path), language=resolve_language(language, file_path))

    @property
    def path(self) -> str | None:
        return self.uri.path if self.uri is not None else None
