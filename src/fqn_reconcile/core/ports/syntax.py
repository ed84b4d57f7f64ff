from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fqn_reconcile.core.syntax import SyntaxTree


class SyntaxTreeProvider(Protocol):
    def parse(self, text: str) -> SyntaxTree: ...
