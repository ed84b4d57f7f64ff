from typing import Protocol

from fqn_reconcile.models import ClassName


class CandidateResolver(Protocol):
    def candidates(self, path: str) -> list[ClassName]: ...

    def best_candidate(self, path: str) -> ClassName: ...
