from pathlib import Path
from typing import Protocol


class FreshnessCheck(Protocol):
    def is_fresh(self, path: Path) -> bool: ...
