import os
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_EXCLUDE_PATTERNS = ["vendor/*"]
DEFAULT_CACHE_FILE = ".fqn-reconcile-cache.json"


class Settings(BaseModel):
    project_root: Path
    include_patterns: list[str] = Field(default_factory=list)
    exclude_patterns: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS))
    follow_symlinks: bool = False
    cache_file: str = DEFAULT_CACHE_FILE

    @property
    def cache_path(self) -> Path:
        return self.project_root / self.cache_file


def _split_patterns(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [p.strip() for p in value.split(",") if p.strip()]


def _env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def get_settings(
    project_root: str | Path | None = None,
    include_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
) -> Settings:
    """Resolve settings from explicit arguments, then ``FQN_RECONCILE_*`` variables."""
    root = Path(project_root or os.getenv("FQN_RECONCILE_ROOT", ".")).resolve()
    include = include_patterns or _split_patterns(os.getenv("FQN_RECONCILE_INCLUDE")) or []
    exclude = exclude_patterns or _split_patterns(os.getenv("FQN_RECONCILE_EXCLUDE"))
    return Settings(
        project_root=root,
        include_patterns=include,
        exclude_patterns=exclude if exclude is not None else list(DEFAULT_EXCLUDE_PATTERNS),
        follow_symlinks=_env_flag(os.getenv("FQN_RECONCILE_FOLLOW_SYMLINKS")),
        cache_file=os.getenv("FQN_RECONCILE_CACHE", DEFAULT_CACHE_FILE),
    )
