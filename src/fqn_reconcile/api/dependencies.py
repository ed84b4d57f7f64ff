from __future__ import annotations

from collections.abc import Iterator

from fqn_reconcile.config import get_settings
from fqn_reconcile.core.factory import create_reconciler
from fqn_reconcile.core.reconciler import IdentityReconciler

_reconciler: IdentityReconciler | None = None


def get_reconciler() -> Iterator[IdentityReconciler]:
    """Yield the process-wide reconciler, creating it lazily on first call."""
    global _reconciler  # noqa: PLW0603
    if _reconciler is None:
        _reconciler = create_reconciler(get_settings())
    yield _reconciler


def reset_reconciler() -> None:
    global _reconciler  # noqa: PLW0603
    _reconciler = None
