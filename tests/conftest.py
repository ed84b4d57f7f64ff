"""Shared fixtures and helpers for tests."""

import json
from pathlib import Path

import pytest

from fqn_reconcile.core.reconciler import IdentityReconciler
from fqn_reconcile.core.resolver import StaticCandidateResolver
from fqn_reconcile.core.syntax import TreeSitterSyntaxProvider
from fqn_reconcile.models import DocumentUri, SourceUnit

_REPO_ROOT = Path(__file__).parent.parent

SOURCE_PATH = "/project/src/Acme/Bar.php"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def php_unit(text: str, path: str | None = SOURCE_PATH) -> SourceUnit:
    """A source unit located at ``path`` (or nowhere, when ``path`` is None)."""
    return SourceUnit(text=text, uri=DocumentUri(scheme="file", path=path) if path else None)


def make_reconciler(fqn: str, path: str = SOURCE_PATH) -> IdentityReconciler:
    return IdentityReconciler(StaticCandidateResolver({path: fqn}), TreeSitterSyntaxProvider())


def write_composer_project(root: Path, psr4: dict[str, str | list[str]]) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    (root / "composer.json").write_text(json.dumps({"autoload": {"psr-4": psr4}}), encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def syntax_provider() -> TreeSitterSyntaxProvider:
    """Return a tree-sitter syntax provider for PHP."""
    return TreeSitterSyntaxProvider()


@pytest.fixture
def reconciler() -> IdentityReconciler:
    """Return a reconciler expecting ``Acme\\Bar`` at ``SOURCE_PATH``."""
    return make_reconciler("Acme\\Bar")


@pytest.fixture
def composer_project(tmp_path: Path) -> Path:
    """A project with ``Acme\\`` mapped to ``src/`` and ``Acme\\Tests\\`` to ``tests/``."""
    root = write_composer_project(tmp_path / "project", {"Acme\\": "src/"})
    composer = json.loads((root / "composer.json").read_text(encoding="utf-8"))
    composer["autoload-dev"] = {"psr-4": {"Acme\\Tests\\": "tests/"}}
    (root / "composer.json").write_text(json.dumps(composer), encoding="utf-8")
    (root / "src").mkdir()
    (root / "tests").mkdir()
    return root
