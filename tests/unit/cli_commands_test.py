"""Tests for the check and fix commands against a small composer project."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from fqn_reconcile.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["ROOT", "INCLUDE", "EXCLUDE", "FOLLOW_SYMLINKS", "CACHE"]:
        monkeypatch.delenv(f"FQN_RECONCILE_{name}", raising=False)


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestCheckCommand:
    def test_clean_project_exits_zero(self, composer_project: Path) -> None:
        _write(composer_project / "src" / "Bar.php", "<?php\nnamespace Acme;\nclass Bar {}\n")

        result = runner.invoke(app, ["check", "--root", str(composer_project)])

        assert result.exit_code == 0, result.output
        assert "(0 diagnostics in 1 files)" in result.output

    def test_mismatch_exits_one(self, composer_project: Path) -> None:
        _write(composer_project / "src" / "Bar.php", "<?php\nnamespace Wrong;\nclass Baz {}\n")

        result = runner.invoke(app, ["check", "--root", str(composer_project)])

        assert result.exit_code == 1
        assert "(2 diagnostics in 1 files)" in result.output

    def test_vendor_is_excluded_by_default(self, composer_project: Path) -> None:
        _write(composer_project / "vendor" / "lib" / "Thing.php", "<?php\nclass Other {}\n")

        result = runner.invoke(app, ["check", "--root", str(composer_project)])

        assert result.exit_code == 0
        assert "(0 diagnostics in 0 files)" in result.output

    def test_single_file_argument(self, composer_project: Path) -> None:
        target = _write(composer_project / "src" / "Bar.php", "<?php\nnamespace Acme;\nclass Bar {}\n")
        _write(composer_project / "src" / "Other.php", "<?php\nclass Wrong {}\n")

        result = runner.invoke(app, ["check", str(target), "--root", str(composer_project)])

        assert result.exit_code == 0
        assert "(0 diagnostics in 1 files)" in result.output

    def test_incremental_skips_clean_files(self, composer_project: Path) -> None:
        _write(composer_project / "src" / "Bar.php", "<?php\nnamespace Acme;\nclass Bar {}\n")
        args = ["check", "--root", str(composer_project), "--incremental"]

        first = runner.invoke(app, args)
        second = runner.invoke(app, args)

        assert "(0 diagnostics in 1 files)" in first.output
        assert "(0 diagnostics in 0 files)" in second.output
        assert (composer_project / ".fqn-reconcile-cache.json").is_file()

    def test_non_php_file_is_reported_not_raised(self, composer_project: Path) -> None:
        readme = _write(composer_project / "README.md", "# notes\n")

        result = runner.invoke(app, ["check", str(readme), "--root", str(composer_project)])

        assert result.exit_code == 0, result.output
        assert "Error" in result.output
        assert "(0 diagnostics in 1 files)" in result.output


class TestFixCommand:
    def test_fix_rewrites_files(self, composer_project: Path) -> None:
        source = _write(composer_project / "src" / "Bar.php", "<?php\nnamespace Wrong;\nclass Baz {}\n")

        result = runner.invoke(app, ["fix", "--root", str(composer_project)])

        assert result.exit_code == 0, result.output
        assert "Fixed" in result.output
        assert "(1 changed, 0 failed, 1 files)" in result.output
        assert source.read_text(encoding="utf-8") == "<?php\nnamespace Acme;\nclass Bar {}\n"

    def test_dry_run(self, composer_project: Path) -> None:
        original = "<?php\nnamespace Wrong;\nclass Bar {}\n"
        source = _write(composer_project / "src" / "Bar.php", original)

        result = runner.invoke(app, ["fix", "--root", str(composer_project), "--dry-run"])

        assert result.exit_code == 0
        assert "Would fix" in result.output
        assert source.read_text(encoding="utf-8") == original

    def test_unresolvable_file_fails(self, composer_project: Path) -> None:
        _write(composer_project / "bin" / "console.php", "<?php\nclass Console {}\n")

        result = runner.invoke(app, ["fix", "--root", str(composer_project)])

        assert result.exit_code == 1
        assert "(0 changed, 1 failed, 1 files)" in result.output
