"""Unit tests for batch check and fix over files on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from fqn_reconcile.core.batch import check_files, fix_file, fix_files, offset_to_position
from fqn_reconcile.core.reconciler import IdentityReconciler
from fqn_reconcile.core.resolver import Psr4CandidateResolver
from fqn_reconcile.core.syntax import TreeSitterSyntaxProvider
from fqn_reconcile.models import Position
from tests.conftest import make_reconciler


@pytest.fixture
def project_reconciler(composer_project: Path) -> IdentityReconciler:
    return IdentityReconciler(Psr4CandidateResolver.from_composer(composer_project), TreeSitterSyntaxProvider())


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path


class TestOffsetToPosition:
    def test_first_line(self) -> None:
        assert offset_to_position(b"<?php\nclass A {}", 3) == Position(row=0, column=3)

    def test_later_line(self) -> None:
        assert offset_to_position(b"<?php\nclass A {}", 12) == Position(row=1, column=6)

    def test_crlf_counts_carriage_return_in_column(self) -> None:
        assert offset_to_position(b"<?php\r\nclass A {}", 7) == Position(row=1, column=0)


class TestCheckFiles:
    def test_reports_wrong_namespace_with_position(
        self, composer_project: Path, project_reconciler: IdentityReconciler
    ) -> None:
        path = _write(composer_project / "src" / "Bar.php", "<?php\nnamespace Wrong;\nclass Bar {}\n")

        [report] = check_files(project_reconciler, [path])

        assert report.error is None
        [located] = report.diagnostics
        assert located.diagnostic.message == 'Namespace should probably be "Acme"'
        assert located.start == Position(row=1, column=0)
        assert located.end == Position(row=1, column=16)

    def test_clean_file_has_no_diagnostics(
        self, composer_project: Path, project_reconciler: IdentityReconciler
    ) -> None:
        path = _write(composer_project / "src" / "Bar.php", "<?php\nnamespace Acme;\nclass Bar {}\n")
        assert check_files(project_reconciler, [path])[0].diagnostics == []

    def test_file_outside_autoload_is_silent(
        self, composer_project: Path, project_reconciler: IdentityReconciler
    ) -> None:
        path = _write(composer_project / "bin" / "console.php", "<?php\nnamespace X;\nclass Y {}\n")
        [report] = check_files(project_reconciler, [path])
        assert (report.diagnostics, report.error) == ([], None)

    def test_unreadable_file_is_reported(self, composer_project: Path, project_reconciler: IdentityReconciler) -> None:
        [report] = check_files(project_reconciler, [composer_project / "src" / "Missing.php"])
        assert report.error is not None
        assert report.diagnostics == []


class TestFixFiles:
    def test_fix_writes_corrected_text(self, composer_project: Path, project_reconciler: IdentityReconciler) -> None:
        path = _write(composer_project / "src" / "Http" / "Controller.php", "<?php\nnamespace Wrong;\nclass Ctrl {}\n")

        report = fix_file(project_reconciler, path)

        assert report.written is True
        assert len(report.edits) == 2
        assert path.read_text(encoding="utf-8") == "<?php\nnamespace Acme\\Http;\nclass Controller {}\n"

    def test_dry_run_leaves_file_untouched(
        self, composer_project: Path, project_reconciler: IdentityReconciler
    ) -> None:
        original = "<?php\nclass Bar {}\n"
        path = _write(composer_project / "src" / "Bar.php", original)

        report = fix_file(project_reconciler, path, dry_run=True)

        assert report.written is False
        assert len(report.edits) == 1
        assert path.read_text(encoding="utf-8") == original

    def test_correct_file_is_not_rewritten(
        self, composer_project: Path, project_reconciler: IdentityReconciler
    ) -> None:
        path = _write(composer_project / "src" / "Bar.php", "<?php\nnamespace Acme;\nclass Bar {}\n")
        report = fix_file(project_reconciler, path)
        assert (report.written, report.edits.is_empty()) == (False, True)

    def test_line_endings_are_preserved(self, composer_project: Path, project_reconciler: IdentityReconciler) -> None:
        path = _write(composer_project / "src" / "Bar.php", "<?php\r\nnamespace Wrong;\r\nclass Bar {}\r\n")

        fix_file(project_reconciler, path)

        assert path.read_bytes() == b"<?php\r\nnamespace Acme;\r\nclass Bar {}\r\n"

    def test_unresolvable_file_is_recorded_as_failure(
        self, composer_project: Path, project_reconciler: IdentityReconciler
    ) -> None:
        good = _write(composer_project / "src" / "Bar.php", "<?php\nnamespace Wrong;\nclass Bar {}\n")
        stray = _write(composer_project / "bin" / "console.php", "<?php\nclass Console {}\n")

        reports = fix_files(project_reconciler, [stray, good])

        assert reports[0].error is not None
        assert "Could not determine class name" in reports[0].error
        assert reports[1].written is True


class TestNonSourceFiles:
    def test_check_records_unsupported_extension(self, tmp_path: Path) -> None:
        readme = _write(tmp_path / "README.md", "# notes\n")

        [report] = check_files(make_reconciler("Acme\\Bar"), [readme])

        assert report.diagnostics == []
        assert report.error is not None
        assert "Unsupported file extension" in report.error

    def test_fix_records_unsupported_extension(self, tmp_path: Path) -> None:
        readme = _write(tmp_path / "README.md", "# notes\n")

        [report] = fix_files(make_reconciler("Acme\\Bar"), [readme])

        assert report.written is False
        assert report.error is not None
        assert "Unsupported file extension" in report.error
        assert readme.read_text(encoding="utf-8") == "# notes\n"
