"""Tests for the source scanner."""

import logging
from pathlib import Path

import pytest

from js_fixture_wizard.config import ScanConfig
from js_fixture_wizard.scanner import (
    SourceFile,
    collect_existing_files,
    iter_source_files,
    read_source,
)


@pytest.fixture
def fixtures_path():
    """Path to the sample project fixture."""
    return Path(__file__).parent / "fixtures" / "sample_project"


class TestIterSourceFiles:
    def given_root(self, root):
        self.config = ScanConfig(root=root)

    def when_files_are_scanned(self):
        self.files = list(iter_source_files(self.config))
        self.relative_paths = [f.relative_path for f in self.files]

    def then_relative_paths_are(self, expected):
        assert self.relative_paths == expected

    def test_yields_supported_files_in_scan_order(self, fixtures_path):
        """Files come out per scan dir, sorted, with POSIX relative paths."""
        self.given_root(fixtures_path)
        self.when_files_are_scanned()
        self.then_relative_paths_are(
            [
                "client/src/main.ts",
                "server/actions/pages.ts",
                "server/cms/db.ts",
            ]
        )

    def test_skips_excluded_dirs_files_and_extensions(self, fixtures_path):
        """node_modules, the generator script and non-JS files are skipped."""
        self.given_root(fixtures_path)
        self.when_files_are_scanned()
        assert not any("node_modules" in p for p in self.relative_paths)
        assert "server/unit_setup.ts" not in self.relative_paths
        assert "server/notes.md" not in self.relative_paths

    def test_missing_scan_dirs_are_skipped(self, tmp_path):
        """A root without client/server/contracts yields nothing."""
        self.given_root(tmp_path)
        self.when_files_are_scanned()
        self.then_relative_paths_are([])

    def test_excluded_dir_is_pruned_at_any_depth(self, tmp_path):
        """Excluded directory names are skipped even when nested deeply."""
        (tmp_path / "contracts" / "a" / "dist").mkdir(parents=True)
        (tmp_path / "contracts" / "a" / "dist" / "out.js").write_text("x")
        (tmp_path / "contracts" / "a" / "token.tsx").write_text("x")
        self.given_root(tmp_path)
        self.when_files_are_scanned()
        self.then_relative_paths_are(["contracts/a/token.tsx"])

    def test_unreadable_directory_is_logged_and_skipped(self, tmp_path, caplog):
        """A directory that can't be listed logs a warning; the scan continues."""
        (tmp_path / "client").mkdir()
        (tmp_path / "server").mkdir()
        (tmp_path / "server" / "ok.js").write_text("x")
        self.given_root(tmp_path)

        original_iterdir = Path.iterdir

        def failing_iterdir(path):
            if path.name == "client":
                raise PermissionError("denied")
            return original_iterdir(path)

        with caplog.at_level(logging.WARNING):
            with pytest.MonkeyPatch.context() as mp:
                mp.setattr(Path, "iterdir", failing_iterdir)
                self.when_files_are_scanned()

        self.then_relative_paths_are(["server/ok.js"])
        assert "Could not read directory" in caplog.text


class TestReadSource:
    def test_reads_utf8_text(self, tmp_path):
        path = tmp_path / "a.ts"
        path.write_text("const café = () => {};", encoding="utf-8")
        assert read_source(SourceFile(path, "a.ts")) == "const café = () => {};"

    def test_undecodable_file_returns_none(self, tmp_path, caplog):
        """Binary content is logged and skipped instead of raising."""
        path = tmp_path / "bad.js"
        path.write_bytes(b"\xff\xfe\x00bad")
        with caplog.at_level(logging.WARNING):
            assert read_source(SourceFile(path, "bad.js")) is None
        assert "Could not read file" in caplog.text

    def test_missing_file_returns_none(self, tmp_path):
        assert read_source(SourceFile(tmp_path / "gone.ts", "gone.ts")) is None


class TestCollectExistingFiles:
    def test_collects_relative_paths(self, fixtures_path):
        existing = collect_existing_files(ScanConfig(root=fixtures_path))
        assert existing == {
            "client/src/main.ts",
            "server/actions/pages.ts",
            "server/cms/db.ts",
        }
