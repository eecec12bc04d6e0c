"""Tests for orphan reconciliation."""

from js_fixture_wizard.config import ScanConfig
from js_fixture_wizard.models import FunctionRecord
from js_fixture_wizard.reconciler import prune_orphans, reconcile


def make_functions(name="handler"):
    return {
        name: FunctionRecord(
            name=name,
            parameters={},
            declared_return="any",
            normalized_return="any",
            signature_hash="00000000",
        )
    }


class TestPruneOrphans:
    def test_keeps_existing_and_reports_removed(self):
        """Entries without a backing file are removed and reported."""
        tree = {
            "server/actions/kept.ts": make_functions("kept"),
            "server/actions/removed.ts": make_functions("removed"),
        }
        pruned, removed = prune_orphans(tree, {"server/actions/kept.ts"})
        assert list(pruned) == ["server/actions/kept.ts"]
        assert removed == ["server/actions/removed.ts"]

    def test_does_not_mutate_input(self):
        tree = {"a.ts": make_functions()}
        prune_orphans(tree, set())
        assert list(tree) == ["a.ts"]


class TestReconcile:
    def given_project(self, tmp_path):
        (tmp_path / "server" / "actions").mkdir(parents=True)
        (tmp_path / "server" / "actions" / "kept.ts").write_text("function kept() {}")
        (tmp_path / "server" / "node_modules").mkdir()
        (tmp_path / "server" / "node_modules" / "dep.js").write_text("function dep() {}")
        self.config = ScanConfig(root=tmp_path)

    def when_tree_is_reconciled(self, tree):
        self.result = reconcile(tree, self.config)

    def test_deleted_file_is_dropped(self, tmp_path):
        """A path whose file was deleted no longer appears."""
        self.given_project(tmp_path)
        self.when_tree_is_reconciled(
            {
                "server/actions/kept.ts": make_functions("kept"),
                "server/actions/removed.ts": make_functions("removed"),
            }
        )
        assert "server/actions/removed.ts" not in self.result
        assert "server/actions/kept.ts" in self.result

    def test_excluded_file_is_dropped(self, tmp_path):
        """A file that exists but is excluded by the filters is dropped."""
        self.given_project(tmp_path)
        self.when_tree_is_reconciled({"server/node_modules/dep.js": make_functions("dep")})
        assert self.result == {}
