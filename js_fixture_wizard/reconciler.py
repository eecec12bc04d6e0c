"""Drop function-tree entries whose source file no longer exists."""

import logging

from js_fixture_wizard.config import ScanConfig
from js_fixture_wizard.models import FunctionTree
from js_fixture_wizard.scanner import collect_existing_files

logger = logging.getLogger(__name__)


def prune_orphans(
    tree: FunctionTree, existing_files: set[str]
) -> tuple[FunctionTree, list[str]]:
    """Split a tree into the entries backed by an existing file and the rest.

    Args:
        tree: Function tree keyed by relative path
        existing_files: Relative paths currently accepted by the scan filters

    Returns:
        Tuple of (pruned tree, sorted list of removed paths)
    """
    kept = {path: functions for path, functions in tree.items() if path in existing_files}
    removed = sorted(path for path in tree if path not in existing_files)
    return kept, removed


def reconcile(tree: FunctionTree, config: ScanConfig) -> FunctionTree:
    """Re-walk the scan roots and prune entries for files that are gone.

    Renamed files are not migrated: their functions appear under the new
    path and the old path is dropped.
    """
    existing = collect_existing_files(config)
    pruned, removed = prune_orphans(tree, existing)

    if removed:
        logger.info(f"Removing {len(removed)} orphaned entries: {removed}")
    return pruned
