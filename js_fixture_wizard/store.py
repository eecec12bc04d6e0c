"""Load and save the function tree JSON artifact."""

import json
import logging
import os
import tempfile
from pathlib import Path

from js_fixture_wizard.models import FunctionTree, tree_from_dict, tree_to_json

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """The function tree could not be written."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


def load_function_tree(path: Path) -> FunctionTree:
    """Load the tree written by a previous run.

    A missing, unreadable or malformed artifact is treated as "no previous
    run" and yields an empty tree.

    Args:
        path: Location of the JSON artifact

    Returns:
        The previous function tree, or {} if none could be loaded
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info(f"No previous function tree at {path}")
        return {}
    except OSError as e:
        logger.warning(f"Could not read previous function tree {path}: {e}")
        return {}

    try:
        return tree_from_dict(json.loads(content))
    except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
        logger.warning(f"Ignoring malformed function tree {path}: {e!r}")
        return {}


def save_function_tree(tree: FunctionTree, path: Path) -> None:
    """Write the tree as pretty-printed JSON, replacing any previous artifact.

    The content goes to a temporary file in the same directory first, so a
    failed write leaves the previous artifact untouched.

    Raises:
        PersistenceError: If the artifact could not be written
    """
    try:
        content = tree_to_json(tree)
    except ValueError as e:
        logger.error(f"Function tree is not serializable: {e}")
        raise PersistenceError(f"Could not serialize {path}: {e}", path) from e

    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as e:
        logger.error(f"Failed to save function tree: {e}")
        raise PersistenceError(f"Could not write {path}: {e}", path) from e

    logger.info(f"Function tree saved to {path}")
