"""Scan configuration for the fixture wizard."""

from dataclasses import dataclass
from pathlib import Path

# Source roots scanned under the project root, in this order
SCAN_DIRS = ("client", "server", "contracts")

SUPPORTED_EXTENSIONS = frozenset({".ts", ".js", ".tsx", ".jsx"})

# Directory names pruned at any depth
EXCLUDE_DIRS = frozenset({"node_modules", ".git", "dist", "build", ".next"})

# The generator script and its own artifact are never scanned
EXCLUDE_FILES = frozenset({"unit_setup.ts", "unit_tests.json"})

DEFAULT_OUTPUT = Path("unit_tests.json")


@dataclass(frozen=True)
class ScanConfig:
    """Where to scan and where to persist the function tree.

    Attributes:
        root: Project root; scan dirs and relative paths are resolved from it
        scan_dirs: Subdirectories of root to walk
        extensions: File suffixes to parse
        exclude_dirs: Directory names skipped at any depth
        exclude_files: File names skipped at any depth
        output_path: Location of the persisted JSON artifact
    """

    root: Path = Path(".")
    scan_dirs: tuple[str, ...] = SCAN_DIRS
    extensions: frozenset[str] = SUPPORTED_EXTENSIONS
    exclude_dirs: frozenset[str] = EXCLUDE_DIRS
    exclude_files: frozenset[str] = EXCLUDE_FILES
    output_path: Path = DEFAULT_OUTPUT

    @classmethod
    def from_args(cls, root: str | None = None, output: str | None = None) -> "ScanConfig":
        """Build a config from CLI option values, keeping defaults for None."""
        return cls(
            root=Path(root) if root else Path("."),
            output_path=Path(output) if output else DEFAULT_OUTPUT,
        )
