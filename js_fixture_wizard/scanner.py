"""Walk the configured source roots and yield parseable JS/TS files."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from js_fixture_wizard.config import ScanConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceFile:
    """A file selected for parsing."""

    path: Path
    relative_path: str  # POSIX-style, relative to the scan root


def iter_source_files(config: ScanConfig) -> Iterator[SourceFile]:
    """Yield every parseable file under the configured scan dirs.

    Scan dirs that don't exist are skipped silently. Directory entries are
    visited in sorted order so repeated runs see files in the same order.

    Args:
        config: Scan configuration

    Yields:
        SourceFile for each file passing the extension and exclusion filters
    """
    for dir_name in config.scan_dirs:
        dir_path = config.root / dir_name
        if not dir_path.is_dir():
            logger.info(f"Skipping missing scan dir: {dir_path}")
            continue

        logger.info(f"Scanning {dir_name} directory")
        yield from _walk(dir_path, config)


def _walk(dir_path: Path, config: ScanConfig) -> Iterator[SourceFile]:
    try:
        entries = sorted(dir_path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.warning(f"Could not read directory {dir_path}: {e}")
        return

    for entry in entries:
        try:
            if entry.is_dir():
                if entry.name not in config.exclude_dirs:
                    yield from _walk(entry, config)
            elif entry.is_file() and _should_parse(entry, config):
                yield SourceFile(
                    path=entry,
                    relative_path=entry.relative_to(config.root).as_posix(),
                )
        except OSError as e:
            logger.warning(f"Could not process {entry}: {e}")


def _should_parse(path: Path, config: ScanConfig) -> bool:
    return path.suffix in config.extensions and path.name not in config.exclude_files


def read_source(source_file: SourceFile) -> str | None:
    """Read a source file as UTF-8 text.

    Returns:
        The file content, or None if the file could not be read
    """
    try:
        return source_file.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read file {source_file.path}: {e}")
        return None


def collect_existing_files(config: ScanConfig) -> set[str]:
    """Collect the relative paths of every file the scan filters accept."""
    existing = {source.relative_path for source in iter_source_files(config)}
    logger.info(f"Found {len(existing)} existing source files")
    return existing
