import logging
import os
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def _log_walk_error(error: OSError) -> None:
    logger.warning("Failed to walk directory %s: %s", error.filename, error)


def collect_files(root: Path, directories: Iterable[str], suffix: str) -> list[Path]:
    """Collect files ending in `suffix` under each directory of `root`.

    Directories are walked in the given order, entries in each directory in
    sorted order, so the result is stable between runs. Missing directories
    are skipped.
    """

    files: list[Path] = []
    for directory in directories:
        base = root / directory
        if not base.is_dir():
            logger.debug("Skipping missing directory: %s", base)
            continue

        for dirpath, dirnames, filenames in os.walk(base, onerror=_log_walk_error):
            dirnames.sort()
            files.extend(
                Path(dirpath) / filename for filename in sorted(filenames) if filename.endswith(suffix)
            )

    # Nested directories (e.g. test = "src/test") would otherwise be listed twice.
    return list(dict.fromkeys(files))


def read_source(path: Path) -> bytes | None:
    """Read a file, logging and returning None if it cannot be read."""

    try:
        return path.read_bytes()
    except OSError:
        logger.warning("Failed to read file: %s", path, exc_info=True)
        return None
