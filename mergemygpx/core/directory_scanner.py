"""List the GPX files of a directory in deterministic order."""

import logging
import os
from pathlib import Path

from mergemygpx.core.path_validator import has_expected_extension

logger = logging.getLogger(__name__)


def list_matching_files(directory: Path) -> list[Path]:
    """List regular .gpx files directly inside `directory`.

    Entries that cannot be inspected (e.g. permission denied) are skipped with
    a warning. An empty result is not an error; callers report it.

    Args:
        directory: An existing directory (see validate_directory).

    Returns:
        Matching paths sorted lexicographically by their string form.

    Raises:
        OSError: If the directory itself cannot be read.
    """
    matches: list[Path] = []

    with os.scandir(directory) as entries:
        for entry in entries:
            path = Path(entry.path)
            if not has_expected_extension(path):
                continue
            try:
                is_file = entry.is_file()
            except OSError as e:
                logger.warning(f"Cannot inspect directory entry '{path}': {e}")
                continue
            if is_file:
                matches.append(path)
            else:
                logger.debug(f"Skipping '{path}': not a regular file")

    matches.sort(key=str)
    logger.debug(f"Found {len(matches)} GPX file(s) in '{directory}'")
    return matches
