"""Path validation for GPX batch commands.

Validators return Failure | None:
- None if valid
- A Failure object if invalid (caller reports it)

All checks run before any file is loaded, so a validation failure never
leaves partially written output behind. Only filesystem stat calls are made.
"""

from collections.abc import Sequence
from pathlib import Path

from mergemygpx.constants import GpxConfig
from mergemygpx.model.failure import (
    DirectoryInsteadOfFileListFailure,
    DuplicatePathFailure,
    Failure,
    InvalidFactorFailure,
    NotADirectoryFailure,
    NotAFileFailure,
    WrongExtensionFailure,
)


def has_expected_extension(path: Path) -> bool:
    """Check the extension against GpxConfig.EXTENSION (case-sensitive)."""
    return path.suffix == GpxConfig.SUFFIX


def validate_directory(path: Path) -> Failure | None:
    """Validate that `path` is an existing directory.

    Returns:
        None if valid, NotADirectoryFailure otherwise.
    """
    if not Path(path).is_dir():
        return NotADirectoryFailure(path=Path(path))
    return None


def validate_files(paths: Sequence[Path]) -> Failure | None:
    """Validate a list of input GPX files.

    Checks, in order:
    1. A single directory passed instead of a list of files
    2. Every path is an existing regular file
    3. Every path has the .gpx extension
    4. No file appears twice

    An empty list is valid.

    Returns:
        None if valid, the first Failure found otherwise.
    """
    paths = [Path(p) for p in paths]

    if len(paths) == 1 and paths[0].is_dir():
        return DirectoryInsteadOfFileListFailure(path=paths[0])

    for path in paths:
        if not path.is_file():
            return NotAFileFailure(path=path)
        if not has_expected_extension(path):
            return WrongExtensionFailure(path=path, expected_extension=GpxConfig.EXTENSION)

    # Compare resolved paths so that "a.gpx" and "./dir/../a.gpx" count as the same file
    seen: set[str] = set()
    for path in paths:
        canonical = str(path.resolve())
        if canonical in seen:
            return DuplicatePathFailure(path=path)
        seen.add(canonical)

    return None


def validate_factor(factor: int) -> Failure | None:
    """Validate a decimation factor (must be >= 1).

    Returns:
        None if valid, InvalidFactorFailure otherwise.
    """
    if factor < 1:
        return InvalidFactorFailure(factor=factor)
    return None
