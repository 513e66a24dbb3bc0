"""Output path derivation for transformed GPX files.

Two naming modes:
- Directory input: <directory>/<label>.gpx
- File input: <parent>/<stem>-<label><original suffix>

The original suffix is kept verbatim in file mode, while directory mode always
uses the GPX extension. Pure functions: the filesystem is never touched and an
existing file at the derived path is overwritten later without warning.
"""

from pathlib import Path

from mergemygpx.constants import GpxConfig, NamingConfig
from mergemygpx.model.action import Action


def derive_output_path(path: Path, action: Action, *, is_directory: bool) -> Path:
    """Construct the path of the output file for an action on a file or directory.

    Args:
        path: Input file or directory
        action: The transformation being applied
        is_directory: Whether `path` denotes a directory (decided by the caller)

    Returns:
        Derived output path.

    Example:
        derive_output_path(Path("/x/track.gpx"), Action.invert(), is_directory=False)
        # Path("/x/track-inverted.gpx")
    """
    path = Path(path)

    if is_directory:
        return path / f"{action.label}{GpxConfig.SUFFIX}"

    stem = f"{path.stem}{NamingConfig.STEM_SEPARATOR}{action.label}"
    return path.parent / f"{stem}{path.suffix}"
