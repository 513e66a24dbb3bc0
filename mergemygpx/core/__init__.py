"""Core of mergemygpx: everything between the command layer and gpxpy.

- path_validator: Input file/directory/factor validation
- directory_scanner: Deterministic listing of the GPX files of a directory
- output_paths: Output file naming per action
- transforms: invert, merge, decimate on gpxpy documents
- gpx_io: Loading and saving through gpxpy
- summary: Document summaries for the info command
- lifecycle: Load -> transform -> save state machine
"""

from mergemygpx.core.directory_scanner import list_matching_files
from mergemygpx.core.output_paths import derive_output_path
from mergemygpx.core.path_validator import validate_directory, validate_factor, validate_files
from mergemygpx.core.transforms import decimate, invert, merge, tool_creator

__all__ = [
    # Validation
    "validate_files",
    "validate_directory",
    "validate_factor",
    # Scanning and naming
    "list_matching_files",
    "derive_output_path",
    # Transforms
    "invert",
    "merge",
    "decimate",
    "tool_creator",
]
