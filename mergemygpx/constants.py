"""Configuration constants for mergemygpx.

All configurable parameters are centralized here for easy tuning.
Nothing is read from the environment.

Classes:
    GpxConfig: File extension and GPX format version
    NamingConfig: Action labels and track name suffixes
    LogConfig: Console logging format
    CliConfig: Command-line defaults and help texts
"""

from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "mergemygpx"

try:
    PACKAGE_VERSION = version(PACKAGE_NAME)
except PackageNotFoundError:
    # Running from a source checkout without installation
    PACKAGE_VERSION = "0.0.0"


class GpxConfig:
    """GPX file format settings."""

    # Case-sensitive, used both for input filtering and directory-mode output naming
    EXTENSION = "gpx"
    SUFFIX = f".{EXTENSION}"

    # Version written for documents built from scratch (merge output)
    FORMAT_VERSION = "1.1"

    ENCODING = "utf-8"


class NamingConfig:
    """Labels embedded in output filenames and track names."""

    INVERT_LABEL = "inverted"
    MERGE_LABEL = "merged"
    DECIMATE_LABEL_PREFIX = "decimated-by-"

    # Appended to track names when a name is present
    INVERT_TRACK_SUFFIX = " (inverted)"
    DECIMATE_TRACK_SUFFIX = " (decimated by {factor})"

    # Joins the original stem and the action label in file mode
    STEM_SEPARATOR = "-"


class LogConfig:
    """Console logging settings."""

    FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliConfig:
    """Command-line defaults and shared help texts."""

    HELP_FOR_FILES_ARG = "A list of paths to your GPX files (separated with spaces)."
    HELP_FOR_DIRECTORY_ARG = "The path of the directory where your GPX files are."

    # `merge` writes here (relative to the current directory) unless --output is given
    DEFAULT_MERGE_OUTPUT = f"{NamingConfig.MERGE_LABEL}{GpxConfig.SUFFIX}"

    OK_BANNER = "*** OK ***"
    ERROR_BANNER = "*** Error: {message} ***"
