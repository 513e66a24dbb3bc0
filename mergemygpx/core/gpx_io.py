"""Load and save GPX documents through gpxpy.

Errors are not caught here:
- gpxpy.gpx.GPXException for malformed content
- OSError for unreadable or unwritable files
"""

import logging
from pathlib import Path

import gpxpy
from gpxpy.gpx import GPX

from mergemygpx.constants import GpxConfig

logger = logging.getLogger(__name__)


def load_gpx(path: Path) -> GPX:
    """Load a GPX document from a file."""
    logger.info(f"Loading GPX from '{path}'...")

    with open(path, "r", encoding=GpxConfig.ENCODING) as f:
        return gpxpy.parse(f)


def save_gpx(gpx: GPX, path: Path) -> None:
    """Serialize a GPX document to a file, overwriting any existing file."""
    logger.info(f"Saving GPX to '{path}'...")

    xml = gpx.to_xml()
    with open(path, "w", encoding=GpxConfig.ENCODING) as f:
        f.write(xml)
