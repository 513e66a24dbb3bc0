"""Shared pytest fixtures for mergemygpx tests.

Provides builders for in-memory GPX documents and for GPX files on disk.

COORDINATE SYSTEM:
    Every point gets a unique, readable coordinate so that order checks are
    simple equality checks on (lat, lon) tuples:
        lat = 45 + track_index + point_index / 1000
        lon = 7 + segment_index / 100
"""

from collections.abc import Callable, Sequence
from pathlib import Path

import gpxpy
import pytest
from gpxpy.gpx import GPX, GPXTrack, GPXTrackPoint, GPXTrackSegment, GPXWaypoint

# Track layout: one list per track, one point count per segment
Layout = Sequence[Sequence[int]]


def build_gpx(
    layout: Layout,
    names: Sequence[str | None] | None = None,
    lat_offset: float = 0.0,
    creator: str | None = "test-suite",
) -> GPX:
    """Build a GPX document with the given track/segment/point layout.

    Args:
        layout: e.g. [[3, 2], [4]] = track 0 with segments of 3 and 2 points, track 1 with 4
        names: Optional track names (None entries leave the track unnamed)
        lat_offset: Added to every latitude, to tell documents apart
        creator: Creator attribute of the document
    """
    gpx = GPX()
    gpx.creator = creator

    for t, segment_sizes in enumerate(layout):
        track = GPXTrack(name=names[t] if names else None)
        for s, size in enumerate(segment_sizes):
            segment = GPXTrackSegment()
            for i in range(size):
                segment.points.append(
                    GPXTrackPoint(
                        latitude=round(45 + lat_offset + t + i / 1000, 6),
                        longitude=round(7 + s / 100, 6),
                        elevation=1000.0 + i,
                    )
                )
            track.segments.append(segment)
        gpx.tracks.append(track)

    return gpx


def coords(gpx: GPX) -> list[list[list[tuple[float, float]]]]:
    """Nested (lat, lon) coordinates per track, per segment, per point."""
    return [
        [[(p.latitude, p.longitude) for p in segment.points] for segment in track.segments]
        for track in gpx.tracks
    ]


def segment_coords(gpx: GPX) -> list[list[tuple[float, float]]]:
    """Flat list of segments as (lat, lon) lists, in document order."""
    return [segment for track in coords(gpx) for segment in track]


def write_gpx(gpx: GPX, path: Path) -> Path:
    """Write a document to `path` and return the path."""
    path.write_text(gpx.to_xml(), encoding="utf-8")
    return path


# =============================================================================
# DOCUMENT FIXTURES
# =============================================================================


@pytest.fixture
def two_track_gpx() -> GPX:
    """Two named tracks: 'Morning' with segments of 3 and 2 points, 'Evening' with 4 points.

    Also carries one waypoint and one route, which merge must drop.
    """
    gpx = build_gpx([[3, 2], [4]], names=["Morning", "Evening"])
    gpx.waypoints.append(GPXWaypoint(latitude=46.0, longitude=8.0, name="Hut"))
    gpx.routes.append(gpxpy.gpx.GPXRoute(name="Planned"))
    return gpx


@pytest.fixture
def unnamed_track_gpx() -> GPX:
    """Single unnamed track with one 10-point segment."""
    return build_gpx([[10]])


# =============================================================================
# FILE FIXTURES
# =============================================================================


@pytest.fixture
def gpx_dir(tmp_path: Path) -> Path:
    """Directory with three GPX files (written in non-alphabetical order) and one text file.

    - b_ride.gpx: 1 track, 1 segment of 5 points (lat offset 0.2)
    - a_ride.gpx: 1 track, 2 segments of 3 and 4 points (lat offset 0.1)
    - c_ride.gpx: 2 tracks of 2 points each (lat offset 0.3)
    - notes.txt: not a GPX file
    """
    write_gpx(build_gpx([[5]], names=["B"], lat_offset=0.2), tmp_path / "b_ride.gpx")
    write_gpx(build_gpx([[3, 4]], names=["A"], lat_offset=0.1), tmp_path / "a_ride.gpx")
    write_gpx(build_gpx([[2], [2]], names=["C1", "C2"], lat_offset=0.3), tmp_path / "c_ride.gpx")
    (tmp_path / "notes.txt").write_text("not a track", encoding="utf-8")
    return tmp_path


@pytest.fixture
def gpx_file_factory(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing build_gpx(layout, ...) documents to tmp_path/<name>."""

    def _make(name: str, layout: Layout, **kwargs) -> Path:
        return write_gpx(build_gpx(layout, **kwargs), tmp_path / name)

    return _make
