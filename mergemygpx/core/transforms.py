"""Document transform engine - invert, merge and decimate GPX documents.

Operates on the gpxpy document model (GPX -> GPXTrack -> GPXTrackSegment ->
GPXTrackPoint). The order of tracks, segments and points encodes the travel
direction, so it is only ever preserved or deliberately reversed.

- invert: Reverse tracks, segments and points (in place)
- merge: Concatenate all segments of all documents into one track (new document)
- decimate: Keep every M-th point of every segment plus its last point (in place)

Inputs are assumed to be validated already; nothing is re-checked here.
"""

import logging
from collections.abc import Sequence

import numpy as np
from gpxpy.gpx import GPX, GPXTrack, GPXTrackSegment

from mergemygpx.constants import PACKAGE_NAME, PACKAGE_VERSION, GpxConfig
from mergemygpx.model.action import Action

logger = logging.getLogger(__name__)


def tool_creator() -> str:
    """Identifying string written to the `creator` attribute of produced documents."""
    return f"{PACKAGE_NAME} v{PACKAGE_VERSION}"


def _append_to_name(track: GPXTrack, suffix: str | None) -> None:
    """Append `suffix` to the track name, leaving unnamed tracks unnamed."""
    if suffix and track.name:
        track.name = f"{track.name}{suffix}"


def invert(gpx: GPX) -> GPX:
    """Invert the travel direction of every track of a document.

    Reverses the order of tracks, of segments within each track and of points
    within each segment. Named tracks get the " (inverted)" suffix.

    Args:
        gpx: Document to invert (modified in place)

    Returns:
        The same document, for chaining.
    """
    suffix = Action.invert().track_suffix

    gpx.tracks.reverse()
    for track in gpx.tracks:
        _append_to_name(track, suffix)
        track.segments.reverse()
        for segment in track.segments:
            segment.points.reverse()

    gpx.creator = tool_creator()
    return gpx


def merge(documents: Sequence[GPX]) -> GPX:
    """Merge the tracks of several documents into a single-track document.

    Segments are concatenated in input order: documents as given, then tracks
    and segments in document order. Waypoints, routes, metadata and per-track
    fields (name, description, ...) are not carried over.

    Args:
        documents: Documents in the order they must appear in the output

    Returns:
        A new GPX 1.1 document with exactly one unnamed track.
    """
    segments: list[GPXTrackSegment] = [
        segment for document in documents for track in document.tracks for segment in track.segments
    ]

    track = GPXTrack()
    track.segments = segments

    merged = GPX()
    merged.version = GpxConfig.FORMAT_VERSION
    merged.creator = tool_creator()
    merged.tracks = [track]

    logger.debug(f"Merged {len(segments)} segment(s) from {len(documents)} document(s)")
    return merged


def decimation_indices(point_count: int, factor: int) -> np.ndarray:
    """Indices of the points kept when decimating a segment.

    Keeps index i when i % factor == 0, plus the last index so that segment
    endpoints are never dropped.

    Args:
        point_count: Number of points in the segment
        factor: Decimation factor M (>= 1)

    Returns:
        Strictly increasing array of indices (empty for an empty segment).
    """
    if factor < 1:
        raise ValueError(f"Decimation factor must be >= 1, got {factor}")
    if point_count == 0:
        return np.empty(0, dtype=int)

    indices = np.arange(0, point_count, factor)
    if indices[-1] != point_count - 1:
        indices = np.append(indices, point_count - 1)
    return indices


def decimate(gpx: GPX, factor: int) -> GPX:
    """Reduce the number of points of every segment of every track.

    Each segment is decimated independently (see decimation_indices). Named
    tracks get the " (decimated by M)" suffix. A factor of 1 keeps every point.

    Args:
        gpx: Document to decimate (modified in place)
        factor: Decimation factor M (>= 1)

    Returns:
        The same document, for chaining.

    Raises:
        ValueError: If factor < 1.
    """
    if factor < 1:
        raise ValueError(f"Decimation factor must be >= 1, got {factor}")
    action = Action.decimate(factor=factor)

    before = 0
    after = 0
    for track in gpx.tracks:
        _append_to_name(track, action.track_suffix)
        for segment in track.segments:
            points = segment.points
            kept = decimation_indices(point_count=len(points), factor=factor)
            segment.points = [points[i] for i in kept]
            before += len(points)
            after += len(segment.points)

    gpx.creator = tool_creator()
    logger.info(f"Decimated by {factor}: {before} -> {after} points")
    return gpx
