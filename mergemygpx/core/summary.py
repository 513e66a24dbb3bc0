"""Document summary - the information printed by the `info` command.

Only fields that are set are reported; per-segment point counts are always
listed since they are what users check against import limits.
"""

from dataclasses import dataclass, field
from pathlib import Path

from gpxpy.gpx import GPX, GPXTrack

SEPARATOR = "*" * 42


def _section(title: str, depth: int = 1) -> str:
    """Section header padded with dashes, e.g. '-- Tracks ------...'."""
    header = f"{'--' * depth} {title} "
    return header + "-" * max(len(SEPARATOR) - len(header), 0)


def _set_fields(pairs: list[tuple[str, object]]) -> dict[str, str]:
    """Keep the (label, value) pairs whose value is set, formatted as strings."""
    return {label: str(value) for label, value in pairs if value not in (None, "", [])}


@dataclass(frozen=True)
class TrackSummary:
    """Descriptive fields and segment sizes of one track."""

    fields: dict[str, str]
    segment_point_counts: tuple[int, ...]

    @property
    def point_count(self) -> int:
        return sum(self.segment_point_counts)

    @classmethod
    def from_track(cls, track: GPXTrack) -> "TrackSummary":
        return cls(
            fields=_set_fields(
                [
                    ("Name", track.name),
                    ("Comment", track.comment),
                    ("Description", track.description),
                    ("Source", track.source),
                    ("Link", track.link),
                    ("Type", track.type),
                    ("Number", track.number),
                ]
            ),
            segment_point_counts=tuple(len(segment.points) for segment in track.segments),
        )


@dataclass(frozen=True)
class DocumentSummary:
    """Summary of one GPX file.

    Attributes:
        path: File the document was loaded from
        version: GPX format version
        creator: Creator attribute, if any
        metadata: Metadata fields that are set, in display order
        waypoint_names: Name of each waypoint ("" when unnamed)
        tracks: One summary per track, in document order
        route_count: Number of routes
    """

    path: Path
    version: str | None
    creator: str | None
    metadata: dict[str, str] = field(default_factory=dict)
    waypoint_names: tuple[str, ...] = ()
    tracks: tuple[TrackSummary, ...] = ()
    route_count: int = 0

    @property
    def point_count(self) -> int:
        """Total number of track points."""
        return sum(track.point_count for track in self.tracks)

    def to_lines(self) -> list[str]:
        """Render the summary as console lines."""
        lines = [SEPARATOR, f"Info about {self.path}", f"GPX version = {self.version}"]
        if self.creator:
            lines.append(f"Creator = {self.creator}")

        lines.append(_section("Metadata"))
        lines.extend(f"{key} = {value}" for key, value in self.metadata.items())

        lines.append(_section("Waypoints"))
        if self.waypoint_names:
            lines.append(f"Waypoints = {len(self.waypoint_names)}")
            lines.extend(f"Waypoint #{i} = {name}" for i, name in enumerate(self.waypoint_names) if name)

        lines.append(_section("Tracks"))
        for i, track in enumerate(self.tracks):
            lines.append(_section(f"Track #{i}", depth=2))
            lines.extend(f"{key} = {value}" for key, value in track.fields.items())
            lines.extend(f"Segment #{j} = {count} points" for j, count in enumerate(track.segment_point_counts))

        lines.append(_section("Routes"))
        if self.route_count:
            lines.append(f"Routes = {self.route_count}")

        lines.append(SEPARATOR)
        return lines


def summarize(gpx: GPX, path: Path) -> DocumentSummary:
    """Build the summary of a loaded document."""
    bounds = gpx.bounds
    return DocumentSummary(
        path=Path(path),
        version=gpx.version,
        creator=gpx.creator,
        metadata=_set_fields(
            [
                ("Name", gpx.name),
                ("Description", gpx.description),
                ("Author", gpx.author_name),
                ("Link", gpx.link),
                ("Time", gpx.time.isoformat() if gpx.time else None),
                ("Keywords", gpx.keywords),
                ("Copyright", gpx.copyright_author),
                (
                    "Bounds",
                    f"({bounds.min_latitude}, {bounds.min_longitude}) - ({bounds.max_latitude}, {bounds.max_longitude})"
                    if bounds
                    else None,
                ),
            ]
        ),
        waypoint_names=tuple(waypoint.name or "" for waypoint in gpx.waypoints),
        tracks=tuple(TrackSummary.from_track(track) for track in gpx.tracks),
        route_count=len(gpx.routes),
    )
