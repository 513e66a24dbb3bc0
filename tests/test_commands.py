"""Integration tests for mergemygpx commands (real files in tmp_path).

Each test writes GPX files with gpxpy, runs a command, and loads the outputs
back with gpxpy.
"""

from collections.abc import Callable
from pathlib import Path

import gpxpy
import pytest

from conftest import build_gpx, coords, segment_coords, write_gpx
from mergemygpx import commands
from mergemygpx.core.transforms import tool_creator
from mergemygpx.model.failure import (
    DirectoryInsteadOfFileListFailure,
    DuplicatePathFailure,
    FailureKind,
    InvalidFactorFailure,
    IOFailure,
    NotADirectoryFailure,
    ParseFailure,
)


def _load(path: Path) -> gpxpy.gpx.GPX:
    with open(path, encoding="utf-8") as f:
        return gpxpy.parse(f)


@pytest.fixture
def broken_file(tmp_path: Path) -> Path:
    path = tmp_path / "broken.gpx"
    path.write_text("<gpx><trk><trkseg><trkpt lat=", encoding="utf-8")
    return path


class TestInvertCommand:
    def test_writes_inverted_file_next_to_input(self, gpx_file_factory: Callable[..., Path]) -> None:
        path = gpx_file_factory("ride.gpx", [[3, 2]], names=["Ride"])
        original = coords(_load(path))

        result = commands.invert([path])

        out = path.parent / "ride-inverted.gpx"
        assert result.ok
        assert result.written == (out,)
        inverted = _load(out)
        assert coords(inverted) == [[list(reversed(seg)) for seg in reversed(track)] for track in reversed(original)]
        assert inverted.tracks[0].name == "Ride (inverted)"
        assert inverted.creator == tool_creator()

    def test_input_file_untouched(self, gpx_file_factory: Callable[..., Path]) -> None:
        path = gpx_file_factory("ride.gpx", [[3]])
        before = path.read_text(encoding="utf-8")
        commands.invert([path])
        assert path.read_text(encoding="utf-8") == before

    def test_one_output_per_input(self, gpx_file_factory: Callable[..., Path]) -> None:
        first = gpx_file_factory("one.gpx", [[2]])
        second = gpx_file_factory("two.gpx", [[2]])
        result = commands.invert([first, second])
        assert [p.name for p in result.written] == ["one-inverted.gpx", "two-inverted.gpx"]

    def test_duplicate_rejected_before_writing(self, gpx_file_factory: Callable[..., Path]) -> None:
        path = gpx_file_factory("ride.gpx", [[2]])
        result = commands.invert([path, path])
        assert isinstance(result.failure, DuplicatePathFailure)
        assert not (path.parent / "ride-inverted.gpx").exists()

    def test_single_directory_rejected(self, tmp_path: Path) -> None:
        result = commands.invert([tmp_path])
        assert isinstance(result.failure, DirectoryInsteadOfFileListFailure)

    def test_parse_error_aborts_batch_keeping_earlier_outputs(
        self, gpx_file_factory: Callable[..., Path], broken_file: Path
    ) -> None:
        good = gpx_file_factory("good.gpx", [[2]])
        later = gpx_file_factory("later.gpx", [[2]])

        result = commands.invert([good, broken_file, later])

        assert isinstance(result.failure, ParseFailure)
        assert result.failure.path == broken_file
        assert result.written == (good.parent / "good-inverted.gpx",)
        assert (good.parent / "good-inverted.gpx").exists()
        assert not (later.parent / "later-inverted.gpx").exists()


class TestInvertAllCommand:
    def test_inverts_every_gpx_file(self, gpx_dir: Path) -> None:
        result = commands.invert_all(gpx_dir)
        assert result.ok
        assert [p.name for p in result.written] == [
            "a_ride-inverted.gpx",
            "b_ride-inverted.gpx",
            "c_ride-inverted.gpx",
        ]

    def test_empty_directory_is_a_notice(self, tmp_path: Path) -> None:
        result = commands.invert_all(tmp_path)
        assert result.ok
        assert result.written == ()
        assert "No GPX files found" in result.notice

    def test_missing_directory(self, tmp_path: Path) -> None:
        result = commands.invert_all(tmp_path / "nope")
        assert isinstance(result.failure, NotADirectoryFailure)


class TestMergeCommand:
    def test_merges_in_command_line_order(self, gpx_dir: Path, tmp_path: Path) -> None:
        files = [gpx_dir / "c_ride.gpx", gpx_dir / "a_ride.gpx"]
        expected = segment_coords(_load(files[0])) + segment_coords(_load(files[1]))
        out = tmp_path / "out" / "joined.gpx"
        out.parent.mkdir()

        result = commands.merge(files, out)

        assert result.ok
        assert result.written == (out,)
        merged = _load(out)
        assert len(merged.tracks) == 1
        assert segment_coords(merged) == expected
        assert merged.version == "1.1"
        assert merged.creator == tool_creator()

    def test_unwritable_output_is_io_failure(self, gpx_dir: Path, tmp_path: Path) -> None:
        out = tmp_path / "missing-dir" / "merged.gpx"
        result = commands.merge([gpx_dir / "a_ride.gpx"], out)
        assert isinstance(result.failure, IOFailure)
        assert result.failure.path == out
        assert result.failure.kind is FailureKind.IO_ERROR

    def test_parse_error_writes_nothing(self, gpx_dir: Path, broken_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "merged-out.gpx"
        result = commands.merge([gpx_dir / "a_ride.gpx", broken_file], out)
        assert isinstance(result.failure, ParseFailure)
        assert not out.exists()

    def test_empty_list_writes_nothing(self, tmp_path: Path) -> None:
        result = commands.merge([], tmp_path / "merged.gpx")
        assert result.ok
        assert result.written == ()
        assert result.notice
        assert not (tmp_path / "merged.gpx").exists()


class TestMergeAllCommand:
    def test_merges_in_lexicographic_order(self, gpx_dir: Path) -> None:
        expected = [
            seg for name in ["a_ride.gpx", "b_ride.gpx", "c_ride.gpx"] for seg in segment_coords(_load(gpx_dir / name))
        ]

        result = commands.merge_all(gpx_dir)

        out = gpx_dir / "merged.gpx"
        assert result.written == (out,)
        # a: 2 segments, b: 1, c: 2 tracks x 1
        merged = _load(out)
        assert len(merged.tracks[0].segments) == 5
        assert segment_coords(merged) == expected

    def test_non_gpx_files_ignored(self, gpx_dir: Path) -> None:
        """notes.txt in the fixture directory is not picked up; a new .gpx file is."""
        write_gpx(build_gpx([[1]]), gpx_dir / "z_last.gpx")
        result = commands.merge_all(gpx_dir)
        assert result.ok
        assert len(_load(gpx_dir / "merged.gpx").tracks[0].segments) == 6

    def test_empty_directory_is_a_notice(self, tmp_path: Path) -> None:
        result = commands.merge_all(tmp_path)
        assert result.ok
        assert not (tmp_path / "merged.gpx").exists()

    def test_file_instead_of_directory(self, gpx_dir: Path) -> None:
        result = commands.merge_all(gpx_dir / "a_ride.gpx")
        assert isinstance(result.failure, NotADirectoryFailure)


class TestDecimateCommand:
    def test_writes_decimated_file(self, gpx_file_factory: Callable[..., Path]) -> None:
        path = gpx_file_factory("long.gpx", [[10]], names=["Long"])

        result = commands.decimate([path], 4)

        out = path.parent / "long-decimated-by-4.gpx"
        assert result.written == (out,)
        decimated = _load(out)
        assert len(decimated.tracks[0].segments[0].points) == 4  # indices 0, 4, 8, 9
        assert decimated.tracks[0].name == "Long (decimated by 4)"

    @pytest.mark.parametrize("factor", [0, -2])
    def test_invalid_factor_checked_first(self, tmp_path: Path, factor: int) -> None:
        """Factor is rejected even when the file list is also invalid."""
        result = commands.decimate([tmp_path / "missing.gpx"], factor)
        assert isinstance(result.failure, InvalidFactorFailure)


class TestInfoCommand:
    def test_summaries_in_input_order(self, gpx_dir: Path) -> None:
        files = [gpx_dir / "c_ride.gpx", gpx_dir / "b_ride.gpx"]
        result = commands.info(files)

        assert result.ok
        assert result.written == ()
        assert [s.path for s in result.summaries] == files
        assert [len(s.tracks) for s in result.summaries] == [2, 1]

    def test_parse_error(self, broken_file: Path) -> None:
        result = commands.info([broken_file])
        assert isinstance(result.failure, ParseFailure)
        assert "broken.gpx" in result.failure.message


class TestFailureDescription:
    def test_verbose_shows_cause(self, broken_file: Path) -> None:
        failure = commands.info([broken_file]).failure

        short = failure.describe(verbose=False)
        detailed = failure.describe(verbose=True)

        assert short == failure.message
        assert detailed.startswith(failure.message)
        assert "Caused by:" in detailed
