"""Commands - Wiring of the mergemygpx verbs to the core.

Every command validates all of its inputs first, then processes files
sequentially and returns a CommandResult. Validation failures are detected
before anything is written. A parse or I/O error aborts the remaining batch;
files written by earlier iterations are kept and listed in the result.

Commands:
    info: Summarize GPX files
    invert / invert_all: Invert each file (one output per input)
    merge / merge_all: Merge all files into a single-track file
    decimate: Keep every M-th point of each segment of each file
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from gpxpy.gpx import GPX, GPXException

from mergemygpx.core.directory_scanner import list_matching_files
from mergemygpx.core.gpx_io import load_gpx, save_gpx
from mergemygpx.core.lifecycle import DocumentJob, JobContext
from mergemygpx.core.output_paths import derive_output_path
from mergemygpx.core.path_validator import validate_directory, validate_factor, validate_files
from mergemygpx.core.summary import DocumentSummary, summarize
from mergemygpx.model.action import Action
from mergemygpx.model.failure import Failure, IOFailure, ParseFailure
from mergemygpx.model.result import CommandResult

logger = logging.getLogger(__name__)


def _no_files_notice(directory: Path) -> str:
    return f"No GPX files found in '{directory}'"


def _load(path: Path) -> tuple[GPX | None, Failure | None]:
    """Load a document, returning (document, None) or (None, failure)."""
    try:
        return load_gpx(path), None
    except (GPXException, UnicodeDecodeError) as e:
        return None, ParseFailure(path=path, error=e)
    except OSError as e:
        return None, IOFailure(path=path, error=e)


def _process(action: Action, inputs: Sequence[Path], output_path: Path) -> Failure | None:
    """Load `inputs`, apply `action` once and save the result to `output_path`.

    Returns:
        None on success, the ParseFailure/IOFailure that stopped the job otherwise.
    """
    job = DocumentJob(JobContext(action=action, output_path=output_path))

    for path in inputs:
        document, failure = _load(path)
        if failure:
            return failure
        job.load(path=path, document=document)

    job.transform()

    try:
        save_gpx(job.context.result, output_path)
    except OSError as e:
        return IOFailure(path=output_path, error=e)

    job.save()
    return None


def _process_each(action: Action, files: Sequence[Path]) -> CommandResult:
    """Apply `action` to every file independently, one output per input."""
    written: list[Path] = []

    for in_file in files:
        out_file = derive_output_path(in_file, action, is_directory=False)
        failure = _process(action, [in_file], out_file)
        if failure:
            logger.error(f"Aborting after {len(written)} of {len(files)} file(s): {failure.message}")
            return CommandResult.failed(failure, written=tuple(written))
        written.append(out_file)

    return CommandResult(written=tuple(written))


def _scan(directory: Path) -> tuple[list[Path], Failure | None]:
    """Validate `directory` and list its GPX files."""
    failure = validate_directory(directory)
    if failure:
        return [], failure
    try:
        return list_matching_files(directory), None
    except OSError as e:
        return [], IOFailure(path=Path(directory), error=e)


# =============================================================================
# Commands
# =============================================================================


def info(files: Sequence[Path]) -> CommandResult:
    """Summarize each file (version, creator, metadata, tracks, segment sizes)."""
    files = [Path(f) for f in files]
    failure = validate_files(files)
    if failure:
        return CommandResult.failed(failure)

    summaries: list[DocumentSummary] = []
    for path in files:
        document, failure = _load(path)
        if failure:
            return CommandResult.failed(failure)
        summaries.append(summarize(document, path))

    return CommandResult(summaries=tuple(summaries))


def invert(files: Sequence[Path]) -> CommandResult:
    """Invert each track of each file; writes `<stem>-inverted.gpx` next to each input."""
    files = [Path(f) for f in files]
    failure = validate_files(files)
    if failure:
        return CommandResult.failed(failure)

    return _process_each(Action.invert(), files)


def invert_all(directory: Path) -> CommandResult:
    """Same as invert with all the GPX files of `directory`."""
    files, failure = _scan(directory)
    if failure:
        return CommandResult.failed(failure)
    if not files:
        return CommandResult(notice=_no_files_notice(directory))

    return invert(files)


def merge(files: Sequence[Path], output_path: Path) -> CommandResult:
    """Merge all tracks of all files, in the given order, into one single-track file."""
    files = [Path(f) for f in files]
    failure = validate_files(files)
    if failure:
        return CommandResult.failed(failure)
    if not files:
        return CommandResult(notice="No GPX files to merge")

    logger.info(f"Merging {len(files)} files...")
    output_path = Path(output_path)
    failure = _process(Action.merge(), files, output_path)
    if failure:
        return CommandResult.failed(failure)

    return CommandResult(written=(output_path,))


def merge_all(directory: Path) -> CommandResult:
    """Same as merge with all the GPX files of `directory`, in lexicographic order.

    The output file `merged.gpx` is created in `directory`.
    """
    files, failure = _scan(directory)
    if failure:
        return CommandResult.failed(failure)
    if not files:
        return CommandResult(notice=_no_files_notice(directory))

    output_path = derive_output_path(directory, Action.merge(), is_directory=True)
    return merge(files, output_path)


def decimate(files: Sequence[Path], factor: int) -> CommandResult:
    """Keep every `factor`-th point (plus the last one) of each segment of each file.

    Writes `<stem>-decimated-by-<factor>.gpx` next to each input.
    """
    failure = validate_factor(factor)
    if failure:
        return CommandResult.failed(failure)

    files = [Path(f) for f in files]
    failure = validate_files(files)
    if failure:
        return CommandResult.failed(failure)

    return _process_each(Action.decimate(factor=factor), files)
