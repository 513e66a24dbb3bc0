"""CommandResult - Outcome of one mergemygpx command."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from mergemygpx.model.failure import Failure

if TYPE_CHECKING:
    from mergemygpx.core.summary import DocumentSummary


@dataclass(frozen=True)
class CommandResult:
    """Success or structured failure of a command.

    Attributes:
        failure: The failure that aborted the command, None on success
        written: Output files written, in processing order
        summaries: Per-file summaries (info command only)
        notice: Non-fatal remark for the user (e.g. no GPX files found)
    """

    failure: Failure | None = None
    written: tuple[Path, ...] = ()
    summaries: tuple["DocumentSummary", ...] = ()
    notice: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @staticmethod
    def failed(failure: Failure, written: tuple[Path, ...] = ()) -> "CommandResult":
        """Factory for a failed result, keeping track of files already written."""
        return CommandResult(failure=failure, written=written)
