"""Value types shared by the mergemygpx core and commands.

- Action: Transformation kind plus optional decimation factor
- Failure: Structured errors (validation, parse, I/O)
- CommandResult: Success or failure of a command
"""

from mergemygpx.model.action import Action, ActionKind
from mergemygpx.model.failure import (
    DirectoryInsteadOfFileListFailure,
    DuplicatePathFailure,
    Failure,
    FailureKind,
    InvalidFactorFailure,
    IOFailure,
    NotADirectoryFailure,
    NotAFileFailure,
    ParseFailure,
    WrongExtensionFailure,
)
from mergemygpx.model.result import CommandResult

__all__ = [
    "Action",
    "ActionKind",
    "Failure",
    "FailureKind",
    "NotADirectoryFailure",
    "NotAFileFailure",
    "WrongExtensionFailure",
    "DuplicatePathFailure",
    "DirectoryInsteadOfFileListFailure",
    "InvalidFactorFailure",
    "ParseFailure",
    "IOFailure",
    "CommandResult",
]
