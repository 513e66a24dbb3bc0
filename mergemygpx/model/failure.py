"""Failure - Structured errors reported by mergemygpx commands.

Validators and commands return a Failure instead of raising for expected
problems (bad paths, bad factor). Library errors raised while loading or
saving (parse errors, I/O errors) are wrapped into ParseFailure/IOFailure
by the command layer, keeping the original exception as `cause`.

Each failure knows its human-readable message; the caller decides how much
detail to show (just the message, or the message plus the cause chain).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FailureKind(Enum):
    """Error kinds a command can report."""

    NOT_A_DIRECTORY = "NotADirectory"
    NOT_A_FILE = "NotAFile"
    WRONG_EXTENSION = "WrongExtension"
    DUPLICATE_PATH = "DuplicatePath"
    DIRECTORY_INSTEAD_OF_FILE_LIST = "DirectoryInsteadOfFileList"
    PARSE_ERROR = "ParseError"
    IO_ERROR = "IOError"
    INVALID_FACTOR = "InvalidFactor"


@dataclass(frozen=True)
class Failure(ABC):
    """Abstract base class for command failures.

    Subclasses store the offending values and compute the message as a property.
    """

    @property
    @abstractmethod
    def kind(self) -> FailureKind:
        """Error kind."""
        raise NotImplementedError

    @property
    @abstractmethod
    def message(self) -> str:
        """One-line, human-readable description."""
        raise NotImplementedError

    @property
    def cause(self) -> BaseException | None:
        """Underlying exception, if any."""
        return None

    def describe(self, verbose: bool = False) -> str:
        """Format the failure for display.

        Args:
            verbose: Append the chain of underlying exceptions.
        """
        if not verbose:
            return self.message

        lines = [self.message]
        seen: set[int] = set()
        exc = self.cause
        while exc is not None and id(exc) not in seen:
            seen.add(id(exc))
            lines.append(f"  Caused by: {type(exc).__name__}: {exc}")
            exc = exc.__cause__ or exc.__context__
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.message


# =============================================================================
# VALIDATION FAILURES - detected before any transformation starts
# =============================================================================


@dataclass(frozen=True)
class NotADirectoryFailure(Failure):
    """Path does not exist or is not a directory."""

    path: Path

    @property
    def kind(self) -> FailureKind:
        return FailureKind.NOT_A_DIRECTORY

    @property
    def message(self) -> str:
        return f"'{self.path}' does not exist or is not a directory"


@dataclass(frozen=True)
class NotAFileFailure(Failure):
    """Path does not exist or is a directory."""

    path: Path

    @property
    def kind(self) -> FailureKind:
        return FailureKind.NOT_A_FILE

    @property
    def message(self) -> str:
        return f"'{self.path}' does not exist or is a directory"


@dataclass(frozen=True)
class WrongExtensionFailure(Failure):
    """File extension is not the expected one."""

    path: Path
    expected_extension: str

    @property
    def kind(self) -> FailureKind:
        return FailureKind.WRONG_EXTENSION

    @property
    def message(self) -> str:
        return (
            f"'{self.path}' does not appear to be a GPX file "
            f"(since its extension is not '.{self.expected_extension}')"
        )


@dataclass(frozen=True)
class DuplicatePathFailure(Failure):
    """The same file appears more than once in the input list."""

    path: Path

    @property
    def kind(self) -> FailureKind:
        return FailureKind.DUPLICATE_PATH

    @property
    def message(self) -> str:
        return f"There are duplicated files in the list ('{self.path}')"


@dataclass(frozen=True)
class DirectoryInsteadOfFileListFailure(Failure):
    """A single directory was passed where a list of files is expected."""

    path: Path

    @property
    def kind(self) -> FailureKind:
        return FailureKind.DIRECTORY_INSTEAD_OF_FILE_LIST

    @property
    def message(self) -> str:
        return (
            f"A list of files is expected but you have passed a single directory ('{self.path}'); "
            "use the '-all' variant of the command for directories"
        )


@dataclass(frozen=True)
class InvalidFactorFailure(Failure):
    """Decimation factor below 1."""

    factor: int

    @property
    def kind(self) -> FailureKind:
        return FailureKind.INVALID_FACTOR

    @property
    def message(self) -> str:
        return f"The decimation factor must be at least 1 (got {self.factor})"


# =============================================================================
# PROCESSING FAILURES - raised by the GPX library or the filesystem
# =============================================================================


@dataclass(frozen=True)
class ParseFailure(Failure):
    """A file could not be parsed as GPX."""

    path: Path
    error: BaseException = field(compare=False)

    @property
    def kind(self) -> FailureKind:
        return FailureKind.PARSE_ERROR

    @property
    def cause(self) -> BaseException:
        return self.error

    @property
    def message(self) -> str:
        return f"Cannot parse GPX from '{self.path}': {self.error}"


@dataclass(frozen=True)
class IOFailure(Failure):
    """A file or directory could not be read or written."""

    path: Path
    error: BaseException = field(compare=False)

    @property
    def kind(self) -> FailureKind:
        return FailureKind.IO_ERROR

    @property
    def cause(self) -> BaseException:
        return self.error

    @property
    def message(self) -> str:
        reason = getattr(self.error, "strerror", None) or str(self.error)
        return f"I/O error on '{self.path}': {reason}"
