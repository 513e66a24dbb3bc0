"""Action - The transformation applied to one or more GPX documents.

An Action is a single value type: a kind plus, for decimation only, the
factor. Its label is embedded in derived output filenames:

- INVERT   -> "inverted"
- MERGE    -> "merged"
- DECIMATE -> "decimated-by-<factor>"
"""

from dataclasses import dataclass
from enum import Enum

from mergemygpx.constants import NamingConfig


class ActionKind(Enum):
    """Kind of transformation."""

    INVERT = "invert"
    MERGE = "merge"
    DECIMATE = "decimate"


@dataclass(frozen=True)
class Action:
    """A transformation with its optional parameter.

    Attributes:
        kind: Which transformation
        factor: Decimation factor M (keep every M-th point), None for other kinds

    Example:
        action = Action.decimate(factor=5)
        action.label  # "decimated-by-5"
    """

    kind: ActionKind
    factor: int | None = None

    def __post_init__(self) -> None:
        """Validate that only decimation carries a factor."""
        if self.kind is ActionKind.DECIMATE and self.factor is None:
            raise ValueError("Decimate action requires a factor")
        if self.kind is not ActionKind.DECIMATE and self.factor is not None:
            raise ValueError(f"{self.kind.value} action does not take a factor")

    @classmethod
    def invert(cls) -> "Action":
        return cls(kind=ActionKind.INVERT)

    @classmethod
    def merge(cls) -> "Action":
        return cls(kind=ActionKind.MERGE)

    @classmethod
    def decimate(cls, factor: int) -> "Action":
        return cls(kind=ActionKind.DECIMATE, factor=factor)

    @property
    def label(self) -> str:
        """Fragment identifying the action in output filenames."""
        if self.kind is ActionKind.INVERT:
            return NamingConfig.INVERT_LABEL
        if self.kind is ActionKind.MERGE:
            return NamingConfig.MERGE_LABEL
        return f"{NamingConfig.DECIMATE_LABEL_PREFIX}{self.factor}"

    @property
    def track_suffix(self) -> str | None:
        """Suffix appended to named tracks, None when track names are untouched."""
        if self.kind is ActionKind.INVERT:
            return NamingConfig.INVERT_TRACK_SUFFIX
        if self.kind is ActionKind.DECIMATE:
            return NamingConfig.DECIMATE_TRACK_SUFFIX.format(factor=self.factor)
        return None

    def __str__(self) -> str:
        return self.label
