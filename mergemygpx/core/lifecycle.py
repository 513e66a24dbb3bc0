"""Lifecycle of one output document.

Uses python-statemachine so that a document is transformed exactly once
between loading and saving:

    PENDING -> LOADED -> TRANSFORMED -> SAVED

Transitions:
    PENDING -> LOADED: load (first input document)
    LOADED -> LOADED: load (further inputs, merge only)
    LOADED -> TRANSFORMED: transform (applies the job's action)
    TRANSFORMED -> SAVED: save (after the file has been written)

Any other sequence (transforming twice, saving before transforming, loading a
second document for invert/decimate) raises TransitionNotAllowed.

File I/O is done by the caller between events; the machine only owns the
in-memory documents of its job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from gpxpy.gpx import GPX
from statemachine import State, StateMachine

from mergemygpx.core import transforms
from mergemygpx.model.action import Action, ActionKind

logger = logging.getLogger(__name__)


@dataclass
class JobContext:
    """Documents and paths of one job.

    Attributes:
        action: Transformation to apply
        output_path: Where the result is written
        inputs: Paths of the loaded documents, in load order
        documents: Loaded documents, in load order
        result: Transformed document, set by the transform event
    """

    action: Action
    output_path: Path
    inputs: list[Path] = field(default_factory=list)
    documents: list[GPX] = field(default_factory=list)
    result: GPX | None = None


class DocumentJob(StateMachine):
    """Load -> transform -> save workflow for one output file."""

    pending = State("Pending", initial=True)
    loaded = State("Loaded")
    transformed = State("Transformed")
    saved = State("Saved", final=True)

    load = pending.to(loaded) | loaded.to(loaded, cond="accepts_more_inputs")
    transform = loaded.to(transformed)
    save = transformed.to(saved)

    def __init__(self, context: JobContext) -> None:
        super().__init__(model=context)

    @property
    def context(self) -> JobContext:
        """Alias for model."""
        return self.model

    # ==========================================================================
    # Guards
    # ==========================================================================

    def accepts_more_inputs(self) -> bool:
        """Guard: only merge combines several documents into one output."""
        return self.context.action.kind is ActionKind.MERGE

    # ==========================================================================
    # Actions
    # ==========================================================================

    def on_load(self, path: Path, document: GPX) -> None:
        self.context.inputs.append(Path(path))
        self.context.documents.append(document)

    def on_transform(self) -> None:
        ctx = self.context
        kind = ctx.action.kind

        if kind is ActionKind.MERGE:
            ctx.result = transforms.merge(ctx.documents)
        elif kind is ActionKind.INVERT:
            ctx.result = transforms.invert(ctx.documents[0])
        else:
            ctx.result = transforms.decimate(ctx.documents[0], factor=ctx.action.factor)

    def on_enter_saved(self) -> None:
        # Release the documents; nothing is cached across jobs
        self.context.documents.clear()
        logger.debug(f"Job '{self.context.action}' saved to '{self.context.output_path}'")

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.debug(f"Job '{self.context.action}': {source.id} -> {target.id} ({event})")
