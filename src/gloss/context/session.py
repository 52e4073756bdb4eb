"""Per-session state of one selection session.

A session lives from the moment the host opens a selection prompt until
it closes it.  Everything the classifiers read and everything the engine
memoizes for the duration of the session is kept here, so that nothing
leaks into the next session.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from gloss.candidate import Boundaries, no_boundaries


def _new_session_id() -> str:
    """Generate a new UUID-4 string for use as a session identifier."""
    return str(uuid.uuid4())


@dataclass
class SelectionSession:
    """State of an in-progress selection session.

    Attributes:
        prompt: Prompt text shown to the user, e.g. ``"Find file: "``.
        collection: Completion source the host completes against (a list
            of strings, a :class:`~gloss.sources.symbols.SymbolTable`, a
            callable, ...).  Only inspected, never iterated by gloss.
        metadata: The host's own completion metadata (``category``,
            ``annotation-function``, ...).
        contents: Current input text.
        point: Cursor position inside *contents*; ``None`` means the end.
        boundaries: Completion-boundary function for *contents*.
        origin_buffer: Buffer the session was started from, if any.
        keymap_context: Key-binding context used for binding lookups.
        command: Invoking command, captured when the session starts.
        origin_category: Category the host metadata reported, captured
            before the engine's own classification overwrote it.
        category: Category resolved by the classifier chain (memoized).
        classified: Whether the classifier chain already ran.
        annotator_ring: Session-local table ring set by a toggle.
        classifiers: Session-local classifier order.
        id: Unique session identifier.
    """

    prompt: str = ""
    collection: Any = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    contents: str = ""
    point: Optional[int] = None
    boundaries: Boundaries = no_boundaries
    origin_buffer: Any = None
    keymap_context: Optional[str] = None
    command: Optional[str] = None
    origin_category: Optional[str] = None
    category: Optional[str] = None
    classified: bool = False
    annotator_ring: Optional[Tuple[str, ...]] = None
    classifiers: Optional[Tuple[str, ...]] = None
    id: str = field(default_factory=_new_session_id)

    def __post_init__(self) -> None:
        if self.point is None:
            self.point = len(self.contents)

    def update_input(self, contents: str, point: Optional[int] = None) -> None:
        """Record a new input text, e.g. after a keystroke."""
        self.contents = contents
        self.point = len(contents) if point is None else point
