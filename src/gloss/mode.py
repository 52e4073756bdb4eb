"""Process-wide on/off switch for annotations."""

from __future__ import annotations

import logging
from typing import Tuple

from gloss.engine import AnnotationEngine
from gloss.host import CompletionHost

logger = logging.getLogger(__name__)


class GlossMode:
    """Wire an :class:`AnnotationEngine` into a :class:`CompletionHost`.

    Enabling installs the engine's metadata handler and the session-start
    hook that records the invoking command; disabling removes both.
    Both operations are idempotent and leave session state alone.
    """

    def __init__(self, engine: AnnotationEngine, host: CompletionHost):
        self.engine = engine
        self.host = host
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        if self._enabled:
            return
        self.host.add_metadata_handler(self.engine.intercept)
        self.host.add_session_start_hook(self.engine.capture_command)
        self._enabled = True
        logger.info("Annotations enabled")

    def disable(self) -> None:
        if not self._enabled:
            return
        self.host.remove_metadata_handler(self.engine.intercept)
        self.host.remove_session_start_hook(self.engine.capture_command)
        self._enabled = False
        logger.info("Annotations disabled")

    def toggle_mode(self) -> bool:
        """Flip the mode and return the new state."""
        if self._enabled:
            self.disable()
        else:
            self.enable()
        return self._enabled

    def toggle_annotators(self) -> Tuple[str, ...]:
        """Rotate the annotator tables, for the active session if there is one."""
        return self.engine.toggle_annotators(self.host.session)
