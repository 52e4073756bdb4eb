"""Extension points a completion host exposes to gloss.

:class:`CompletionHost` is the seam between a selection UI and the
annotation engine.  It owns the active selection sessions and answers
metadata queries (``category``, ``annotation-function``, ...) about them.
Other components extend it without replacing it:

* metadata handlers wrap :meth:`CompletionHost.metadata_get`; each one
  either answers a query or hands it on to the next handler, the last
  link being the host's own metadata;
* session hooks run when a session starts or ends.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional

from gloss.context.session import SelectionSession

logger = logging.getLogger(__name__)

CATEGORY = "category"
ANNOTATION_FUNCTION = "annotation-function"

Proceed = Callable[..., Any]
"""``proceed(prop=None)``: ask the rest of the chain, for *prop* or the same property."""

MetadataHandler = Callable[[SelectionSession, str, Proceed], Any]
SessionHook = Callable[[SelectionSession, Optional[str]], None]


class CompletionHost:
    """Session bookkeeping and metadata queries of a selection UI.

    Sessions nest: opening a session while another is active pushes it,
    closing it returns to the outer one.
    """

    def __init__(self) -> None:
        self._metadata_handlers: List[MetadataHandler] = []
        self._start_hooks: List[SessionHook] = []
        self._end_hooks: List[Callable[[SelectionSession], None]] = []
        self._sessions: List[SelectionSession] = []

    # ─────────────────────────────────────
    # extension points
    # ─────────────────────────────────────

    def add_metadata_handler(self, handler: MetadataHandler) -> None:
        if handler not in self._metadata_handlers:
            self._metadata_handlers.append(handler)

    def remove_metadata_handler(self, handler: MetadataHandler) -> None:
        if handler in self._metadata_handlers:
            self._metadata_handlers.remove(handler)

    def add_session_start_hook(self, hook: SessionHook) -> None:
        if hook not in self._start_hooks:
            self._start_hooks.append(hook)

    def remove_session_start_hook(self, hook: SessionHook) -> None:
        if hook in self._start_hooks:
            self._start_hooks.remove(hook)

    def add_session_end_hook(self, hook: Callable[[SelectionSession], None]) -> None:
        if hook not in self._end_hooks:
            self._end_hooks.append(hook)

    def remove_session_end_hook(self, hook: Callable[[SelectionSession], None]) -> None:
        if hook in self._end_hooks:
            self._end_hooks.remove(hook)

    # ─────────────────────────────────────
    # metadata
    # ─────────────────────────────────────

    def own_metadata(self, session: SelectionSession, prop: str) -> Any:
        """The host's own answer, before any handler."""
        return session.metadata.get(prop)

    def metadata_get(self, session: SelectionSession, prop: str) -> Any:
        """Return property *prop* of the session's completion metadata.

        Handlers run in registration order; each may answer or call
        ``proceed()`` to fall through.
        """
        return self._dispatch(0, session, prop)

    def _dispatch(self, index: int, session: SelectionSession, prop: str) -> Any:
        if index >= len(self._metadata_handlers):
            return self.own_metadata(session, prop)
        handler = self._metadata_handlers[index]

        def proceed(other: Optional[str] = None) -> Any:
            return self._dispatch(index + 1, session, other or prop)

        return handler(session, prop, proceed)

    def annotation_function(self, session: Optional[SelectionSession] = None):
        """Shortcut for the ``annotation-function`` of *session* (default: active)."""
        session = session or self.session
        if session is None:
            return None
        return self.metadata_get(session, ANNOTATION_FUNCTION)

    # ─────────────────────────────────────
    # session lifecycle
    # ─────────────────────────────────────

    @property
    def session(self) -> Optional[SelectionSession]:
        """Innermost active session, or ``None``."""
        return self._sessions[-1] if self._sessions else None

    def open_session(self, session: SelectionSession, command: Optional[str] = None) -> SelectionSession:
        """Activate *session*, opened by *command*, and run the start hooks."""
        self._sessions.append(session)
        logger.debug("Session %s opened by %s", session.id, command)
        for hook in list(self._start_hooks):
            hook(session, command)
        return session

    def close_session(self, session: Optional[SelectionSession] = None) -> None:
        """Deactivate *session* (default: the innermost) and run the end hooks."""
        session = session or self.session
        if session is None or session not in self._sessions:
            return
        self._sessions.remove(session)
        logger.debug("Session %s closed", session.id)
        for hook in list(self._end_hooks):
            hook(session)

    @contextmanager
    def selecting(self, session: SelectionSession, command: Optional[str] = None) -> Iterator[SelectionSession]:
        """Context manager that opens *session* and always closes it."""
        self.open_session(session, command)
        try:
            yield session
        finally:
            self.close_session(session)
