"""Selection input widget with trigger-based, annotated autocomplete.

Wraps a Textual :class:`~textual.widgets.Input` with an
:class:`~gloss.ui.textual.annotated_auto_complete.AnnotatedAutoComplete`
overlay.  Each trigger (``@``, ``#``, ``:`` ...) is mapped to a completion
provider.  Typing a trigger opens a
:class:`~gloss.context.session.SelectionSession` on the
:class:`~gloss.host.CompletionHost`; the host's ``annotation-function``
decorates every candidate before it reaches the dropdown.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from rich.cells import cell_len
from rich.text import Text
from textual.content import Content
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Input
from textual_autocomplete import DropdownItem
from textual_autocomplete._autocomplete import TargetState

from gloss.candidate import resolve_full_candidate
from gloss.context.keywords import Keywords
from gloss.context.session import SelectionSession
from gloss.host import CompletionHost
from gloss.ui.textual.annotated_auto_complete import AnnotatedAutoComplete

DEFAULT_ANNOTATION_WIDTH = 100


class SelectionInput(Widget):
    """Text input whose trigger tokens open annotated selection sessions.

    Args:
        host: Completion host the sessions are opened on.
        providers: Mapping from trigger strings to completion providers.
        keymap_context: Key-binding context recorded on every session.
        placeholder: Placeholder text shown when the input is empty.
        id: Optional widget identifier.
    """

    DEFAULT_CSS = """
    SelectionInput {
        height: auto;
    }

    #selection_input {
        border: round $accent;
        padding: 0 1;
    }
    """

    value: reactive[str] = reactive("")

    def __init__(
        self,
        *,
        host: CompletionHost,
        providers: Dict[str, Any],
        keymap_context: Optional[str] = None,
        placeholder: str = "Type @file, #buffer, :command…",
        id: Optional[str] = None,
    ):
        super().__init__(id=id)
        self.host = host
        self.providers = providers
        self.keywords = Keywords(providers.keys())
        self.keymap_context = keymap_context
        self.placeholder = placeholder
        self._session: Optional[SelectionSession] = None
        self._session_trigger: Optional[tuple] = None

    # ─────────────────────────────────────
    # UI
    # ─────────────────────────────────────

    def compose(self):
        """Build the widget tree: an Input and an AnnotatedAutoComplete overlay."""
        self._input = Input(placeholder=self.placeholder, id="selection_input")
        self._autocomplete = AnnotatedAutoComplete(
            keywords=self.keywords,
            target=self._input,
            candidates=self._candidates,
        )
        yield self._input
        yield self._autocomplete

    def on_mount(self) -> None:
        self._input.focus()

    def on_unmount(self) -> None:
        self._end_session()

    @property
    def session(self) -> Optional[SelectionSession]:
        """Session of the trigger token being typed, if any."""
        return self._session

    @property
    def annotation_width(self) -> int:
        """Width annotations are right-aligned against."""
        return self.size.width or DEFAULT_ANNOTATION_WIDTH

    # ─────────────────────────────────────
    # sessions
    # ─────────────────────────────────────

    def _begin_session(self, provider: Any, key: tuple) -> SelectionSession:
        if self._session is not None and self._session_trigger == key:
            return self._session
        self._end_session()
        session = SelectionSession(
            prompt=provider.prompt,
            collection=provider.collection,
            boundaries=provider.boundaries,
            keymap_context=self.keymap_context,
        )
        self._session = self.host.open_session(session, provider.command)
        self._session_trigger = key
        return session

    def _end_session(self) -> None:
        if self._session is not None:
            self.host.close_session(self._session)
        self._session = None
        self._session_trigger = None

    # ─────────────────────────────────────
    # Autocomplete core
    # ─────────────────────────────────────

    def _candidates(self, state: TargetState) -> List[DropdownItem]:
        """Return annotated suggestions for the current input state.

        Locates the last trigger before the cursor, keeps (or opens) the
        selection session for it, asks the provider for candidates and
        decorates them with the session's annotation function.
        """
        text = state.text or ""
        before = text[: state.cursor_position]

        match = self.keywords.find_last_trigger(before)
        if not match.found:
            self._end_session()
            return []

        token = match.token(before)
        if any(ch.isspace() for ch in token):
            self._end_session()
            return []

        provider = self.providers[match.trigger]
        session = self._begin_session(provider, (match.position, match.trigger))
        session.update_input(token)

        annotator = self.host.annotation_function(session)
        prefix = getattr(provider, "icon", None)
        width = self.annotation_width
        self._autocomplete.forget()

        items = []
        for candidate in provider(token):
            main = Text(candidate)
            if annotator is not None:
                annotation = annotator(candidate)
                if annotation is not None:
                    column = cell_len(prefix or "") + cell_len(candidate)
                    main.append_text(annotation.render(column, width))
            value = resolve_full_candidate(candidate, session)
            if not self.keywords.must_continue(value):
                value += " "
            self._autocomplete.remember(main.plain, value)
            items.append(DropdownItem(main=Content.from_rich_text(main), prefix=prefix))
        return items

    # ─────────────────────────────────────
    # Submit / Events
    # ─────────────────────────────────────

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter: post a :class:`Submitted` message and clear the input."""
        if event.input is not self._input:
            return
        text = event.value or ""
        if not text:
            return

        self._end_session()
        self.value = text
        self.post_message(self.Submitted(text))
        self._input.value = ""

    class Submitted(Message):
        """Message posted when the user submits text via Enter.

        Attributes:
            value: The submitted text.
        """

        def __init__(self, value: str):
            super().__init__()
            self.value = value
