"""Console (prompt_toolkit) selection with annotated completions.

The same completion providers the Textual input uses drive a
prompt_toolkit :class:`~prompt_toolkit.completion.Completer`.  While the
prompt is open a :class:`~gloss.context.session.SelectionSession` is
active on the host, and every completion carries the session's
annotation as its ``display_meta``.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from prompt_toolkit import prompt
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from gloss.context.session import SelectionSession
from gloss.host import CompletionHost


class AnnotatedCompleter(Completer):
    """Complete with *provider* and annotate through the host.

    Args:
        host: Completion host the session is registered on.
        provider: Completion provider (``provider(prefix) -> list[str]``
            plus its session description).
        session: The selection session the prompt belongs to.
    """

    def __init__(self, host: CompletionHost, provider: Any, session: SelectionSession):
        self.host = host
        self.provider = provider
        self.session = session

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        before = document.text_before_cursor
        self.session.update_input(document.text, document.cursor_position)
        start, _ = self.session.boundaries(before, document.text_after_cursor)
        field = before[start:]

        annotator = self.host.annotation_function(self.session)
        for candidate in self.provider(before):
            meta = ""
            if annotator is not None:
                annotation = annotator(candidate)
                if annotation is not None:
                    meta = str(annotation).strip()
            yield Completion(
                candidate,
                start_position=-len(field),
                display=candidate,
                display_meta=meta,
            )


def read_candidate(
    host: CompletionHost,
    provider: Any,
    keymap_context: Optional[str] = None,
    ask: Callable[..., str] = prompt,
) -> str:
    """Prompt for one candidate of *provider* in the terminal.

    The selection session is opened for the duration of the prompt and
    closed afterwards, also when the prompt is cancelled.

    Args:
        host: Completion host to open the session on.
        provider: Completion provider to read a candidate from.
        keymap_context: Key-binding context recorded on the session.
        ask: Prompt function; :func:`prompt_toolkit.prompt` by default.

    Returns:
        The text the user entered.
    """
    session = SelectionSession(
        prompt=provider.prompt,
        collection=provider.collection,
        boundaries=provider.boundaries,
        keymap_context=keymap_context,
    )
    with host.selecting(session, provider.command):
        return ask(provider.prompt, completer=AnnotatedCompleter(host, provider, session))
