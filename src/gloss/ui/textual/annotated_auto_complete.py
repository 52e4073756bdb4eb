"""Token-aware autocomplete overlay that shows annotated candidates.

Extends :class:`~textual_autocomplete.AutoComplete` so that:

* completions replace only the active token (the text between the last
  trigger and the cursor), not the whole input value;
* dropdown entries may carry an annotation after the candidate, while
  the value inserted on completion is always the bare candidate.
"""

from __future__ import annotations

from typing import Dict, Sequence

from textual_autocomplete import AutoComplete
from textual_autocomplete._autocomplete import TargetState
from textual_autocomplete.fuzzy_search import FuzzySearch

from gloss.context.keywords import Keywords


class TokenFuzzySearch(FuzzySearch):
    """Fuzzy search that bypasses query filtering.

    Candidates are already filtered by the completion provider, and the
    annotation text must never influence matching, so every candidate
    gets a perfect score.
    """

    def match(self, query: str, candidate: str) -> tuple[float, Sequence[int]]:
        """Return a perfect match score regardless of *query*."""
        return super().match(candidate, candidate)


class AnnotatedAutoComplete(AutoComplete):
    """AutoComplete that inserts bare candidates into the active token.

    Args:
        keywords: Trigger detection helper.
    """

    def __init__(self, *args, keywords: Keywords, **kwargs):
        super().__init__(*args, **kwargs)
        self._fuzzy_search = TokenFuzzySearch()
        self._keywords = keywords
        self._values: Dict[str, str] = {}

    def remember(self, displayed: str, value: str) -> None:
        """Record that the dropdown entry *displayed* stands for *value*."""
        self._values[displayed] = value

    def forget(self) -> None:
        self._values.clear()

    def value_for(self, displayed: str) -> str:
        """The value to insert for the dropdown entry *displayed*."""
        return self._values.get(displayed, displayed)

    def apply_completion(self, value: str, state: TargetState) -> None:
        """Replace the active token with the value behind the selected entry.

        Text before the trigger and after the cursor is left untouched and
        the cursor ends right after the inserted text.
        """
        input_widget = self.target
        text = state.text or ""
        cursor = state.cursor_position
        before = text[:cursor]
        after = text[cursor:]

        match = self._keywords.find_last_trigger(before)
        if not match.found:
            return

        token = match.token(before)
        if any(ch.isspace() for ch in token):
            return

        replacement = self.value_for(value)
        start = match.position + match.length
        input_widget.value = text[:start] + replacement + after
        input_widget.cursor_position = start + len(replacement)
