"""Trigger detection for the Textual selection input.

A trigger is a short prefix string (``@``, ``#``, ``:`` ...) that opens a
selection session when typed at the start of the input or after
whitespace.  The text between the trigger and the cursor is the session
input.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple, Optional


class TriggerMatch(NamedTuple):
    """Position of a trigger in the text left of the cursor.

    Attributes:
        position: Index of the trigger, ``-1`` when none was found.
        length: Length of the trigger string.
        trigger: The matched trigger, or ``None``.
    """

    position: int
    length: int
    trigger: Optional[str]

    @property
    def found(self) -> bool:
        return self.trigger is not None

    def token(self, before: str) -> str:
        """Text typed after the trigger."""
        return before[self.position + self.length:] if self.found else ""


NO_MATCH = TriggerMatch(-1, 0, None)


class Keywords:
    """Find triggers in an input line.

    Attributes:
        CONTINUE_CHARS: A completion ending with one of these keeps the
            session open (a directory, a namespace) instead of being
            followed by a space.
        VALID_TRIGGER_PREFIXES: Characters allowed right before a trigger.
    """

    CONTINUE_CHARS = ("/", ":", ".")

    VALID_TRIGGER_PREFIXES = {" ", "\t", "\n", "(", "[", "{", "<"}

    def __init__(self, triggers: Iterable[str]):
        # Longest first, so "::" wins over ":".
        self._triggers = sorted(triggers, key=len, reverse=True)

    @property
    def triggers(self) -> list:
        return list(self._triggers)

    def must_continue(self, txt: str) -> bool:
        """Return ``True`` if completing *txt* should keep the session open."""
        return str(txt).endswith(self.CONTINUE_CHARS)

    def find_last_trigger(self, before: str) -> TriggerMatch:
        """Find the rightmost valid trigger in *before*.

        A trigger only counts at the start of the text or after a
        character of :attr:`VALID_TRIGGER_PREFIXES` (or any whitespace).
        """
        best = NO_MATCH
        for t in self._triggers:
            pos = before.rfind(t)
            if pos == -1:
                continue
            if pos > 0:
                prev = before[pos - 1]
                if not (prev.isspace() or prev in self.VALID_TRIGGER_PREFIXES):
                    continue
            if pos > best.position:
                best = TriggerMatch(pos, len(t), t)
        return best
