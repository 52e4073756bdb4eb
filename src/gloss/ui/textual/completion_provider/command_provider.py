"""Completion provider for commands (``M-x`` style)."""

from __future__ import annotations

from typing import Iterable, List

from gloss.candidate import no_boundaries


class CommandProvider:
    """Provide command names matching the typed prefix.

    Args:
        commands: Command names to offer.
    """

    icon = "⚡ "
    command = "execute-extended-command"
    prompt = "M-x "
    boundaries = staticmethod(no_boundaries)

    def __init__(self, commands: Iterable[str]):
        self.collection: List[str] = sorted(set(commands))

    def __call__(self, prefix: str) -> List[str]:
        return [cmd for cmd in self.collection if cmd.startswith(prefix)]
