"""Completion provider for symbols of a symbol table."""

from __future__ import annotations

from typing import List, Optional

from gloss.candidate import no_boundaries
from gloss.sources.symbols import SymbolTable


class SymbolProvider:
    """Provide symbol names matching the typed prefix.

    The same provider serves ``describe-variable``, ``describe-face`` or a
    generic symbol lookup; the *prompt* and *command* it is built with
    decide how the session gets classified.

    Args:
        symbols: Symbol table to complete from.
        command: Command the session is attributed to.
        prompt: Prompt of the session.
        kind: Restrict to ``"variable"``, ``"face"``, ``"function"`` or
            ``"group"`` names; ``None`` completes over the whole table.
    """

    icon = "λ "
    boundaries = staticmethod(no_boundaries)

    def __init__(
        self,
        symbols: SymbolTable,
        command: str = "describe-symbol",
        prompt: str = "Describe symbol: ",
        kind: Optional[str] = None,
    ):
        self._symbols = symbols
        self.command = command
        self.prompt = prompt
        self.kind = kind

    @property
    def collection(self):
        """The symbol table itself, or the names of the selected kind."""
        if self.kind is None:
            return self._symbols
        return self._names()

    def _names(self) -> List[str]:
        if self.kind is None:
            return list(self._symbols)
        return [name for name in self._symbols if self.kind in self._symbols.kinds(name)]

    def __call__(self, prefix: str) -> List[str]:
        return [name for name in self._names() if name.startswith(prefix)]
