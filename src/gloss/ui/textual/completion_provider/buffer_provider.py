"""Completion provider for open buffers."""

from __future__ import annotations

from typing import List

from gloss.candidate import no_boundaries
from gloss.sources.buffers import BufferList


class BufferProvider:
    """Provide the names of open buffers matching the typed prefix.

    Matching is case-insensitive.
    """

    icon = "▤ "
    command = "switch-to-buffer"
    prompt = "Switch to buffer: "
    boundaries = staticmethod(no_boundaries)

    def __init__(self, buffers: BufferList):
        self._buffers = buffers

    @property
    def collection(self) -> List[str]:
        return self._buffers.names()

    def __call__(self, prefix: str) -> List[str]:
        wanted = prefix.lower()
        return [name for name in self._buffers.names() if name.lower().startswith(wanted)]
