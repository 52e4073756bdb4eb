"""Live buffer lookup by display name.

A buffer is any named, open editing session the host keeps around: an
editor tab, a notebook, a REPL.  gloss only needs its flags, its mode
and the file backing it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from gloss.errors import MissingMetadata


@dataclass
class Buffer:
    """An open buffer.

    Attributes:
        name: Unique display name.
        mode: Major-mode tag, e.g. ``"python-mode"``.
        mode_name: Human-readable mode name; defaults to *mode*.
        parent_modes: Modes *mode* derives from.
        file: Backing file path, or ``None``.
        modified: Whether the buffer has unsaved changes.
        read_only: Whether the buffer is read-only.
    """

    name: str
    mode: str = "fundamental-mode"
    mode_name: str = ""
    parent_modes: Tuple[str, ...] = ()
    file: Optional[str] = None
    modified: bool = False
    read_only: bool = False

    def __post_init__(self) -> None:
        if not self.mode_name:
            self.mode_name = self.mode

    def derived_mode_p(self, modes: Iterable[str]) -> bool:
        """Return ``True`` when the buffer's mode is or derives from one of *modes*."""
        wanted = set(modes)
        return self.mode in wanted or any(m in wanted for m in self.parent_modes)


class BufferList:
    """Registry of open buffers, in creation order."""

    def __init__(self, buffers: Iterable[Buffer] = ()):
        self._buffers: Dict[str, Buffer] = {}
        for buffer in buffers:
            self.add(buffer)

    def add(self, buffer: Buffer) -> None:
        self._buffers[buffer.name] = buffer

    def remove(self, name: str) -> None:
        self._buffers.pop(name, None)

    def get(self, name: str) -> Buffer:
        """Return the buffer called *name*.

        Raises:
            MissingMetadata: No such buffer is open.
        """
        try:
            return self._buffers[name]
        except KeyError:
            raise MissingMetadata(f"no buffer named {name}") from None

    def names(self) -> List[str]:
        return list(self._buffers)
