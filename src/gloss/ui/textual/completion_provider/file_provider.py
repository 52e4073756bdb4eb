"""Completion provider for file names, one path segment at a time."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from gloss.candidate import file_boundaries


class FileProvider:
    """Provide the entries of the directory being typed.

    Only the last path segment is offered (``"src/gl"`` offers ``"gloss/"``,
    not ``"src/gloss/"``), directories with a trailing slash.  The file
    annotator rebuilds the full path from the session input.

    Args:
        root: Directory relative paths are completed against.
        show_hidden: Offer dot-files even when the segment does not start
            with a dot.
    """

    icon = "📎 "
    command = "find-file"
    prompt = "Find file: "
    collection = None
    boundaries = staticmethod(file_boundaries)

    def __init__(self, root: Optional[Path] = None, show_hidden: bool = False):
        self.root = root or Path.cwd()
        self.show_hidden = show_hidden

    def __call__(self, prefix: str) -> List[str]:
        directory, _, segment = prefix.rpartition("/")
        base = Path(directory).expanduser() if directory else Path(".")
        if not base.is_absolute():
            base = self.root / base
        try:
            entries = sorted(base.iterdir(), key=lambda p: p.name)
        except OSError:
            return []

        items = []
        for entry in entries:
            name = entry.name
            if not name.startswith(segment):
                continue
            if name.startswith(".") and not (self.show_hidden or segment.startswith(".")):
                continue
            items.append(name + "/" if entry.is_dir() else name)
        return items
