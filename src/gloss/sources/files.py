"""File attribute lookup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from gloss.errors import MalformedCandidate, MissingMetadata


@dataclass(frozen=True)
class FileStat:
    """The subset of ``os.stat`` results the file annotator shows."""

    mode: int
    uid: int
    gid: int
    size: int
    mtime: float


class FileAttributes:
    """Stat files on the local file system.

    Relative paths are resolved against *root* (the working directory
    when ``None``).
    """

    def __init__(self, root: Optional[Path] = None):
        self.root = root

    def stat(self, path: str) -> FileStat:
        """Return the attributes of *path*.

        Raises:
            MissingMetadata: The file does not exist or cannot be stat'ed.
            MalformedCandidate: *path* names the home of an unknown user.
        """
        try:
            target = Path(path).expanduser()
        except RuntimeError as exc:
            raise MalformedCandidate(f"cannot expand {path}") from exc
        if self.root is not None and not target.is_absolute():
            target = self.root / target
        try:
            st = os.stat(target)
        except (OSError, ValueError) as exc:
            raise MissingMetadata(f"cannot stat {path}") from exc
        return FileStat(
            mode=st.st_mode,
            uid=st.st_uid,
            gid=st.st_gid,
            size=st.st_size,
            mtime=st.st_mtime,
        )
