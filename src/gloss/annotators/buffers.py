"""Buffer annotator."""

from __future__ import annotations

import os
from typing import Optional

from gloss.annotators.registry import AnnotatorContext
from gloss.layout import FILE_NAME_STYLE, FLAG_STYLE, MODE_STYLE, Annotation, Field, fields


def abbreviate_file_name(path: str) -> str:
    """Replace the home directory prefix of *path* by ``~``."""
    home = os.path.expanduser("~")
    if home and home != "~" and (path == home or path.startswith(home.rstrip("/") + "/")):
        return "~" + path[len(home.rstrip("/")):]
    return path


def annotate_buffer(ctx: AnnotatorContext, cand: str) -> Optional[Annotation]:
    """Show modified/read-only flags, the mode name and the backing file."""
    buffer = ctx.sources.buffers.get(cand)
    cfg = ctx.config
    flags = ("*" if buffer.modified else " ") + ("%" if buffer.read_only else " ")
    path = abbreviate_file_name(buffer.file) if buffer.file else ""
    return fields(
        [
            Field(flags, style=FLAG_STYLE),
            Field(buffer.mode_name, width=cfg.mode_width, style=MODE_STYLE),
            Field(path, truncate=cfg.file_name_width, style=FILE_NAME_STYLE),
        ],
        cfg.separator_width,
    )
