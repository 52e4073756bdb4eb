"""File annotator."""

from __future__ import annotations

import time
from typing import Optional

from gloss.annotators.registry import AnnotatorContext
from gloss.candidate import resolve_full_candidate
from gloss.errors import MalformedCandidate
from gloss.layout import (
    DATE_STYLE,
    OWNER_STYLE,
    SIZE_STYLE,
    Annotation,
    Field,
    fields,
    file_mode,
    human_size,
)

TIME_FORMAT = "%b %d %H:%M"


def annotate_file(ctx: AnnotatorContext, cand: str) -> Optional[Annotation]:
    """Show permissions, ``uid:gid``, size and modification time of the file.

    The candidate is first resolved to its full path, since file
    completion usually displays a single path segment.
    """
    path = resolve_full_candidate(cand, ctx.session)
    if not path:
        raise MalformedCandidate("empty file name")
    st = ctx.sources.files.stat(path)
    return fields(
        [
            Field(file_mode(st.mode), width=10),
            Field(f"{st.uid}:{st.gid}", width=12, align="right", style=OWNER_STYLE),
            Field(human_size(st.size), width=7, align="right", style=SIZE_STYLE),
            Field(time.strftime(TIME_FORMAT, time.localtime(st.mtime)), width=12, style=DATE_STYLE),
        ],
        ctx.config.separator_width,
    )
