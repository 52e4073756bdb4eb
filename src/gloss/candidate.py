"""Recover the full value behind a displayed candidate.

Some selection surfaces only display a fragment of the real value, e.g.
the last path segment during incremental file completion.  Annotators
that need the real value (the file annotator needs a path it can stat)
call :func:`resolve_full_candidate`.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

Boundaries = Callable[[str, str], Tuple[int, int]]
"""``boundaries(before, after) -> (start, end)``.

*before* is the input text left of point and *after* the text right of
it.  *start* is the index in *before* where the completed field begins;
*end* is the length of the field's tail inside *after*.
"""


class Candidate(str):
    """A candidate string with an optional fully-qualified value attached.

    Selection-surface adapters that already know the full value populate
    :attr:`full`; it never takes part in comparisons or display.
    """

    full: Optional[str]

    def __new__(cls, text: str, full: Optional[str] = None):
        obj = super().__new__(cls, text)
        obj.full = full
        return obj


def no_boundaries(before: str, after: str) -> Tuple[int, int]:
    """The whole input is the field."""
    return 0, len(after)


def file_boundaries(before: str, after: str) -> Tuple[int, int]:
    """The field is the path segment around point."""
    start = before.rfind("/") + 1
    end = after.find("/")
    return start, len(after) if end == -1 else end


def resolve_full_candidate(displayed: str, session=None) -> str:
    """Return the fully-qualified value of the displayed candidate.

    Resolution order:

    1. the ``full`` side-channel of a :class:`Candidate`;
    2. the session input, with the fragment spliced over the field that
       the session's boundary function reports around point;
    3. *displayed* itself.

    Args:
        displayed: Candidate text as shown by the surface.
        session: Active :class:`~gloss.context.session.SelectionSession`,
            or ``None`` outside a session.
    """
    full = getattr(displayed, "full", None)
    if full:
        return full
    if session is None:
        return str(displayed)

    contents = session.contents
    point = min(max(session.point, 0), len(contents))
    before, after = contents[:point], contents[point:]
    start, end = session.boundaries(before, after)
    return contents[:start] + str(displayed) + contents[point + end:]
