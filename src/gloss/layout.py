"""Column layout helpers shared by every annotator.

Annotations are right-aligned against the viewport: an annotation made of
several fixed-width columns starts ``sum(column widths)`` cells from the
right edge, so that annotations line up across all visible candidates no
matter how long each candidate is.  Because the viewport can be resized
between renders, the alignment is stored as a relative
:class:`PaddingSpec` and only turned into concrete spaces by
:meth:`Annotation.render`.

Widths are terminal cells as measured by :func:`rich.cells.cell_len`.
"""

from __future__ import annotations

import re
import stat
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text

ELLIPSIS = "…"

KEY_STYLE = Style(bold=True)
DOCUMENTATION_STYLE = Style(italic=True, dim=True)
VALUE_STYLE = Style(color="cyan")
MODE_STYLE = Style(color="magenta")
FLAG_STYLE = Style(color="red")
FILE_NAME_STYLE = Style(dim=True)
SIZE_STYLE = Style(color="green")
OWNER_STYLE = Style(color="yellow")
DATE_STYLE = Style(color="blue")

_LINE_BREAK = re.compile(r"\r?\n")

StyleType = Union[str, Style, None]


def display_width(text: str) -> int:
    """Return the number of terminal cells *text* occupies."""
    return cell_len(text)


def _caret(ch: str) -> str:
    """Return the caret notation for a control character (``^A``, ``^?``)."""
    return "^" + chr(ord(ch) ^ 0x40)


def escape_controls(text: str) -> str:
    """Replace C0 control characters and DEL by their caret notation."""
    if not any(ord(ch) < 32 or ord(ch) == 127 for ch in text):
        return text
    return "".join(
        _caret(ch) if ord(ch) < 32 or ord(ch) == 127 else ch for ch in text
    )


def truncate(text: str, width: int) -> str:
    """Collapse *text* to its first line and fit it into *width* cells.

    Control characters are shown in caret notation and counted at their
    real width.  When the line does not fit, it is cut and a single
    :data:`ELLIPSIS` is appended; the result never exceeds *width* cells.

    Args:
        text: Arbitrary text, possibly multi-line.
        width: Maximum number of cells of the result.

    Returns:
        The first line of *text*, unchanged when it already fits.
    """
    line = escape_controls(_LINE_BREAK.split(text, 1)[0])
    if cell_len(line) <= width:
        return line
    if width <= 0:
        return ""

    budget = width - cell_len(ELLIPSIS)
    kept = []
    used = 0
    for ch in line:
        w = cell_len(ch)
        if used + w > budget:
            break
        kept.append(ch)
        used += w
    return "".join(kept) + ELLIPSIS


def pad(text: str, width: int, align: str = "left") -> str:
    """Pad *text* with spaces to exactly *width* cells (truncating if longer)."""
    text = truncate(text, width)
    filler = " " * (width - cell_len(text))
    return filler + text if align == "right" else text + filler


@dataclass(frozen=True)
class PaddingSpec:
    """Start the next character ``offset`` cells from the right edge.

    Only the relative offset is stored; the concrete number of spaces
    depends on the viewport width at render time.
    """

    offset: int

    def fill(self, column: int, viewport_width: int) -> str:
        """Return the filler for text currently ending at *column*.

        At least one space is always returned so the annotation never
        touches the candidate, even in a viewport that is too narrow.
        """
        return " " * max(1, viewport_width - self.offset - column)


def right_align(widths: Iterable[int]) -> PaddingSpec:
    """Return the padding that right-aligns columns of the given widths."""
    return PaddingSpec(sum(widths))


Part = Union[Text, PaddingSpec]


@dataclass(frozen=True)
class Annotation:
    """Decoration appended to a candidate for display only.

    An annotation is a sequence of styled text runs and alignment points.
    Alignment points stay relative until :meth:`render` knows the viewport.

    Attributes:
        parts: Text runs and :class:`PaddingSpec` alignment points.
    """

    parts: Tuple[Part, ...] = ()

    @classmethod
    def of(cls, *parts: Union[Part, str]) -> "Annotation":
        """Build an annotation, promoting plain strings to :class:`Text`."""
        return cls(tuple(Text(p) if isinstance(p, str) else p for p in parts))

    @property
    def text(self) -> Text:
        """All text runs joined, without alignment."""
        joined = Text()
        for part in self.parts:
            if isinstance(part, Text):
                joined.append_text(part)
        return joined

    @property
    def plain(self) -> str:
        """The text runs without styles or alignment."""
        return self.text.plain

    def render(self, column: int, viewport_width: int) -> Text:
        """Return the annotation laid out after a candidate ending at *column*.

        Args:
            column: Cell where the annotation starts, i.e. the display width
                of everything drawn before it on the same line.
            viewport_width: Current width of the viewport in cells.
        """
        rendered = Text()
        for part in self.parts:
            if isinstance(part, PaddingSpec):
                filler = part.fill(column, viewport_width)
                rendered.append(filler)
                column += len(filler)
            else:
                rendered.append_text(part)
                column += cell_len(part.plain)
        return rendered

    def __add__(self, other: "Annotation") -> "Annotation":
        return Annotation(self.parts + other.parts)

    def __str__(self) -> str:
        return "".join(" " if isinstance(p, PaddingSpec) else p.plain for p in self.parts)


@dataclass(frozen=True)
class Field:
    """One column of a multi-column annotation.

    Attributes:
        text: Column content.
        width: Fixed column width in cells; ``0`` sizes the column to its
            (possibly truncated) content.
        truncate: Cap applied to *text* before it is laid out; ``0`` for none.
        align: ``"left"`` or ``"right"`` justification inside *width*.
        style: Rich style of the column.
    """

    text: str
    width: int = 0
    truncate: int = 0
    align: str = "left"
    style: StyleType = None

    def render(self) -> str:
        text = truncate(self.text, self.truncate) if self.truncate else escape_controls(
            _LINE_BREAK.split(self.text, 1)[0]
        )
        if self.width:
            return pad(text, self.width, self.align)
        return text


def fields(columns: Sequence[Field], separator_width: int) -> Annotation:
    """Lay out *columns* separated by *separator_width* spaces, right-aligned.

    The padding is computed from the column widths (fixed width, else the
    truncation cap, else the rendered width), so every annotation built
    from the same list of fields starts at the same cell.
    """
    separator = " " * separator_width
    body = Text()
    widths = []
    for index, column in enumerate(columns):
        if index:
            body.append(separator)
            widths.append(separator_width)
        cell = column.render()
        body.append(cell, style=column.style)
        widths.append(column.width or column.truncate or cell_len(cell))
    return Annotation((right_align(widths), body))


def human_size(size: int) -> str:
    """Format a byte count with binary units: ``2048 -> "2.0K"``."""
    if size < 1024:
        return str(size)
    value = float(size)
    unit = ""
    for unit in ("K", "M", "G", "T", "P", "E", "Z", "Y"):
        value /= 1024
        if value < 1024:
            break
    # "9.96K" would print as "10.0K"
    if round(value, 1) < 10:
        return f"{value:.1f}{unit}"
    return f"{value:.0f}{unit}"


def file_mode(mode: int) -> str:
    """Return the ``ls -l`` permission string for a ``st_mode`` value."""
    return stat.filemode(mode)
