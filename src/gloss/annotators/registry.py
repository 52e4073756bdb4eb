"""Annotator registry and table lookup.

Annotators are registered under a name; tables map a category to an
annotator *name*.  Resolving names at lookup time keeps the category set
open: a third party adds a category by registering an annotator and
adding a table entry, without touching any built-in table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from gloss.config import GlossConfig
from gloss.layout import Annotation
from gloss.sources import Sources


@dataclass(frozen=True)
class AnnotatorContext:
    """Everything an annotator may read besides the candidate itself.

    Attributes:
        config: Widths and other layout settings.
        sources: Metadata sources.
        session: Active selection session, or ``None`` outside a session.
    """

    config: GlossConfig
    sources: Sources
    session: Any = None

    @property
    def keymap_context(self) -> Optional[str]:
        return getattr(self.session, "keymap_context", None)


AnnotatorFn = Callable[[AnnotatorContext, str], Optional[Annotation]]
Table = Mapping[str, str]


class AnnotatorRegistry:
    """Named annotator functions."""

    def __init__(self) -> None:
        self._annotators: Dict[str, AnnotatorFn] = {}

    def register(self, name: str, fn: AnnotatorFn) -> None:
        if name in self._annotators:
            raise ValueError(f"Annotator already registered: {name}")
        self._annotators[name] = fn

    def unregister(self, name: str) -> None:
        self._annotators.pop(name, None)

    def get(self, name: str) -> AnnotatorFn:
        if name not in self._annotators:
            raise KeyError(f"Annotator not found: {name}")
        return self._annotators[name]

    def names(self) -> List[str]:
        return sorted(self._annotators.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._annotators

    def lookup(self, table: Table, category: Optional[str]) -> Optional[AnnotatorFn]:
        """Return the annotator *table* assigns to *category*.

        A category missing from the table, or mapped to an annotator name
        nobody registered, yields ``None``: the candidate is simply not
        annotated.
        """
        if category is None:
            return None
        name = table.get(category)
        if name is None:
            return None
        return self._annotators.get(name)


def active_table(ring: Sequence[str], tables: Mapping[str, Table]) -> Table:
    """Return the table at the head of *ring*.

    Raises:
        KeyError: The head of the ring names no known table.
    """
    if not ring:
        raise KeyError("Annotator ring is empty")
    name = ring[0]
    if name not in tables:
        raise KeyError(f"Annotator table not found: {name}")
    return tables[name]


def rotate(ring: Sequence[str]) -> tuple:
    """Return *ring* rotated by one: the head moves to the end."""
    ring = tuple(ring)
    return ring[1:] + ring[:1]
