"""Symbol table: functions, variables, faces and customization groups.

The symbol table is the documentation store behind the symbol, variable,
face, command and customize-group annotators.  Function documentation is
read from the registered callable with :func:`inspect.getdoc`; the other
kinds carry their documentation explicitly.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

from rich.style import Style

from gloss.errors import MissingMetadata

FUNCTION = "function"
VARIABLE = "variable"
FACE = "face"
GROUP = "group"


class Symbol(str):
    """A symbolic name, as opposed to arbitrary candidate text.

    A completion collection whose first element is a :class:`Symbol` is
    taken to be a list of symbols.
    """


class _SymbolCompletionTable:
    """Marker collection for "complete over every known symbol"."""

    def __repr__(self) -> str:
        return "SYMBOL_COMPLETION_TABLE"


SYMBOL_COMPLETION_TABLE = _SymbolCompletionTable()


class _Unbound:
    def __repr__(self) -> str:
        return "<unbound>"


UNBOUND = _Unbound()


@dataclass
class Variable:
    """A named variable with its current value and documentation."""

    value: Any = UNBOUND
    doc: Optional[str] = None

    @property
    def bound(self) -> bool:
        return self.value is not UNBOUND


@dataclass
class Face:
    """A named display style with its documentation."""

    style: Style
    doc: Optional[str] = None


class SymbolTable:
    """Named functions, variables, faces and groups.

    The same name may be registered in several kinds at once, e.g. a
    command that also has a variable of the same name.
    """

    def __init__(self) -> None:
        self.functions: Dict[str, Callable[..., Any]] = {}
        self.variables: Dict[str, Variable] = {}
        self.faces: Dict[str, Face] = {}
        self.groups: Dict[str, str] = {}

    # ─────────────────────────────────────
    # registration
    # ─────────────────────────────────────

    def defun(self, name: str, fn: Callable[..., Any]) -> Callable[..., Any]:
        self.functions[name] = fn
        return fn

    def defvar(self, name: str, value: Any = UNBOUND, doc: Optional[str] = None) -> None:
        self.variables[name] = Variable(value, doc)

    def defface(self, name: str, style: Style, doc: Optional[str] = None) -> None:
        self.faces[name] = Face(style, doc)

    def defgroup(self, name: str, doc: str) -> None:
        self.groups[name] = doc

    def setq(self, name: str, value: Any) -> None:
        """Set the value of variable *name*, defining it when needed."""
        if name in self.variables:
            self.variables[name].value = value
        else:
            self.variables[name] = Variable(value)

    # ─────────────────────────────────────
    # lookup
    # ─────────────────────────────────────

    def variable(self, name: str) -> Variable:
        try:
            return self.variables[name]
        except KeyError:
            raise MissingMetadata(f"no variable {name}") from None

    def face(self, name: str) -> Face:
        try:
            return self.faces[name]
        except KeyError:
            raise MissingMetadata(f"no face {name}") from None

    def documentation(self, name: str, kind: str) -> str:
        """Return the documentation of *name* as a *kind* symbol.

        Args:
            name: Symbol name.
            kind: One of :data:`FUNCTION`, :data:`VARIABLE`, :data:`FACE`,
                :data:`GROUP`.

        Raises:
            MissingMetadata: The symbol is not defined as *kind* or has no
                documentation.
        """
        doc: Optional[str] = None
        if kind == FUNCTION and name in self.functions:
            doc = inspect.getdoc(self.functions[name])
        elif kind == VARIABLE and name in self.variables:
            doc = self.variables[name].doc
        elif kind == FACE and name in self.faces:
            doc = self.faces[name].doc
        elif kind == GROUP:
            doc = self.groups.get(name)
        if not doc:
            raise MissingMetadata(f"no {kind} documentation for {name}")
        return doc

    def kinds(self, name: str) -> List[str]:
        """Return the kinds *name* is defined as, in documentation priority."""
        found = []
        if name in self.functions:
            found.append(FUNCTION)
        if name in self.faces:
            found.append(FACE)
        if name in self.variables:
            found.append(VARIABLE)
        if name in self.groups:
            found.append(GROUP)
        return found

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(self.kinds(name))

    def __iter__(self) -> Iterator[str]:
        names = set(self.functions) | set(self.variables) | set(self.faces) | set(self.groups)
        return iter(sorted(names))
