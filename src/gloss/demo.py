"""Sample metadata and providers used by the ``gloss`` commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from rich.style import Style

from gloss.sources import Buffer, BufferList, FileAttributes, KeyBindings, Sources, SymbolTable
from gloss.sources.symbols import FACE, VARIABLE
from gloss.ui.textual.completion_provider import (
    BufferProvider,
    CommandProvider,
    FileProvider,
    SymbolProvider,
)


def find_file():
    """Visit a file in a buffer, creating it when it does not exist."""


def switch_to_buffer():
    """Display an open buffer in the selected window."""


def describe_variable():
    """Display the full documentation and the value of a variable."""


def describe_face():
    """Display the properties of a face, with a sample text."""


def execute_extended_command():
    """Read a command name and call it interactively."""


def toggle_annotators():
    """Cycle through the annotator tables: heavy, then light."""


def toggle_mode():
    """Turn candidate annotations on or off."""


def quit_():
    """Leave the application."""


def demo_symbols() -> SymbolTable:
    symbols = SymbolTable()
    for name, fn in (
        ("find-file", find_file),
        ("switch-to-buffer", switch_to_buffer),
        ("describe-variable", describe_variable),
        ("describe-face", describe_face),
        ("execute-extended-command", execute_extended_command),
        ("toggle-annotators", toggle_annotators),
        ("toggle-mode", toggle_mode),
        ("quit", quit_),
    ):
        symbols.defun(name, fn)

    symbols.defvar("case-fold-search", True, "Whether searches and matches should ignore case.")
    symbols.defvar("fill-column", 70, "Column beyond which automatic line-wrapping should happen.")
    symbols.defvar("user-full-name", "Ada Lovelace", "The full name of the user logged in.")
    symbols.defvar("kill-ring", ["first", "second"], "List of killed text sequences.")
    symbols.defvar("unset-option", doc="An option nobody has set yet.")

    symbols.defface("bold", Style(bold=True), "Basic bold face.")
    symbols.defface("italic", Style(italic=True), "Basic italic face.")
    symbols.defface("error", Style(color="red", bold=True), "Face used to highlight errors.")
    symbols.defface("link", Style(color="blue", underline=True), "Basic face for unvisited links.")

    symbols.defgroup("editing", "Basic text editing facilities.")
    symbols.defgroup("files", "Support for editing files.")
    return symbols


def demo_buffers(root: Path) -> BufferList:
    return BufferList(
        [
            Buffer("*scratch*", mode="lisp-interaction-mode", mode_name="Lisp Interaction",
                   parent_modes=("emacs-lisp-mode",)),
            Buffer("README.md", mode="markdown-mode", mode_name="Markdown",
                   file=str(root / "README.md"), modified=True),
            Buffer("config.py", mode="python-mode", mode_name="Python",
                   file=str(root / "src" / "gloss" / "config.py")),
            Buffer("*Messages*", mode="messages-buffer-mode", mode_name="Messages", read_only=True),
        ]
    )


def demo_sources(root: Optional[Path] = None, keys: Optional[KeyBindings] = None) -> Sources:
    """Build sources with sample symbols and buffers, and real files under *root*."""
    root = root or Path.cwd()
    return Sources(
        keys=keys or KeyBindings(),
        symbols=demo_symbols(),
        files=FileAttributes(root),
        buffers=demo_buffers(root),
    )


def demo_providers(sources: Sources, root: Optional[Path] = None) -> Dict[str, Any]:
    """Completion providers over *sources*, by the kind of thing they complete."""
    symbols = sources.symbols
    return {
        "file": FileProvider(root),
        "buffer": BufferProvider(sources.buffers),
        "command": CommandProvider(symbols.functions),
        "variable": SymbolProvider(symbols, "describe-variable", "Describe variable: ", kind=VARIABLE),
        "face": SymbolProvider(symbols, "describe-face", "Describe face: ", kind=FACE),
        "symbol": SymbolProvider(symbols),
    }
