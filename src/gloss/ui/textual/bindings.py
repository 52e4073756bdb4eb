"""Derive a key-binding source from Textual ``BINDINGS``."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from textual.binding import Binding

from gloss.sources.keys import KeyBindings

BindingEntry = Union[Binding, tuple]


def command_name(action: str) -> str:
    """Map a Textual action name to a command name: ``toggle_mode -> toggle-mode``."""
    return action.split("(", 1)[0].replace("_", "-")


def key_bindings_from(
    bindings: Iterable[BindingEntry],
    context: Optional[str] = None,
    keys: Optional[KeyBindings] = None,
) -> KeyBindings:
    """Register every binding of *bindings* as ``command -> key``.

    Args:
        bindings: A ``BINDINGS`` list: :class:`~textual.binding.Binding`
            objects or ``(key, action[, description])`` tuples.
        context: Keymap context to bind in; ``None`` binds globally.
        keys: Existing key bindings to extend.

    Returns:
        The extended (or a new) :class:`KeyBindings`.
    """
    keys = keys if keys is not None else KeyBindings()
    for entry in bindings:
        binding = entry if isinstance(entry, Binding) else Binding(*entry)
        keys.bind(command_name(binding.action), binding.key_display or binding.key, context)
    return keys
