"""Key-binding lookup by command name."""

from __future__ import annotations

from typing import Dict, Mapping, Optional


class KeyBindings:
    """Command to key-description map, optionally scoped by keymap context.

    A context-specific binding shadows the global one, the same way a
    focused widget's bindings shadow the application's.

    Args:
        bindings: Global ``command -> key description`` map.
        contexts: ``context -> {command -> key description}`` maps.
    """

    def __init__(
        self,
        bindings: Optional[Mapping[str, str]] = None,
        contexts: Optional[Mapping[str, Mapping[str, str]]] = None,
    ):
        self._global: Dict[str, str] = dict(bindings or {})
        self._contexts: Dict[str, Dict[str, str]] = {
            name: dict(keys) for name, keys in (contexts or {}).items()
        }

    def bind(self, command: str, key: str, context: Optional[str] = None) -> None:
        """Bind *command* to *key*, globally or inside *context*."""
        if context is None:
            self._global[command] = key
        else:
            self._contexts.setdefault(context, {})[command] = key

    def key_for(self, command: str, context: Optional[str] = None) -> Optional[str]:
        """Return the key description bound to *command*, or ``None``."""
        if context is not None:
            key = self._contexts.get(context, {}).get(command)
            if key:
                return key
        return self._global.get(command)
