"""Package registries: installed, built-in and available packages.

The package annotator asks each registry in priority order for a one-line
summary and shows the first answer.
"""

from __future__ import annotations

import sys
from importlib import metadata
from typing import Dict, Mapping, Optional, Protocol


class PackageRegistry(Protocol):
    """Anything that can summarize a package by name."""

    def summary(self, name: str) -> Optional[str]:
        ...


class InstalledPackages:
    """Distributions installed in the running interpreter."""

    def summary(self, name: str) -> Optional[str]:
        try:
            meta = metadata.metadata(name)
        except (metadata.PackageNotFoundError, ValueError):
            return None
        return meta.get("Summary") or None


class MappingPackages:
    """Registry backed by a ``name -> summary`` mapping."""

    def __init__(self, summaries: Optional[Mapping[str, str]] = None):
        self._summaries: Dict[str, str] = dict(summaries or {})

    def add(self, name: str, summary: str) -> None:
        self._summaries[name] = summary

    def summary(self, name: str) -> Optional[str]:
        return self._summaries.get(name) or None


class BuiltinPackages(MappingPackages):
    """Modules compiled into the interpreter.

    Without an explicit mapping, every name in
    :data:`sys.builtin_module_names` is summarized by the first line of the
    module docstring when the module is already imported.
    """

    def __init__(self, summaries: Optional[Mapping[str, str]] = None):
        if summaries is None:
            summaries = {name: _module_summary(name) for name in sys.builtin_module_names}
        super().__init__(summaries)


class AvailablePackages(MappingPackages):
    """Packages known to an index but not installed."""


def _module_summary(name: str) -> str:
    module = sys.modules.get(name)
    doc = getattr(module, "__doc__", None) or ""
    return doc.strip().split("\n", 1)[0] or "Built-in module"
