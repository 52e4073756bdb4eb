"""Metadata sources consumed by the annotators.

Every source is read-only from gloss's point of view.  Hosts swap in
their own implementations by building a :class:`Sources` bundle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from gloss.sources.buffers import Buffer, BufferList
from gloss.sources.files import FileAttributes, FileStat
from gloss.sources.keys import KeyBindings
from gloss.sources.packages import (
    AvailablePackages,
    BuiltinPackages,
    InstalledPackages,
    MappingPackages,
    PackageRegistry,
)
from gloss.sources.symbols import Symbol, SymbolTable


def _default_packages() -> Tuple[PackageRegistry, ...]:
    return (InstalledPackages(), BuiltinPackages(), AvailablePackages())


@dataclass
class Sources:
    """The metadata sources an engine annotates from.

    Attributes:
        keys: Key-binding lookup.
        symbols: Function/variable/face/group documentation store.
        files: File attribute lookup.
        buffers: Open buffers.
        packages: Package registries in priority order.
    """

    keys: KeyBindings = field(default_factory=KeyBindings)
    symbols: SymbolTable = field(default_factory=SymbolTable)
    files: FileAttributes = field(default_factory=FileAttributes)
    buffers: BufferList = field(default_factory=BufferList)
    packages: Tuple[PackageRegistry, ...] = field(default_factory=_default_packages)


__all__ = [
    "AvailablePackages",
    "Buffer",
    "BufferList",
    "BuiltinPackages",
    "FileAttributes",
    "FileStat",
    "InstalledPackages",
    "KeyBindings",
    "MappingPackages",
    "PackageRegistry",
    "Sources",
    "Symbol",
    "SymbolTable",
]
