"""Built-in annotators and the registry that names them."""

from __future__ import annotations

from gloss.annotators.buffers import annotate_buffer
from gloss.annotators.commands import annotate_binding, annotate_command_full
from gloss.annotators.files import annotate_file
from gloss.annotators.packages import annotate_package
from gloss.annotators.registry import (
    AnnotatorContext,
    AnnotatorFn,
    AnnotatorRegistry,
    active_table,
    rotate,
)
from gloss.annotators.symbols import (
    annotate_customize_group,
    annotate_face,
    annotate_symbol,
    annotate_variable,
)

BUILTIN_ANNOTATORS = {
    "binding": annotate_binding,
    "command-full": annotate_command_full,
    "symbol": annotate_symbol,
    "variable": annotate_variable,
    "face": annotate_face,
    "package": annotate_package,
    "customize-group": annotate_customize_group,
    "buffer": annotate_buffer,
    "file": annotate_file,
}


def default_registry() -> AnnotatorRegistry:
    """Return a registry holding every built-in annotator."""
    registry = AnnotatorRegistry()
    for name, fn in BUILTIN_ANNOTATORS.items():
        registry.register(name, fn)
    return registry


__all__ = [
    "AnnotatorContext",
    "AnnotatorFn",
    "AnnotatorRegistry",
    "BUILTIN_ANNOTATORS",
    "active_table",
    "default_registry",
    "rotate",
]
