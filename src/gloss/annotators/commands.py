"""Command annotators: key binding, and binding plus documentation."""

from __future__ import annotations

from typing import Optional

from rich.text import Text

from gloss.annotators.registry import AnnotatorContext
from gloss.annotators.symbols import documentation
from gloss.errors import MissingMetadata
from gloss.layout import KEY_STYLE, Annotation
from gloss.sources.symbols import FUNCTION


def annotate_binding(ctx: AnnotatorContext, cand: str) -> Optional[Annotation]:
    """Show the key bound to the command, as ``" (ctrl+o)"``."""
    key = ctx.sources.keys.key_for(cand, ctx.keymap_context)
    if not key:
        return None
    return Annotation.of(" (", Text(key, style=KEY_STYLE), ")")


def annotate_command_full(ctx: AnnotatorContext, cand: str) -> Optional[Annotation]:
    """Show the key binding followed by the command's documentation summary."""
    binding = annotate_binding(ctx, cand)
    try:
        doc = documentation(ctx, ctx.sources.symbols.documentation(cand, FUNCTION))
    except MissingMetadata:
        return binding
    return doc if binding is None else binding + doc
