"""Annotators for symbols, variables, faces and customization groups."""

from __future__ import annotations

from typing import Optional

from gloss.annotators.registry import AnnotatorContext
from gloss.errors import MissingMetadata
from gloss.layout import (
    DOCUMENTATION_STYLE,
    VALUE_STYLE,
    Annotation,
    Field,
    fields,
)
from gloss.sources.symbols import FACE, FUNCTION, GROUP, VARIABLE

FACE_SAMPLE = "abcdefghijklmNOPQRSTUVWXYZ"

# Documentation is looked up in this order for plain symbols.
SYMBOL_KINDS = (FUNCTION, FACE, VARIABLE)


def documentation(ctx: AnnotatorContext, doc: str) -> Annotation:
    """Right-align a documentation string, truncated to its column width."""
    return fields(
        [Field(doc, truncate=ctx.config.documentation_width, style=DOCUMENTATION_STYLE)],
        ctx.config.separator_width,
    )


def annotate_symbol(ctx: AnnotatorContext, cand: str) -> Optional[Annotation]:
    symbols = ctx.sources.symbols
    for kind in SYMBOL_KINDS:
        try:
            return documentation(ctx, symbols.documentation(cand, kind))
        except MissingMetadata:
            continue
    return None


def format_value(value) -> str:
    """Printed representation of a variable value."""
    return repr(value)


def annotate_variable(ctx: AnnotatorContext, cand: str) -> Optional[Annotation]:
    """Show the variable's current value followed by its documentation.

    Both columns are capped independently, the value to
    ``variable_width`` and the documentation to ``documentation_width``.
    Unbound variables show ``<unbound>``.
    """
    var = ctx.sources.symbols.variable(cand)
    cfg = ctx.config
    return fields(
        [
            Field(format_value(var.value), width=cfg.variable_width, style=VALUE_STYLE),
            Field(var.doc or "", truncate=cfg.documentation_width, style=DOCUMENTATION_STYLE),
        ],
        cfg.separator_width,
    )


def annotate_face(ctx: AnnotatorContext, cand: str) -> Optional[Annotation]:
    """Show a sample text in the face, followed by its documentation."""
    face = ctx.sources.symbols.face(cand)
    cfg = ctx.config
    return fields(
        [
            Field(FACE_SAMPLE, style=face.style),
            Field(face.doc or "", truncate=cfg.documentation_width, style=DOCUMENTATION_STYLE),
        ],
        cfg.separator_width,
    )


def annotate_customize_group(ctx: AnnotatorContext, cand: str) -> Optional[Annotation]:
    return documentation(ctx, ctx.sources.symbols.documentation(cand, GROUP))
