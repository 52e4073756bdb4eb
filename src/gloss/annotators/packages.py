"""Package annotator."""

from __future__ import annotations

import re
from typing import Optional

from gloss.annotators.registry import AnnotatorContext
from gloss.annotators.symbols import documentation
from gloss.errors import MalformedCandidate
from gloss.layout import Annotation

_VERSION_SUFFIX = re.compile(r"-[0-9.-]+$")


def package_name(cand: str) -> str:
    """Strip a trailing version from a package candidate: ``rich-13.7.1 -> rich``."""
    name = _VERSION_SUFFIX.sub("", cand.strip())
    if not name:
        raise MalformedCandidate(f"not a package name: {cand!r}")
    return name


def annotate_package(ctx: AnnotatorContext, cand: str) -> Optional[Annotation]:
    """Show the one-line summary of the package.

    Installed, built-in and available registries are consulted in the
    order the sources list them; the first summary wins.
    """
    name = package_name(cand)
    for registry in ctx.sources.packages:
        summary = registry.summary(name)
        if summary:
            return documentation(ctx, summary)
    return None
