"""gloss: right-aligned annotations for completion candidates.

Typical wiring::

    engine = AnnotationEngine(GlossConfig.load(), sources)
    host = CompletionHost()
    GlossMode(engine, host).enable()

    with host.selecting(SelectionSession(prompt="Find file: "), "find-file") as session:
        annotate = host.annotation_function(session)
        annotation = annotate("init.el") if annotate else None
"""

from gloss.candidate import Candidate, resolve_full_candidate
from gloss.config import GlossConfig
from gloss.context.session import SelectionSession
from gloss.engine import AnnotationEngine, BoundAnnotator
from gloss.errors import AnnotationError, ConfigError, GlossError, MalformedCandidate, MissingMetadata
from gloss.host import ANNOTATION_FUNCTION, CATEGORY, CompletionHost
from gloss.layout import Annotation, right_align, truncate
from gloss.mode import GlossMode
from gloss.sources import Sources

__version__ = "0.3.0"

__all__ = [
    "ANNOTATION_FUNCTION",
    "Annotation",
    "AnnotationEngine",
    "AnnotationError",
    "BoundAnnotator",
    "CATEGORY",
    "Candidate",
    "CompletionHost",
    "ConfigError",
    "GlossConfig",
    "GlossError",
    "GlossMode",
    "MalformedCandidate",
    "MissingMetadata",
    "SelectionSession",
    "Sources",
    "resolve_full_candidate",
    "right_align",
    "truncate",
]
