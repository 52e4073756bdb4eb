"""Exception hierarchy for gloss.

Only :class:`ConfigError` is ever meant to reach a caller.  Annotation
errors are raised inside annotators and metadata sources and are turned
into "no annotation" by the engine before the host sees them.
"""

from __future__ import annotations


class GlossError(Exception):
    """Base class for every error raised by gloss."""


class AnnotationError(GlossError):
    """A candidate could not be annotated."""


class MissingMetadata(AnnotationError):
    """The metadata source has nothing for this candidate.

    Typical causes: the file vanished, the symbol has no docstring, the
    package is unknown.
    """


class MalformedCandidate(AnnotationError):
    """The candidate cannot be interpreted by the annotator it was given to."""


class ConfigError(GlossError):
    """The configuration file is invalid.

    Attributes:
        path: Path of the offending file, when known.
        problems: One message per schema violation.
    """

    def __init__(self, message: str, path=None, problems=None):
        super().__init__(message)
        self.path = path
        self.problems = list(problems or [])
