"""Annotation engine: classify a session and hand out its annotator.

The engine answers two metadata queries on behalf of a completion host:

``category``
    The session category, computed once per session by the classifier
    chain.  What the host originally reported stays readable as
    :attr:`~gloss.context.session.SelectionSession.origin_category`.

``annotation-function``
    The annotator the active table assigns to that category, bound to the
    session.  When there is none the query falls through, so the host's own
    annotation function (if any) still applies.

Every other query falls through untouched.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from gloss.annotators import (
    AnnotatorContext,
    AnnotatorFn,
    AnnotatorRegistry,
    active_table,
    default_registry,
    rotate,
)
from gloss.classifiers import ClassifierRegistry, default_classifiers, run_classifiers
from gloss.config import GlossConfig
from gloss.context.session import SelectionSession
from gloss.errors import AnnotationError
from gloss.host import ANNOTATION_FUNCTION, CATEGORY, Proceed
from gloss.layout import Annotation
from gloss.sources import Sources

logger = logging.getLogger(__name__)


class BoundAnnotator:
    """An annotator bound to a session: ``(candidate) -> Annotation | None``.

    Calling it never raises.  Missing metadata and malformed candidates
    are the normal "no annotation" outcome; any other failure is logged
    and also yields ``None`` so that selection keeps working.
    """

    def __init__(self, name: str, fn: AnnotatorFn, ctx: AnnotatorContext, category: Optional[str] = None):
        self.name = name
        self.fn = fn
        self.ctx = ctx
        self.category = category

    def __call__(self, candidate: str) -> Optional[Annotation]:
        try:
            return self.fn(self.ctx, candidate)
        except AnnotationError:
            return None
        except Exception:
            logger.warning("Annotator %r failed on %r", self.name, candidate, exc_info=True)
            return None

    def __repr__(self) -> str:
        return f"BoundAnnotator({self.name!r}, category={self.category!r})"


class AnnotationEngine:
    """Classifier chain, annotator tables and toggle, around one configuration.

    Args:
        config: Engine configuration; defaults to built-in defaults.
        sources: Metadata sources for the annotators.
        annotators: Annotator registry; defaults to the built-in annotators.
        classifiers: Classifier registry; defaults to the built-in classifiers.
    """

    def __init__(
        self,
        config: Optional[GlossConfig] = None,
        sources: Optional[Sources] = None,
        annotators: Optional[AnnotatorRegistry] = None,
        classifiers: Optional[ClassifierRegistry] = None,
    ):
        self.config = config or GlossConfig()
        self.sources = sources or Sources()
        self.annotators = annotators or default_registry()
        self.classifiers = classifiers or default_classifiers()

    # ─────────────────────────────────────
    # session hook
    # ─────────────────────────────────────

    def capture_command(self, session: SelectionSession, command: Optional[str]) -> None:
        """Remember which command opened *session*."""
        session.command = command

    # ─────────────────────────────────────
    # classification
    # ─────────────────────────────────────

    def classify(self, session: SelectionSession) -> Optional[str]:
        """Run the classifier chain for *session*, without memoizing."""
        order = session.classifiers if session.classifiers is not None else self.config.classifiers
        try:
            chain = self.classifiers.chain(order)
        except KeyError:
            logger.warning("Unknown classifier in %r, session left unclassified", tuple(order))
            return None
        return run_classifiers(session, self.config, chain)

    def session_category(
        self,
        session: SelectionSession,
        origin: Optional[Callable[[], Optional[str]]] = None,
    ) -> Optional[str]:
        """Return the category of *session*, classifying it on first use.

        Args:
            session: The session to classify.
            origin: Returns the category the host itself reports; it is
                recorded as ``session.origin_category`` before the chain runs.
        """
        if not session.classified:
            if origin is None:
                session.origin_category = session.metadata.get(CATEGORY)
            else:
                session.origin_category = origin()
            session.category = self.classify(session)
            session.classified = True
        return session.category

    # ─────────────────────────────────────
    # tables
    # ─────────────────────────────────────

    def ring(self, session: Optional[SelectionSession] = None) -> Tuple[str, ...]:
        """Table ring in effect for *session* (its own toggle, else the default)."""
        if session is not None and session.annotator_ring is not None:
            return session.annotator_ring
        return tuple(self.config.annotator_ring)

    def active_table(self, session: Optional[SelectionSession] = None):
        return active_table(self.ring(session), self.config.tables)

    def bind(self, category: Optional[str], session: Optional[SelectionSession] = None) -> Optional[BoundAnnotator]:
        """Return the active table's annotator for *category*, bound to *session*."""
        try:
            table = self.active_table(session)
        except KeyError:
            logger.warning("No usable annotator table in ring %r", self.ring(session))
            return None
        fn = self.annotators.lookup(table, category)
        if fn is None:
            return None
        ctx = AnnotatorContext(self.config, self.sources, session)
        return BoundAnnotator(table[category], fn, ctx, category)

    def annotator_for(
        self,
        session: SelectionSession,
        origin: Optional[Callable[[], Optional[str]]] = None,
    ) -> Optional[BoundAnnotator]:
        """Classify *session* if needed and return its bound annotator."""
        return self.bind(self.session_category(session, origin), session)

    def annotate(
        self,
        category: str,
        candidate: str,
        session: Optional[SelectionSession] = None,
    ) -> Optional[Annotation]:
        """Annotate one candidate as *category* with the active table."""
        annotator = self.bind(category, session)
        if annotator is None:
            return None
        return annotator(candidate)

    def toggle_annotators(self, session: Optional[SelectionSession] = None) -> Tuple[str, ...]:
        """Rotate the table ring by one and return the new ring.

        With a *session* the rotation only applies to that session and
        disappears with it; otherwise the process-wide default changes.
        Already displayed annotations are not refreshed.
        """
        ring = rotate(self.ring(session))
        if session is not None:
            session.annotator_ring = ring
        else:
            self.config.annotator_ring = ring
        logger.debug("Annotator ring is now %r", ring)
        return ring

    # ─────────────────────────────────────
    # metadata interception
    # ─────────────────────────────────────

    def intercept(self, session: SelectionSession, prop: str, proceed: Proceed):
        """Metadata handler answering ``category`` and ``annotation-function``."""
        if prop == CATEGORY:
            category = self.session_category(session, proceed)
            return category if category is not None else proceed()
        if prop == ANNOTATION_FUNCTION:
            annotator = self.annotator_for(session, lambda: proceed(CATEGORY))
            return annotator if annotator is not None else proceed()
        return proceed()
