"""Classifier chain: infer the category of a selection session.

Each classifier looks at the session (and the configuration) and either
names a category or declines with ``None``.  Classifiers are tried in the
configured order and the first answer wins.  They only read the session,
so running the chain twice gives the same answer.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Iterable, List, Optional

from gloss.config import GlossConfig
from gloss.context.session import SelectionSession
from gloss.sources.symbols import SYMBOL_COMPLETION_TABLE, Symbol, SymbolTable

logger = logging.getLogger(__name__)

Classifier = Callable[[SelectionSession, GlossConfig], Optional[str]]

# "(default foo)" style hints and "[foo]" hints, with the blank before them.
_DEFAULT_HINT = re.compile(r"\s*\([^()]*\bdefault\b[^()]*\)|\s*\[[^\]]*\]")

OUTLINE_COMMANDS = ("imenu",)


def strip_prompt_hints(prompt: str) -> str:
    """Remove default-value hints from *prompt*.

    >>> strip_prompt_hints("Describe variable (default car): ")
    'Describe variable: '
    """
    return _DEFAULT_HINT.sub("", prompt)


def classify_by_command_name(session: SelectionSession, config: GlossConfig) -> Optional[str]:
    """Category configured for the command that opened the session."""
    if session.command is None:
        return None
    return config.command_categories.get(session.command)


def classify_original_category(session: SelectionSession, config: GlossConfig) -> Optional[str]:
    """Category the host's own metadata reported."""
    return session.origin_category


def classify_by_prompt(session: SelectionSession, config: GlossConfig) -> Optional[str]:
    """First ``(regexp, category)`` rule matching the prompt, hints removed."""
    if not session.prompt:
        return None
    prompt = strip_prompt_hints(session.prompt)
    for pattern, category in config.prompt_categories:
        try:
            matched = re.search(pattern, prompt)
        except re.error:
            logger.warning("Skipping invalid prompt rule %r", pattern)
            continue
        if matched:
            return category
    return None


def classify_symbol(session: SelectionSession, config: GlossConfig) -> Optional[str]:
    """Detect sessions that complete symbol names.

    Symbol completion is assumed when the collection is a symbol table or
    the special all-symbols table, when it is a sequence of symbols, or
    when an outline command runs from a Lisp-family buffer (whose outline
    entries are definitions).
    """
    collection = session.collection
    if collection is SYMBOL_COMPLETION_TABLE or isinstance(collection, SymbolTable):
        return "symbol"
    if isinstance(collection, (list, tuple)) and collection and isinstance(collection[0], Symbol):
        return "symbol"
    buffer = session.origin_buffer
    if (
        session.command in OUTLINE_COMMANDS
        and buffer is not None
        and buffer.derived_mode_p(config.lisp_modes)
    ):
        return "symbol"
    return None


class ClassifierRegistry:
    """Named classifiers, so the chain order can live in configuration."""

    def __init__(self) -> None:
        self._classifiers: Dict[str, Classifier] = {}

    def register(self, name: str, fn: Classifier) -> None:
        if name in self._classifiers:
            raise ValueError(f"Classifier already registered: {name}")
        self._classifiers[name] = fn

    def get(self, name: str) -> Classifier:
        if name not in self._classifiers:
            raise KeyError(f"Classifier not found: {name}")
        return self._classifiers[name]

    def names(self) -> List[str]:
        return sorted(self._classifiers.keys())

    def chain(self, order: Iterable[str]) -> List[Classifier]:
        """Return the classifiers named in *order*, in that order."""
        return [self.get(name) for name in order]


def default_classifiers() -> ClassifierRegistry:
    registry = ClassifierRegistry()
    registry.register("command", classify_by_command_name)
    registry.register("original-category", classify_original_category)
    registry.register("prompt", classify_by_prompt)
    registry.register("symbol", classify_symbol)
    return registry


def run_classifiers(
    session: SelectionSession,
    config: GlossConfig,
    chain: Iterable[Classifier],
) -> Optional[str]:
    """Return the first category a classifier of *chain* reports.

    Classifiers after the first answer are not consulted.
    """
    for classifier in chain:
        category = classifier(session, config)
        if category:
            logger.debug(
                "Session %s classified as %r by %s",
                session.id,
                category,
                getattr(classifier, "__name__", classifier),
            )
            return category
    return None
