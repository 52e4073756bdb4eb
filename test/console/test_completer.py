"""Tests for gloss.ui.console.completer."""

from __future__ import annotations

import pytest
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from gloss.context.session import SelectionSession
from gloss.demo import demo_providers, demo_sources
from gloss.engine import AnnotationEngine
from gloss.host import CompletionHost
from gloss.mode import GlossMode
from gloss.ui.console.completer import AnnotatedCompleter, read_candidate


def _complete(completer, text):
    return list(completer.get_completions(Document(text), CompleteEvent()))


class TestAnnotatedCompleter:
    def setup_method(self):
        self.host = CompletionHost()
        GlossMode(AnnotationEngine(sources=demo_sources()), self.host).enable()
        self.providers = demo_providers(demo_sources())

    def _completer(self, kind, **session):
        provider = self.providers[kind]
        session = SelectionSession(prompt=provider.prompt, boundaries=provider.boundaries, **session)
        self.host.open_session(session, provider.command)
        return AnnotatedCompleter(self.host, provider, session)

    def teardown_method(self):
        while self.host.session is not None:
            self.host.close_session()

    def test_variable_meta(self):
        completions = _complete(self._completer("variable"), "fill")
        assert [c.text for c in completions] == ["fill-column"]
        assert completions[0].display_meta_text.startswith("70")
        assert completions[0].start_position == -len("fill")

    def test_session_input_follows_document(self):
        completer = self._completer("variable")
        _complete(completer, "case")
        assert completer.session.contents == "case"
        assert completer.session.category == "variable"

    def test_file_replaces_last_segment(self, tmp_path):
        (tmp_path / "lisp").mkdir()
        (tmp_path / "lisp" / "init.el").write_bytes(b"x" * 2048)
        self.providers = demo_providers(demo_sources(tmp_path), tmp_path)
        completer = self._completer("file")
        completions = _complete(completer, "lisp/in")
        assert [c.text for c in completions] == ["init.el"]
        assert completions[0].start_position == -len("in")

    def test_no_annotator(self):
        completer = self._completer("buffer")
        completer.session.annotator_ring = ("light", "heavy")
        completions = _complete(completer, "README")
        assert completions[0].display_meta_text == ""


class TestReadCandidate:
    def test_session_open_during_prompt(self):
        host = CompletionHost()
        GlossMode(AnnotationEngine(), host).enable()
        provider = demo_providers(demo_sources())["command"]
        seen = {}

        def ask(message, completer):
            seen["message"] = message
            seen["session"] = host.session
            seen["completer"] = completer
            return "find-file"

        assert read_candidate(host, provider, ask=ask) == "find-file"
        assert seen["message"] == "M-x "
        assert seen["session"].command == "execute-extended-command"
        assert isinstance(seen["completer"], AnnotatedCompleter)
        assert host.session is None

    def test_session_closed_on_cancel(self):
        host = CompletionHost()
        provider = demo_providers(demo_sources())["command"]

        def ask(message, completer):
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            read_candidate(host, provider, ask=ask)
        assert host.session is None
