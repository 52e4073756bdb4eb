"""Tests for gloss.candidate."""

from __future__ import annotations

from gloss.candidate import Candidate, file_boundaries, no_boundaries, resolve_full_candidate
from gloss.context.session import SelectionSession


class TestCandidate:
    def test_behaves_like_str(self):
        cand = Candidate("init.el", full="/home/me/.emacs.d/init.el")
        assert cand == "init.el"
        assert cand.upper() == "INIT.EL"

    def test_full_defaults_to_none(self):
        assert Candidate("x").full is None


class TestBoundaries:
    def test_no_boundaries(self):
        assert no_boundaries("abc", "def") == (0, 3)

    def test_file_boundaries_segment_start(self):
        assert file_boundaries("src/gl", "") == (4, 0)

    def test_file_boundaries_segment_end(self):
        assert file_boundaries("src/gl", "oss/config.py") == (4, 3)

    def test_file_boundaries_without_slash(self):
        assert file_boundaries("init", ".el") == (0, 3)


class TestResolveFullCandidate:
    def test_side_channel_wins(self):
        session = SelectionSession(contents="src/", boundaries=file_boundaries)
        cand = Candidate("init.el", full="/etc/init.el")
        assert resolve_full_candidate(cand, session) == "/etc/init.el"

    def test_without_session_returns_displayed(self):
        assert resolve_full_candidate("init.el") == "init.el"

    def test_splices_fragment_into_input(self):
        session = SelectionSession(contents="~/.emacs.d/in", boundaries=file_boundaries)
        assert resolve_full_candidate("init.el", session) == "~/.emacs.d/init.el"

    def test_splice_keeps_text_after_field(self):
        session = SelectionSession(contents="src/glo/config.py", point=7, boundaries=file_boundaries)
        assert resolve_full_candidate("gloss", session) == "src/gloss/config.py"

    def test_whole_input_field(self):
        session = SelectionSession(contents="swi")
        assert resolve_full_candidate("switch-to-buffer", session) == "switch-to-buffer"

    def test_is_pure(self):
        session = SelectionSession(contents="a/b", boundaries=file_boundaries)
        first = resolve_full_candidate("bc", session)
        second = resolve_full_candidate("bc", session)
        assert first == second == "a/bc"
        assert session.contents == "a/b"
        assert session.point == 3
