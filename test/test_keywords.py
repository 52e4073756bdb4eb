"""Tests for gloss.context.keywords.Keywords."""

from gloss.context.keywords import Keywords


class TestMustContinue:
    def setup_method(self):
        self.kw = Keywords(["@", "#", ":"])

    def test_directory_continues(self):
        assert self.kw.must_continue("src/") is True

    def test_namespace_continues(self):
        assert self.kw.must_continue("agent:") is True

    def test_dot_continues(self):
        assert self.kw.must_continue("file.") is True

    def test_regular_text_does_not_continue(self):
        assert self.kw.must_continue("hello") is False

    def test_empty_does_not_continue(self):
        assert self.kw.must_continue("") is False


class TestFindLastTrigger:
    def setup_method(self):
        self.kw = Keywords(["/", "@", ":", "#"])

    def test_no_trigger(self):
        match = self.kw.find_last_trigger("hello world")
        assert match.position == -1
        assert match.trigger is None
        assert not match.found

    def test_trigger_at_start(self):
        match = self.kw.find_last_trigger("@README")
        assert (match.position, match.length, match.trigger) == (0, 1, "@")

    def test_trigger_after_space(self):
        match = self.kw.find_last_trigger("open #scr")
        assert match.position == 5
        assert match.trigger == "#"

    def test_trigger_after_paren(self):
        match = self.kw.find_last_trigger("fn(#User")
        assert match.position == 3

    def test_trigger_not_valid_in_middle_of_word(self):
        assert not self.kw.find_last_trigger("hello@world").found

    def test_rightmost_trigger_wins(self):
        match = self.kw.find_last_trigger(":cmd @file")
        assert match.position == 5
        assert match.trigger == "@"

    def test_empty_string(self):
        assert not self.kw.find_last_trigger("").found

    def test_multi_char_trigger(self):
        kw = Keywords(["/", "//"])
        match = kw.find_last_trigger("text //cmd")
        assert (match.position, match.length, match.trigger) == (5, 2, "//")

    def test_token(self):
        before = "see @src/gl"
        match = self.kw.find_last_trigger(before)
        assert match.token(before) == "src/gl"


class TestKeywordsInit:
    def test_longest_first(self):
        assert Keywords([":", "::"]).triggers == ["::", ":"]
