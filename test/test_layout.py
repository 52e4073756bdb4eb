"""Tests for gloss.layout."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text

from gloss.layout import (
    ELLIPSIS,
    Annotation,
    Field,
    PaddingSpec,
    display_width,
    escape_controls,
    fields,
    file_mode,
    human_size,
    pad,
    right_align,
    truncate,
)


class TestTruncate:
    def test_short_text_is_unchanged(self):
        assert truncate("hello", 10) == "hello"

    def test_exact_width_is_unchanged(self):
        assert truncate("hello", 5) == "hello"

    def test_long_text_gets_ellipsis(self):
        assert truncate("hello world", 6) == "hello" + ELLIPSIS

    def test_never_exceeds_width(self):
        for width in range(0, 15):
            assert display_width(truncate("the quick brown fox", width)) <= width

    def test_only_first_line(self):
        assert truncate("first line\nsecond line", 40) == "first line"

    def test_crlf_line_break(self):
        assert truncate("first\r\nsecond", 40) == "first"

    def test_wide_characters_counted_by_cells(self):
        result = truncate("日本語のテキスト", 7)
        assert display_width(result) <= 7
        assert result.endswith(ELLIPSIS)

    def test_zero_width(self):
        assert truncate("abc", 0) == ""

    def test_width_one_is_just_ellipsis(self):
        assert truncate("abc", 1) == ELLIPSIS

    def test_control_characters_in_caret_notation(self):
        assert truncate("a\tb", 10) == "a^Ib"

    def test_control_characters_count_toward_width(self):
        assert display_width(truncate("\x01\x02\x03\x04", 5)) <= 5


class TestEscapeControls:
    def test_plain_text_is_same_object(self):
        text = "plain"
        assert escape_controls(text) is text

    def test_delete(self):
        assert escape_controls("x\x7f") == "x^?"

    def test_escape(self):
        assert escape_controls("\x1b[0m") == "^[[0m"


class TestPad:
    def test_left(self):
        assert pad("ab", 5) == "ab   "

    def test_right(self):
        assert pad("ab", 5, "right") == "   ab"

    def test_overflow_is_truncated(self):
        assert pad("abcdefgh", 5) == "abcd" + ELLIPSIS


class TestRightAlign:
    def test_offset_is_sum_of_widths(self):
        assert right_align([10, 2, 12]) == PaddingSpec(24)

    def test_fill_is_relative_to_viewport(self):
        spec = right_align([10])
        assert spec.fill(5, 40) == " " * 25
        assert spec.fill(5, 60) == " " * 45

    def test_fill_at_least_one_space(self):
        assert PaddingSpec(50).fill(40, 60) == " "


class TestAnnotation:
    def test_render_aligns_body_to_right_edge(self):
        annotation = Annotation((PaddingSpec(3), Text("abc")))
        rendered = annotation.render(column=7, viewport_width=20)
        assert rendered.plain == " " * 10 + "abc"
        assert 7 + len(rendered.plain) == 20

    def test_render_without_padding(self):
        annotation = Annotation.of(" (", "ctrl+o", ")")
        assert annotation.render(5, 80).plain == " (ctrl+o)"

    def test_str_collapses_padding(self):
        annotation = Annotation.of(" (k)") + Annotation((PaddingSpec(4), Text("docs")))
        assert str(annotation) == " (k) docs"
        assert annotation.plain == " (k)docs"

    def test_second_padding_counts_preceding_text(self):
        annotation = Annotation.of(" (k)") + Annotation((PaddingSpec(4), Text("docs")))
        rendered = annotation.render(column=6, viewport_width=30)
        assert rendered.plain.endswith("docs")
        assert 6 + len(rendered.plain) == 30

    def test_equal_annotations(self):
        assert Annotation.of("x") == Annotation.of("x")


class TestFields:
    def test_columns_and_separators(self):
        annotation = fields([Field("ab", width=4), Field("c", width=3, align="right")], 2)
        assert annotation.plain == "ab      c"
        assert annotation.parts[0] == PaddingSpec(4 + 2 + 3)

    def test_truncate_cap_sizes_the_column(self):
        annotation = fields([Field("documentation", truncate=8)], 2)
        assert annotation.plain == "documen" + ELLIPSIS
        assert annotation.parts[0] == PaddingSpec(8)

    def test_unsized_column_uses_content_width(self):
        annotation = fields([Field("xyz")], 2)
        assert annotation.parts[0] == PaddingSpec(3)

    def test_styles_are_kept(self):
        style = Style(bold=True)
        annotation = fields([Field("xyz", style=style)], 2)
        assert [span.style for span in annotation.text.spans] == [style]

    def test_first_line_only(self):
        assert fields([Field("one\ntwo")], 1).plain == "one"


class TestHumanSize:
    def test_bytes(self):
        assert human_size(0) == "0"
        assert human_size(512) == "512"
        assert human_size(1023) == "1023"

    def test_kilobytes(self):
        assert human_size(2048) == "2.0K"
        assert human_size(1536) == "1.5K"
        assert human_size(15360) == "15K"

    def test_no_decimal_once_rounded_to_ten(self):
        assert human_size(10239) == "10K"
        assert human_size(10188) == "9.9K"

    def test_larger_units(self):
        assert human_size(5 * 1024 ** 2) == "5.0M"
        assert human_size(300 * 1024 ** 3) == "300G"


class TestFileMode:
    def test_regular_file(self):
        assert file_mode(0o100644) == "-rw-r--r--"

    def test_directory(self):
        assert file_mode(0o040755) == "drwxr-xr-x"
