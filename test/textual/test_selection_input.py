"""Tests for gloss.ui.textual.selection_input.SelectionInput."""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult
from textual.widgets import Input
from textual_autocomplete._autocomplete import TargetState

from gloss.demo import demo_sources
from gloss.engine import AnnotationEngine
from gloss.host import CompletionHost
from gloss.mode import GlossMode
from gloss.sources.symbols import VARIABLE
from gloss.ui.textual.completion_provider import BufferProvider, FileProvider, SymbolProvider
from gloss.ui.textual.selection_input import SelectionInput


class SelectionApp(App):
    """Thin wrapper to test SelectionInput."""

    SUBMITTED = None

    def __init__(self, root):
        super().__init__()
        SelectionApp.SUBMITTED = None
        self.sources = demo_sources(root)
        self.engine = AnnotationEngine(sources=self.sources)
        self.host = CompletionHost()
        self.mode = GlossMode(self.engine, self.host)
        self.mode.enable()
        self.root = root

    def compose(self) -> ComposeResult:
        yield SelectionInput(
            host=self.host,
            providers={
                "@": FileProvider(self.root),
                "#": BufferProvider(self.sources.buffers),
                "$": SymbolProvider(self.sources.symbols, "describe-variable", "Describe variable: ", kind=VARIABLE),
            },
            id="test_selection",
        )

    def on_selection_input_submitted(self, event: SelectionInput.Submitted) -> None:
        SelectionApp.SUBMITTED = event.value
        self.exit()


def _state(text: str) -> TargetState:
    return TargetState(text=text, cursor_position=len(text))


class TestSelectionInput:
    @pytest.mark.asyncio
    async def test_submit_text(self, tmp_path):
        app = SelectionApp(tmp_path)
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("h", "e", "l", "l", "o")
            await pilot.press("enter")
        assert SelectionApp.SUBMITTED == "hello"

    @pytest.mark.asyncio
    async def test_empty_submit_ignored(self, tmp_path):
        app = SelectionApp(tmp_path)
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()
            assert SelectionApp.SUBMITTED is None

    @pytest.mark.asyncio
    async def test_no_trigger_no_session(self, tmp_path):
        app = SelectionApp(tmp_path)
        async with app.run_test() as pilot:
            await pilot.pause()
            widget = app.query_one(SelectionInput)
            assert widget._candidates(_state("hello")) == []
            assert widget.session is None
            assert app.host.session is None

    @pytest.mark.asyncio
    async def test_variables_are_annotated(self, tmp_path):
        app = SelectionApp(tmp_path)
        async with app.run_test() as pilot:
            await pilot.pause()
            widget = app.query_one(SelectionInput)
            items = widget._candidates(_state("show $case"))
            assert len(items) == 1
            main = items[0].main.plain
            assert main.startswith("case-fold-search")
            assert "True" in main
            assert widget.session.category == "variable"
            assert widget.session.command == "describe-variable"

    @pytest.mark.asyncio
    async def test_buffers_are_annotated(self, tmp_path):
        app = SelectionApp(tmp_path)
        async with app.run_test() as pilot:
            await pilot.pause()
            widget = app.query_one(SelectionInput)
            items = widget._candidates(_state("#*Mess"))
            assert [item.main.plain.split()[0] for item in items] == ["*Messages*"]
            assert "%" in items[0].main.plain

    @pytest.mark.asyncio
    async def test_same_token_keeps_session(self, tmp_path):
        app = SelectionApp(tmp_path)
        async with app.run_test() as pilot:
            await pilot.pause()
            widget = app.query_one(SelectionInput)
            widget._candidates(_state("$c"))
            first = widget.session
            widget._candidates(_state("$ca"))
            assert widget.session is first
            assert first.contents == "ca"

            widget._candidates(_state("$ca #"))
            assert widget.session is not first
            assert app.host.session is widget.session

    @pytest.mark.asyncio
    async def test_toggle_changes_annotations(self, tmp_path):
        app = SelectionApp(tmp_path)
        (tmp_path / "init.el").write_bytes(b"x" * 2048)
        async with app.run_test() as pilot:
            await pilot.pause()
            widget = app.query_one(SelectionInput)
            heavy = widget._candidates(_state("@init"))
            assert "2.0K" in heavy[0].main.plain

            app.mode.toggle_annotators()
            light = widget._candidates(_state("@init"))
            assert light[0].main.plain == "init.el"

    @pytest.mark.asyncio
    async def test_file_completion_inserts_full_path(self, tmp_path):
        (tmp_path / "src" / "gloss").mkdir(parents=True)
        app = SelectionApp(tmp_path)
        async with app.run_test() as pilot:
            await pilot.pause()
            widget = app.query_one(SelectionInput)
            state = _state("open @src/gl")
            items = widget._candidates(state)
            displayed = items[0].main.plain
            assert displayed.startswith("gloss/")

            widget._autocomplete.apply_completion(displayed, state)
            assert widget._input.value == "open @src/gloss/"
            assert widget._input.cursor_position == len("open @src/gloss/")

    @pytest.mark.asyncio
    async def test_submit_closes_session(self, tmp_path):
        app = SelectionApp(tmp_path)
        async with app.run_test() as pilot:
            await pilot.pause()
            widget = app.query_one(SelectionInput)
            widget._candidates(_state("#scr"))
            assert app.host.session is not None
            widget.on_input_submitted(Input.Submitted(widget._input, "#scratch* "))
            await pilot.pause()
        assert SelectionApp.SUBMITTED == "#scratch* "
        assert app.host.session is None
