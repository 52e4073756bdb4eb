"""Demo application: a selection input with annotated candidates."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Markdown

from gloss.config import GlossConfig
from gloss.demo import demo_providers, demo_sources
from gloss.engine import AnnotationEngine
from gloss.host import CompletionHost
from gloss.mode import GlossMode
from gloss.ui.textual.bindings import key_bindings_from
from gloss.ui.textual.selection_input import SelectionInput


class GlossDemoApp(App):
    """Try the annotation engine interactively.

    Triggers: ``@`` files, ``#`` buffers, ``:`` commands, ``$`` variables,
    ``%`` faces, ``&`` any symbol.
    """

    TITLE = "gloss"

    CSS = """
    #history {
        height: 1fr;
        border: round $primary;
        padding: 1 2;
    }
    """

    BINDINGS = [
        ("ctrl+t", "toggle_annotators", "Cycle annotations"),
        ("ctrl+g", "toggle_mode", "Annotations on/off"),
        ("ctrl+q", "quit", "Quit"),
    ]

    TRIGGERS = {"@": "file", "#": "buffer", ":": "command", "$": "variable", "%": "face", "&": "symbol"}

    def __init__(self, config: Optional[GlossConfig] = None, root: Optional[Path] = None):
        super().__init__()
        self.root = root or Path.cwd()
        self.config = config or GlossConfig.load()
        self.sources = demo_sources(self.root, keys=key_bindings_from(self.BINDINGS))
        self.engine = AnnotationEngine(self.config, self.sources)
        self.host = CompletionHost()
        self.mode = GlossMode(self.engine, self.host)
        self.mode.enable()
        self._history: List[str] = []

    def providers(self) -> dict:
        by_kind = demo_providers(self.sources, self.root)
        return {trigger: by_kind[kind] for trigger, kind in self.TRIGGERS.items()}

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="history"):
            yield Markdown("", id="history_md")
        yield SelectionInput(host=self.host, providers=self.providers(), id="selection")
        yield Footer()

    def on_selection_input_submitted(self, event: SelectionInput.Submitted) -> None:
        self._history.append(event.value)
        self.query_one("#history_md", Markdown).update(
            "\n".join(f"- `{line}`" for line in self._history)
        )

    def action_toggle_annotators(self) -> None:
        ring = self.mode.toggle_annotators()
        self.notify(f"Annotations: {ring[0]}")

    def action_toggle_mode(self) -> None:
        enabled = self.mode.toggle_mode()
        self.notify("Annotations on" if enabled else "Annotations off")
