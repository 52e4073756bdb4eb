"""Tests for gloss.ui.textual.bindings."""

from textual.binding import Binding

from gloss.sources.keys import KeyBindings
from gloss.ui.textual.app import GlossDemoApp
from gloss.ui.textual.bindings import command_name, key_bindings_from


class TestCommandName:
    def test_underscores(self):
        assert command_name("toggle_annotators") == "toggle-annotators"

    def test_arguments_dropped(self):
        assert command_name("switch_mode('help')") == "switch-mode"


class TestKeyBindingsFrom:
    def test_tuples(self):
        keys = key_bindings_from([("ctrl+t", "toggle_annotators", "Cycle")])
        assert keys.key_for("toggle-annotators") == "ctrl+t"

    def test_binding_objects_prefer_display(self):
        keys = key_bindings_from([Binding("ctrl+o", "find_file", "Open", key_display="^O")])
        assert keys.key_for("find-file") == "^O"

    def test_context(self):
        keys = key_bindings_from([("f3", "find_file")], context="editor", keys=KeyBindings({"find-file": "ctrl+o"}))
        assert keys.key_for("find-file") == "ctrl+o"
        assert keys.key_for("find-file", "editor") == "f3"

    def test_demo_app_bindings(self):
        keys = key_bindings_from(GlossDemoApp.BINDINGS)
        assert keys.key_for("toggle-mode") == "ctrl+g"
        assert keys.key_for("quit") == "ctrl+q"
