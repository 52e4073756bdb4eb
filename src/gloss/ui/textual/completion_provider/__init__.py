"""Completion providers for the Textual selection input.

A provider is a callable ``provider(prefix) -> list[str]`` that also
describes the selection session it opens: the invoking ``command``, the
``prompt``, the completion ``collection`` and the ``boundaries`` of the
completed field.  The annotation engine classifies the session from that
description.
"""

from gloss.ui.textual.completion_provider.buffer_provider import BufferProvider
from gloss.ui.textual.completion_provider.command_provider import CommandProvider
from gloss.ui.textual.completion_provider.file_provider import FileProvider
from gloss.ui.textual.completion_provider.symbol_provider import SymbolProvider

__all__ = ["BufferProvider", "CommandProvider", "FileProvider", "SymbolProvider"]
