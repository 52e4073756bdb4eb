"""Engine configuration persisted as JSON in the user config directory.

The configuration file lives at ``~/.config/gloss/gloss.json`` by default
and holds the column widths, the annotator table ring, the per-table
``category -> annotator`` mappings, the classifier order and the
classification rules (command and prompt overrides).
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from jsonschema import Draft202012Validator

from gloss.errors import ConfigError

logger = logging.getLogger(__name__)


def default_config_path() -> Path:
    """Return the conventional path to the gloss config file."""
    return Path.home() / ".config" / "gloss" / "gloss.json"


LIGHT_TABLE: Dict[str, str] = {
    "command": "binding",
    "customize-group": "customize-group",
    "variable": "variable",
    "face": "face",
    "symbol": "symbol",
    "function": "symbol",
    "package": "package",
}

HEAVY_TABLE: Dict[str, str] = {
    "file": "file",
    "buffer": "buffer",
    "command": "command-full",
    **{cat: name for cat, name in LIGHT_TABLE.items() if cat != "command"},
}

DEFAULT_CLASSIFIERS: Tuple[str, ...] = ("command", "original-category", "prompt", "symbol")

DEFAULT_COMMAND_CATEGORIES: Dict[str, str] = {
    "switch-to-buffer": "buffer",
    "kill-buffer": "buffer",
    "find-file": "file",
    "recentf-open-files": "file",
    "execute-extended-command": "command",
    "describe-face": "face",
    "customize-group": "customize-group",
    "package-install": "package",
    "describe-package": "package",
}

# Tried in order against the prompt, first match wins.
DEFAULT_PROMPT_CATEGORIES: List[Tuple[str, str]] = [
    (r"\bgroup\b", "customize-group"),
    (r"\bM-x\b", "command"),
    (r"\bcommand\b", "command"),
    (r"\bpackage\b", "package"),
    (r"\bface\b", "face"),
    (r"\bvariable\b", "variable"),
    (r"\bbuffer\b", "buffer"),
    (r"\bfile\b", "file"),
]

DEFAULT_LISP_MODES: Tuple[str, ...] = (
    "emacs-lisp-mode",
    "lisp-interaction-mode",
    "lisp-mode",
    "scheme-mode",
    "clojure-mode",
    "hy-mode",
)

_NAME_LIST = {"type": "array", "items": {"type": "string"}}
_STRING_MAP = {"type": "object", "additionalProperties": {"type": "string"}}
_WIDTH = {"type": "integer", "minimum": 0}

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "documentation_width": _WIDTH,
        "file_name_width": _WIDTH,
        "separator_width": _WIDTH,
        "variable_width": _WIDTH,
        "mode_width": _WIDTH,
        "annotator_ring": {**_NAME_LIST, "minItems": 1},
        "tables": {"type": "object", "additionalProperties": _STRING_MAP},
        "classifiers": _NAME_LIST,
        "command_categories": _STRING_MAP,
        "prompt_categories": {
            "type": "array",
            "items": {
                "type": "array",
                "prefixItems": [{"type": "string"}, {"type": "string"}],
                "minItems": 2,
                "maxItems": 2,
            },
        },
        "lisp_modes": _NAME_LIST,
    },
    "additionalProperties": False,
}


@dataclass
class GlossConfig:
    """Process-wide engine configuration backed by a JSON file.

    Attributes:
        config_path: Absolute path to the JSON configuration file.
        documentation_width: Maximum width of documentation columns.
        file_name_width: Maximum width of file name columns.
        separator_width: Spaces between two annotation columns.
        variable_width: Maximum width of variable values.
        mode_width: Width of the buffer mode column.
        annotator_ring: Table names; the first one is active.
        tables: ``table -> {category -> annotator name}`` mappings.
        classifiers: Classifier names in the order they are tried.
        command_categories: ``command -> category`` overrides.
        prompt_categories: ``(regexp, category)`` rules matched against the
            prompt.
        lisp_modes: Modes whose outline navigation completes symbols.
    """

    config_path: Path = field(default_factory=default_config_path)
    documentation_width: int = 80
    file_name_width: int = 80
    separator_width: int = 2
    variable_width: int = 30
    mode_width: int = 20
    annotator_ring: Tuple[str, ...] = ("heavy", "light")
    tables: Dict[str, Dict[str, str]] = field(
        default_factory=lambda: {"heavy": dict(HEAVY_TABLE), "light": dict(LIGHT_TABLE)}
    )
    classifiers: Tuple[str, ...] = DEFAULT_CLASSIFIERS
    command_categories: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COMMAND_CATEGORIES))
    prompt_categories: List[Tuple[str, str]] = field(default_factory=lambda: list(DEFAULT_PROMPT_CATEGORIES))
    lisp_modes: Tuple[str, ...] = DEFAULT_LISP_MODES

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "GlossConfig":
        """Load the configuration from a JSON file.

        If the file does not exist a ``GlossConfig`` with default values is
        returned.  Keys missing from the file keep their defaults.

        Args:
            path: Explicit config file path.  Falls back to
                :func:`default_config_path` when ``None``.

        Returns:
            A populated ``GlossConfig`` instance.

        Raises:
            ConfigError: The file is not valid JSON or violates the schema.
        """
        path = path or default_config_path()

        if not path.exists():
            logger.debug("No config file at %s, using defaults", path)
            return cls(config_path=path)

        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{path}: invalid JSON: {exc}", path=path) from exc

        validator = Draft202012Validator(CONFIG_SCHEMA)
        problems = [
            f"{'/'.join(str(p) for p in e.absolute_path) or '<root>'}: {e.message}"
            for e in validator.iter_errors(data)
        ]
        if problems:
            raise ConfigError(f"{path}: invalid configuration", path=path, problems=problems)

        cfg = cls(config_path=path)
        for key in ("documentation_width", "file_name_width", "separator_width", "variable_width", "mode_width"):
            if key in data:
                setattr(cfg, key, data[key])
        if "annotator_ring" in data:
            cfg.annotator_ring = tuple(data["annotator_ring"])
        if "tables" in data:
            cfg.tables = {name: dict(table) for name, table in data["tables"].items()}
        if "classifiers" in data:
            cfg.classifiers = tuple(data["classifiers"])
        if "command_categories" in data:
            cfg.command_categories = dict(data["command_categories"])
        if "prompt_categories" in data:
            cfg.prompt_categories = [(pattern, category) for pattern, category in data["prompt_categories"]]
        if "lisp_modes" in data:
            cfg.lisp_modes = tuple(data["lisp_modes"])

        cfg.check()
        return cfg

    def check(self) -> None:
        """Validate cross-field constraints the schema cannot express.

        Raises:
            ConfigError: A ring entry names an unknown table, or a prompt
                rule is not a valid regular expression.
        """
        problems = [
            f"annotator_ring: unknown table {name!r}"
            for name in self.annotator_ring
            if name not in self.tables
        ]
        for pattern, _ in self.prompt_categories:
            try:
                re.compile(pattern)
            except re.error as exc:
                problems.append(f"prompt_categories: {pattern!r}: {exc}")
        if problems:
            raise ConfigError(f"{self.config_path}: invalid configuration", path=self.config_path, problems=problems)

    def save(self) -> None:
        """Persist the current configuration to disk as pretty-printed JSON.

        Parent directories are created automatically when they do not exist.
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        payload = {
            "documentation_width": self.documentation_width,
            "file_name_width": self.file_name_width,
            "separator_width": self.separator_width,
            "variable_width": self.variable_width,
            "mode_width": self.mode_width,
            "annotator_ring": list(self.annotator_ring),
            "tables": self.tables,
            "classifiers": list(self.classifiers),
            "command_categories": self.command_categories,
            "prompt_categories": [list(rule) for rule in self.prompt_categories],
            "lisp_modes": list(self.lisp_modes),
        }

        self.config_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False))
