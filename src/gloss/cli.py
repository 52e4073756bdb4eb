"""Command-line entry point.

``gloss annotate``
    Print candidates with the annotation the engine gives them.
``gloss classify``
    Print the category a selection session would be classified as.
``gloss read``
    Read one candidate in the terminal with annotated completion.
``gloss demo``
    Run the interactive Textual demo.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from rich.cells import cell_len
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from gloss.config import GlossConfig
from gloss.context.session import SelectionSession
from gloss.demo import demo_providers, demo_sources
from gloss.engine import AnnotationEngine
from gloss.errors import ConfigError
from gloss.host import CATEGORY, CompletionHost
from gloss.mode import GlossMode
from gloss.ui.console.completer import read_candidate

console = Console()

KINDS = ("file", "buffer", "command", "variable", "face", "symbol")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gloss",
        description="Right-aligned annotations for completion candidates.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Config file (default: $GLOSS_CONFIG or ~/.config/gloss/gloss.json).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages.")

    sub = parser.add_subparsers(dest="action", required=True)

    annotate = sub.add_parser("annotate", help="Annotate candidates of a category.")
    annotate.add_argument("--category", required=True, help="Category, e.g. file, package, variable.")
    annotate.add_argument("--table", default=None, help="Annotator table to use instead of the active one.")
    annotate.add_argument("candidates", nargs="+", help="Candidates to annotate.")

    classify = sub.add_parser("classify", help="Classify a selection session.")
    classify.add_argument("--command", default=None, help="Command that opens the session.")
    classify.add_argument("--prompt", default="", help="Prompt of the session.")
    classify.add_argument("--category", default=None, help="Category the host itself reports.")

    read = sub.add_parser("read", help="Read one candidate in the terminal, with annotated completion.")
    read.add_argument("kind", choices=KINDS, help="What to complete.")
    read.add_argument("--root", type=Path, default=None, help="Directory to complete files in.")

    demo = sub.add_parser("demo", help="Run the interactive demo.")
    demo.add_argument("--root", type=Path, default=None, help="Directory to complete files in.")

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def load_config(path: Optional[Path]) -> GlossConfig:
    if path is None and os.environ.get("GLOSS_CONFIG"):
        path = Path(os.environ["GLOSS_CONFIG"]).expanduser()
    return GlossConfig.load(path)


def run_annotate(args: argparse.Namespace, config: GlossConfig) -> int:
    if args.table is not None:
        if args.table not in config.tables:
            console.print(f"[red]Unknown annotator table:[/red] {args.table}")
            return 2
        config.annotator_ring = (args.table,) + tuple(n for n in config.annotator_ring if n != args.table)

    engine = AnnotationEngine(config, demo_sources(Path.cwd()))
    width = console.width
    for candidate in args.candidates:
        line = Text(candidate)
        annotation = engine.annotate(args.category, candidate)
        if annotation is not None:
            line.append_text(annotation.render(cell_len(candidate), width))
        console.print(line, overflow="ellipsis", no_wrap=True)
    return 0


def run_classify(args: argparse.Namespace, config: GlossConfig) -> int:
    engine = AnnotationEngine(config)
    host = CompletionHost()
    GlossMode(engine, host).enable()

    metadata = {CATEGORY: args.category} if args.category else {}
    with host.selecting(SelectionSession(prompt=args.prompt, metadata=metadata), args.command) as session:
        category = host.metadata_get(session, CATEGORY)

    if category is None:
        console.print("[dim]unclassified[/dim]")
        return 1
    console.print(category)
    return 0


def run_read(args: argparse.Namespace, config: GlossConfig) -> int:
    root = args.root or Path.cwd()
    sources = demo_sources(root)
    host = CompletionHost()
    GlossMode(AnnotationEngine(config, sources), host).enable()

    try:
        value = read_candidate(host, demo_providers(sources, root)[args.kind])
    except (KeyboardInterrupt, EOFError):
        return 1
    console.print(value)
    return 0


def run_demo(args: argparse.Namespace, config: GlossConfig) -> int:
    from gloss.ui.textual.app import GlossDemoApp

    GlossDemoApp(config=config, root=args.root).run()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        for problem in exc.problems:
            console.print(f"  - {problem}")
        return 2

    if args.action == "annotate":
        return run_annotate(args, config)
    if args.action == "classify":
        return run_classify(args, config)
    if args.action == "read":
        return run_read(args, config)
    return run_demo(args, config)
