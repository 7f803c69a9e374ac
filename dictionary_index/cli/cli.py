"""
cli.py - command line front end for the dictionary index
Features:
- check / add / list against the word file, with either index (--method)
- suggestions for misspelled words
- compare: tree vs hash table build and search timings
- serve: line protocol on stdin/stdout
- shell: interactive menu
- Uses Rich for tables and formatting
"""

import argparse
import logging
import sys
from typing import List, Optional

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from dictionary_index.api.line_protocol import serve
from dictionary_index.core.bench_profiling import compare_methods
from dictionary_index.core.spellchecker import SpellChecker
from dictionary_index.utils.config_manager import Config
from dictionary_index.utils.logger_utils import configure_logging
from dictionary_index.utils.normalizer import normalize_word

EXIT_OK = 0
EXIT_USAGE = 1

# initialise console for rich output
console = Console()


def _shown(word: str) -> str:
    """Printable form of a word; undecodable bytes show as \\xNN escapes."""
    return word.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


class CLI:
    """Runs one verb (or the interactive shell) against a SpellChecker."""

    def __init__(self, checker: SpellChecker, method: str, out: Optional[Console] = None):
        self.checker = checker
        self.method = method
        self.console = out or console
        self.running = True

    # VERBS ----------------------------------------------------------------
    def check(self, word: str) -> int:
        if not normalize_word(word):
            self.console.print("[red]Error:[/red] word required for check")
            return EXIT_USAGE
        res = self.checker.check(word, self.method)
        if res.found:
            self.console.print(f"[green]FOUND[/green]: '{escape(_shown(res.word))}'", highlight=False)
            return EXIT_OK

        self.console.print(f"[red]NOT_FOUND[/red]: '{escape(_shown(res.word))}'", highlight=False)
        self._display_suggestions(res.word, res.suggestions)
        return EXIT_OK

    def add(self, word: str) -> int:
        if not normalize_word(word):
            self.console.print("[red]Error:[/red] word required for add")
            return EXIT_USAGE
        res = self.checker.add(word, self.method)
        if not res.added:
            self.console.print(f"[yellow]EXISTS[/yellow]: '{escape(_shown(res.word))}'", highlight=False)
            return EXIT_OK
        self.console.print(f"[green]ADDED[/green]: '{escape(_shown(res.word))}'", highlight=False)
        if not res.persisted:
            self.console.print(f"[yellow]{res.message}[/yellow] ({escape(str(res.error))})")
        return EXIT_OK

    def list(self) -> int:
        for w in self.checker.list_words(self.method).words:
            self.console.print(_shown(w), markup=False, highlight=False)
        return EXIT_OK

    def compare(self, runs: int = 1) -> int:
        words = self.checker.store.load_all()
        self.console.print(f"Loaded {len(words)} words from {self.checker.store.path}")
        rep = compare_methods(words, runs=runs, builders=self.checker.builders())

        table = Table(title="BST vs HashMap", box=box.SIMPLE)
        table.add_column("Method", style="cyan")
        table.add_column("Build (ms)", justify="right")
        table.add_column("Search avg (ms)", justify="right", style="magenta")
        table.add_column("Search median (ms)", justify="right")
        table.add_column("Words", justify="right")
        for t in rep.timings.values():
            table.add_row(
                t.method,
                f"{t.build_ms:.4f}",
                f"{t.avg_search_ms:.6f}",
                f"{t.median_search_ms:.6f}",
                str(t.size),
            )
        self.console.print(table)
        self.console.print(
            Panel(
                f"Build winner:  {rep.winner('build')}\n"
                f"Search winner: {rep.winner('search')}\n"
                f"Speedup:       {rep.speedup:.2f}x\n"
                f"Tree height:   {rep.timings['bst'].height}\n"
                f"Hash buckets:  {rep.timings['hashmap'].capacity}",
                title=f"{len(rep.probes)} probes",
                border_style="cyan",
            )
        )
        return EXIT_OK

    def serve(self) -> int:
        serve(self.checker, sys.stdin, sys.stdout)
        return EXIT_OK

    # DISPLAY -------------------------------------------------------------------------------
    def _display_suggestions(self, word: str, suggestions: List[str]) -> None:
        if not suggestions:
            self.console.print("[dim](dictionary is empty)[/dim]")
            return
        prefix_hit = suggestions[0].startswith(word)
        title = "Suggestions" if prefix_hit else "No prefix matches, first words"
        table = Table(title=title, box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        for i, w in enumerate(suggestions, 1):
            table.add_row(str(i), escape(_shown(w)))
        self.console.print(table)

    # SHELL -------------------------------------------------------------------------------
    def run_shell(self) -> int:
        """
        Interactive menu loop:
        1) check  2) add  3) list  4) exit
        """
        self.console.rule("[bold magenta]Dictionary Spell Checker[/bold magenta]")
        for msg in self.checker.warnings:
            self.console.print(f"[yellow]{msg}[/yellow]")

        while self.running:
            try:
                self.console.print(
                    "\n[cyan]1)[/cyan] Check spelling  [cyan]2)[/cyan] Add word  "
                    "[cyan]3)[/cyan] List words  [cyan]4)[/cyan] Exit"
                )
                choice = Prompt.ask("Enter choice", console=self.console, default="", show_default=False)
                self._handle_choice(choice.strip())
            except (EOFError, KeyboardInterrupt):
                self.running = False
        self.console.rule("[red]Exiting[/red]")
        return EXIT_OK

    def _handle_choice(self, choice: str) -> None:
        if choice == "1":
            word = Prompt.ask("Enter word to check", console=self.console, default="", show_default=False)
            if not word.strip():
                self.console.print("[red]No word entered.[/red]")
                return
            self.check(word)
            return
        if choice == "2":
            word = Prompt.ask("Enter new word to add", console=self.console, default="", show_default=False)
            if not word.strip():
                self.console.print("[red]No word entered.[/red]")
                return
            self.add(word)
            return
        if choice == "3":
            self.console.rule("Dictionary (alphabetical)")
            self.list()
            return
        if choice == "4":
            self.running = False
            return
        self.console.print("[red]Invalid choice. Please enter 1-4.[/red]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dictionary-index",
        description="Spell checker over a plain word list (BST or hash table).",
    )
    parser.add_argument("--config", default="config.json", help="JSON config file")
    parser.add_argument("--dict", dest="dictionary_path", help="word file to use")
    parser.add_argument("--method", choices=["bst", "hashmap"], help="index to use")
    parser.add_argument(
        "--policy", choices=["rewrite", "append"], help="how 'add' writes the file"
    )
    parser.add_argument("-v", "--verbose", action="store_true")

    sub = parser.add_subparsers(dest="verb", metavar="verb")
    p = sub.add_parser("check", help="look up a word")
    p.add_argument("word")
    p = sub.add_parser("add", help="add a word and save the file")
    p.add_argument("word")
    sub.add_parser("list", help="print every word alphabetically")
    p = sub.add_parser("compare", help="benchmark BST vs hash table")
    p.add_argument("--runs", type=int, default=1)
    sub.add_parser("serve", help="answer line requests on stdin")
    sub.add_parser("shell", help="interactive menu")
    return parser


def main(argv: Optional[List[str]] = None, out: Optional[Console] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return EXIT_OK if e.code in (0, None) else EXIT_USAGE
    if not args.verb:
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    cfg = Config(args.config)
    if args.dictionary_path:
        cfg.data["dictionary_path"] = args.dictionary_path
    if args.policy:
        cfg.data["persist_policy"] = args.policy
    method = args.method or cfg["default_method"]

    configure_logging(
        logging.INFO if args.verbose else logging.WARNING,
        log_file=cfg["log_file"],
    )
    app = CLI(SpellChecker.from_config(cfg), method, out=out)

    if args.verb == "check":
        return app.check(args.word)
    if args.verb == "add":
        return app.add(args.word)
    if args.verb == "list":
        return app.list()
    if args.verb == "compare":
        return app.compare(args.runs)
    if args.verb == "serve":
        return app.serve()
    return app.run_shell()


if __name__ == "__main__":
    sys.exit(main())
