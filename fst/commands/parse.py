"""Komenda: fst parse — parsowanie pliku markdown do bloków i spanów."""

from __future__ import annotations

import argparse
import pathlib
import sys

from rich import box
from rich.console import Console
from rich.table import Table

from data_model.documents import BulletList, CodeBlock, Document, Heading, Paragraph
from fst._render import render_document
from md_parser import parse_answer, to_json, to_plain_text

console = Console()


# ---------------------------------------------------------------------------
# Wczytywanie wejścia
# ---------------------------------------------------------------------------

def _read_input_text(args: argparse.Namespace) -> str:
    """Wczytuje tekst z pliku lub stdin (bez przycinania, liczą się linie)."""
    if args.file:
        p = pathlib.Path(args.file)
        if not p.exists():
            console.print(f"[red]Plik nie istnieje:[/red] {p}")
            raise SystemExit(1)
        return p.read_text(encoding="utf-8")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    console.print("[red]Brak tekstu wejściowego.[/red] Podaj plik lub przekaż tekst przez stdin.")
    raise SystemExit(1)


# ---------------------------------------------------------------------------
# Tabela bloków
# ---------------------------------------------------------------------------

def _preview(block, width: int = 60) -> str:
    match block:
        case Heading(content=content) | Paragraph(content=content):
            text = "".join(s.text for s in content)
        case CodeBlock(lines=lines):
            text = " ⏎ ".join(lines)
        case BulletList(items=items):
            text = " | ".join("".join(s.text for s in item) for item in items)
        case _:
            text = ""
    text = text.replace("\n", " ⏎ ")
    return text if len(text) <= width else text[:width] + "…"


def _detail(block) -> str:
    match block:
        case Heading(level=level):
            return f"h{level}"
        case CodeBlock(language=language, lines=lines):
            return f"{language or '-'} ({len(lines)} l.)"
        case BulletList(items=items):
            return f"{len(items)} pkt"
        case Paragraph(content=content):
            return f"{len(content)} span."
    return ""


def _show_table(document: Document) -> None:
    if not document.blocks:
        console.print("[yellow]Brak bloków.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",       justify="right", no_wrap=True, style="dim")
    table.add_column("TYP",     no_wrap=True, style="bold cyan")
    table.add_column("LINIE",   justify="center", no_wrap=True)
    table.add_column("SZCZEG.", no_wrap=True)
    table.add_column("PODGLĄD", no_wrap=False, max_width=60)

    for i, block in enumerate(document):
        lines = (
            str(block.line_start + 1)
            if block.line_end - block.line_start <= 1
            else f"{block.line_start + 1}–{block.line_end}"
        )
        table.add_row(str(i), block.kind, lines, _detail(block), _preview(block))

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(document)} bloków[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    text = _read_input_text(args)
    document = parse_answer(text)

    if args.json:
        print(to_json(document))
    elif args.plain:
        print(to_plain_text(document))
    elif args.blocks:
        _show_table(document)
    else:
        console.print(render_document(document))


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Parsuje tekst markdown do bloków i wyświetla wynik.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje plik markdown (nagłówki, akapity, bloki kodu, listy punktowane;
inline: `kod`, **pogrubienie**, *kursywa*) i wyświetla wynik.

Przykłady:
  fst parse odpowiedz.md
  fst parse odpowiedz.md --json
  fst parse odpowiedz.md --blocks
  cat odpowiedz.md | fst parse --plain
        """,
    )
    p.add_argument(
        "file",
        nargs="?",
        metavar="PLIK",
        help="Plik markdown (domyślnie: stdin).",
    )
    out = p.add_mutually_exclusive_group()
    out.add_argument(
        "--json",
        action="store_true",
        help="Wypisz Document jako JSON.",
    )
    out.add_argument(
        "--plain",
        action="store_true",
        help="Wypisz tekst bez znaczników markdown.",
    )
    out.add_argument(
        "--blocks",
        action="store_true",
        help="Wyświetl tabelę bloków (typ, linie, podgląd).",
    )
    p.set_defaults(func=run)
