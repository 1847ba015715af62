"""Komenda: fst ask — pytanie do modelu z File Search i render odpowiedzi."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict

from google.genai import errors as genai_errors
from rich import box
from rich.console import Console
from rich.table import Table

from file_search.ask import Answer, ask
from file_search.gemini import DEFAULT_MODEL
from fst._render import render_document
from md_parser import to_dict

console = Console()


def _answer_to_json(answer: Answer) -> str:
    data = {
        "answer": answer.text,
        "citations": [asdict(c) for c in answer.citations],
        "document": to_dict(answer.document),
    }
    return json.dumps(data, ensure_ascii=False, indent=2)


def _show_citations(answer: Answer) -> None:
    if not answer.citations:
        console.print("[dim]Brak cytatów.[/dim]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",      justify="right", no_wrap=True, style="dim")
    table.add_column("ŹRÓDŁO", no_wrap=True, max_width=40, style="bold cyan")
    table.add_column("STR.",   justify="right", no_wrap=True)
    table.add_column("TEKST",  no_wrap=False, max_width=80)

    for i, c in enumerate(answer.citations, start=1):
        text = (c.text or "").replace("\n", " ")
        table.add_row(
            str(i),
            c.title or c.uri or "-",
            str(c.page_number) if c.page_number is not None else "-",
            text[:200] + ("…" if len(text) > 200 else ""),
        )

    console.print(table)


def run(args: argparse.Namespace) -> None:
    print(f"Wysyłam pytanie do {args.model or 'Gemini'} (store: {args.store})...", file=sys.stderr)

    try:
        answer = ask(args.question, args.store, model=args.model)
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)
    except (RuntimeError, genai_errors.APIError) as e:
        console.print(f"[red]Błąd Gemini API:[/red] {e}")
        raise SystemExit(1)

    if args.json:
        print(_answer_to_json(answer))
        return

    if args.raw:
        print(answer.text)
    else:
        console.print()
        console.print(render_document(answer.document))
        console.print()

    if args.citations:
        _show_citations(answer)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "ask",
        help="Zadaje pytanie do zaindeksowanego pliku (Gemini File Search).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""
Wysyła pytanie do Gemini z narzędziem File Search ograniczonym do podanego
store i wyświetla odpowiedź (markdown renderowany w terminalu).

Wymaga zmiennej środowiskowej GEMINI_API_KEY (lub pliku .env).
Model: --model, GEMINI_MODEL_NAME lub {DEFAULT_MODEL}.

Przykłady:
  fst ask --store fileSearchStores/abc123 "O czym jest dokument?"
  fst ask -s abc123 "Podsumuj rozdział 2" --citations
  fst ask -s abc123 "Jakie są wnioski?" --json
        """,
    )
    p.add_argument(
        "question",
        metavar="PYTANIE",
        help="Treść pytania.",
    )
    p.add_argument(
        "--store", "-s",
        metavar="NAZWA",
        required=True,
        help="Nazwa File Search Store (z prefiksem fileSearchStores/ lub bez).",
    )
    p.add_argument(
        "--model", "-m",
        default=None,
        metavar="MODEL",
        help=f"Model Gemini (domyślnie: GEMINI_MODEL_NAME lub {DEFAULT_MODEL}).",
    )
    out = p.add_mutually_exclusive_group()
    out.add_argument(
        "--json",
        action="store_true",
        help="Wypisz odpowiedź, cytaty i Document jako JSON.",
    )
    out.add_argument(
        "--raw",
        action="store_true",
        help="Wypisz surowy tekst odpowiedzi (bez renderowania).",
    )
    p.add_argument(
        "--citations", "-c",
        action="store_true",
        help="Wyświetl tabelę cytatów z File Search.",
    )
    p.set_defaults(func=run)
