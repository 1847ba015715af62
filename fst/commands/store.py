"""Komenda: fst store — tworzy File Search Store i indeksuje w nim plik."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from google.genai import errors as genai_errors
from rich.console import Console

from file_search.store import ALLOWED_MIME_TYPES, IndexingTimeout, ingest_file

console = Console()


def run(args: argparse.Namespace) -> None:
    path = Path(args.file)

    print(f"Wysyłam {path} do nowego File Search Store...", file=sys.stderr)

    try:
        result = ingest_file(path, display_name=args.name, wait=not args.no_wait)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)
    except IndexingTimeout as e:
        console.print(f"[yellow]{e}[/yellow]")
        console.print(f"Store: [cyan]{e.store_name}[/cyan]")
        raise SystemExit(1)
    except (RuntimeError, genai_errors.APIError) as e:
        console.print(f"[red]Błąd Gemini API:[/red] {e}")
        raise SystemExit(1)

    if args.json:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
        return

    if result.active_documents is None:
        console.print("[yellow]Pominięto czekanie na indeksowanie.[/yellow]")
    else:
        console.print(f"[green]Zaindeksowano[/green] ({result.active_documents} dok.)")
    console.print(f"Store: [bold cyan]{result.store_name}[/bold cyan]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "store",
        help="Tworzy File Search Store i indeksuje w nim plik.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""
Tworzy nowy File Search Store w Gemini, wysyła do niego plik i czeka
aż zostanie zaindeksowany (polling co 3 s, maks. ok. 3 min).

Dozwolone typy: {', '.join(ALLOWED_MIME_TYPES)}

Wymaga zmiennej środowiskowej GEMINI_API_KEY (lub pliku .env).

Przykłady:
  fst store raport.pdf
  fst store notatki.md --name notatki
  fst store raport.pdf --no-wait --json
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Plik do zaindeksowania (PDF, DOC/DOCX, TXT, Markdown, JSON).",
    )
    p.add_argument(
        "--name", "-n",
        metavar="NAZWA",
        default=None,
        help="Nazwa wyświetlana store (domyślnie: store-<znacznik czasu>).",
    )
    p.add_argument(
        "--no-wait",
        action="store_true",
        help="Nie czekaj na zakończenie indeksowania.",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Wypisz wynik jako JSON.",
    )
    p.set_defaults(func=run)
