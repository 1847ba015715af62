"""
fst — narzędzie CLI File Search Tool.

Użycie:
  fst <komenda> [opcje]

Komendy:
  parse   Parsuje tekst markdown do bloków (render / JSON / tekst).
  store   Tworzy File Search Store i indeksuje w nim plik.
  ask     Zadaje pytanie do zaindeksowanego pliku i renderuje odpowiedź.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from fst.commands import ask as cmd_ask
from fst.commands import parse as cmd_parse
from fst.commands import store as cmd_store


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fst",
        description="File Search Tool — parser markdown i Gemini File Search.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="fst 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_parse.add_parser(subparsers)
    cmd_store.add_parser(subparsers)
    cmd_ask.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
