"""
md_parser/inline.py — rozwiązywanie spanów inline w tekście bloku.

Architektura:
  tekst → kandydaci (kod | pogrubienie | kursywa)
  → sortowanie stabilne po pozycji startu
  → zachłanne odrzucanie nakładających się kandydatów
  → uzupełnienie luk spanami Text
  → InlineSeq pokrywająca tekst dokładnie (bez luk i nakładek)

Kolejność rodzin przed sortowaniem: kod, pogrubienie, kursywa; przy równym
starcie wygrywa wcześniejsza rodzina.

Publiczne API:
  resolve(text)       -> InlineSeq
  source_of(spans)    -> str
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from data_model.inlines import Bold, Code, Inline, InlineSeq, Italic, Text

# ---------------------------------------------------------------------------
# Wzorce: treść niepusta i bez znaku ogranicznika
# ---------------------------------------------------------------------------

_CODE_RE   = re.compile(r"`([^`]+)`")
_BOLD_RE   = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC_RE = re.compile(r"\*([^*]+)\*")


@dataclass(frozen=True, slots=True)
class _Candidate:
    start: int
    end: int          # wyłącznie
    span: Inline


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def resolve(text: str) -> InlineSeq:
    """
    Dzieli tekst na uporządkowaną sekwencję spanów inline.

    Funkcja totalna: dowolny string (także pusty) daje sekwencję, której
    `source_of()` jest równe wejściu. Niedomknięte ograniczniki zostają
    dosłownie w spanach Text.
    """
    if not text:
        return ()

    code = _find(_CODE_RE, text, Code)
    bold = _find(_BOLD_RE, text, Bold)
    italic = _italic_candidates(text, bold)

    # sorted() jest stabilne, więc remisy rozstrzyga kolejność rodzin
    candidates = sorted(code + bold + italic, key=lambda c: c.start)

    kept: list[_Candidate] = []
    for cand in candidates:
        # kept jest posortowane i rozłączne, więc wystarczy ostatni koniec
        if kept and cand.start < kept[-1].end:
            continue
        kept.append(cand)

    return _fill_gaps(text, kept)


def source_of(spans: Iterable[Inline]) -> str:
    """Odtwarza tekst źródłowy pokryty przez spany (z ogranicznikami)."""
    return "".join(s.source for s in spans)


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _find(
    pattern: re.Pattern[str],
    text: str,
    make: Callable[[str], Inline],
    pos: int = 0,
    endpos: int | None = None,
) -> list[_Candidate]:
    """Rozłączne dopasowania wzorca od lewej do prawej w [pos, endpos)."""
    if endpos is None:
        endpos = len(text)
    return [
        _Candidate(m.start(), m.end(), make(m.group(1)))
        for m in pattern.finditer(text, pos, endpos)
    ]


def _italic_candidates(text: str, bold: list[_Candidate]) -> list[_Candidate]:
    """
    Kursywa szukana tylko w odcinkach tekstu między kandydatami pogrubienia.

    Gwiazdki należące do `**...**` nigdy nie otwierają ani nie zamykają
    kursywy, więc kandydat kursywy nie zaczyna się wewnątrz pogrubienia
    ani w nie nie wchodzi.
    """
    found: list[_Candidate] = []
    pos = 0
    for b in bold:
        found.extend(_find(_ITALIC_RE, text, Italic, pos, b.start))
        pos = b.end
    found.extend(_find(_ITALIC_RE, text, Italic, pos))
    return found


def _fill_gaps(text: str, kept: list[_Candidate]) -> InlineSeq:
    spans: list[Inline] = []
    pos = 0
    for cand in kept:
        if cand.start > pos:
            spans.append(Text(text[pos:cand.start]))
        spans.append(cand.span)
        pos = cand.end
    if pos < len(text):
        spans.append(Text(text[pos:]))
    return tuple(spans)
