"""
md_parser/segmenter.py — podział surowego tekstu na bloki.

Jedno przejście od lewej do prawej po liniach (`text.split("\\n")`).
Kolejność klasyfikacji linii:
  1. płotek ```   — przełącza tryb bloku kodu (język = reszta linii)
  2. wewnątrz płotka — linia dosłownie do bloku kodu, bez klasyfikacji
  3. nagłówek      — "### ", "## ", "# " (najdłuższy prefiks pierwszy)
  4. lista         — ciągły przebieg linii "- " / "* "
  5. pusta linia   — separator, zamyka akapit
  6. pozostałe     — bufor akapitu (łączony "\\n")

Niedomknięty płotek zamyka się niejawnie na końcu wejścia.
"""

from __future__ import annotations

import re

from data_model.documents import Block, BulletList, CodeBlock, Document, Heading, Paragraph
from md_parser.inline import resolve

_FENCE = "```"

# Sprawdzane w tej kolejności: "### x" to poziom 3, nie "#" + "##".
_HEADING_MARKERS: tuple[tuple[str, int], ...] = (
    ("### ", 3),
    ("## ", 2),
    ("# ", 1),
)

_BULLET_RE = re.compile(r"^[-*]\s")
_BULLET_MARKER_LEN = 2


def segment(text: str) -> Document:
    """
    Parsuje tekst do Document. Funkcja totalna — nigdy nie rzuca wyjątku.

    Pusty lub biały tekst daje pusty Document; zastępczy akapit dla takiego
    wejścia dokłada dopiero `md_parser.parser.parse_answer()`.
    """
    lines = text.split("\n")
    blocks: list[Block] = []

    paragraph: list[str] = []
    paragraph_start = 0

    in_fence = False
    fence_start = 0
    fence_language = ""
    fenced: list[str] = []

    def flush_paragraph() -> None:
        nonlocal paragraph
        if not paragraph:
            return
        joined = "\n".join(paragraph)
        if joined.strip():
            blocks.append(Paragraph(
                content=resolve(joined),
                line_start=paragraph_start,
                line_end=paragraph_start + len(paragraph),
            ))
        paragraph = []

    def flush_fence(end: int) -> None:
        nonlocal in_fence, fence_language, fenced
        blocks.append(CodeBlock(
            language=fence_language,
            lines=tuple(fenced),
            line_start=fence_start,
            line_end=end,
        ))
        in_fence = False
        fence_language = ""
        fenced = []

    i = 0
    while i < len(lines):
        line = lines[i]
        stripped = line.strip()

        if stripped.startswith(_FENCE):
            if in_fence:
                flush_fence(i + 1)
            else:
                flush_paragraph()
                in_fence = True
                fence_start = i
                fence_language = stripped[len(_FENCE):].strip()
            i += 1
            continue

        if in_fence:
            fenced.append(line)
            i += 1
            continue

        heading = _match_heading(line)
        if heading is not None:
            flush_paragraph()
            level, rest = heading
            blocks.append(Heading(level=level, content=resolve(rest), line_start=i, line_end=i + 1))
            i += 1
            continue

        if _BULLET_RE.match(line):
            flush_paragraph()
            end = _bullet_run_end(lines, i)
            items = tuple(resolve(item[_BULLET_MARKER_LEN:]) for item in lines[i:end])
            blocks.append(BulletList(items=items, line_start=i, line_end=end))
            i = end
            continue

        if not stripped:
            flush_paragraph()
            i += 1
            continue

        if not paragraph:
            paragraph_start = i
        paragraph.append(line)
        i += 1

    flush_paragraph()
    if in_fence:
        flush_fence(len(lines))

    return Document(tuple(blocks))


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _match_heading(line: str) -> tuple[int, str] | None:
    """Zwraca (poziom, treść po markerze) albo None."""
    for marker, level in _HEADING_MARKERS:
        if line.startswith(marker):
            return level, line[len(marker):]
    return None


def _bullet_run_end(lines: list[str], start: int) -> int:
    """Indeks pierwszej linii za ciągłym przebiegiem punktów listy."""
    end = start
    while end < len(lines) and _BULLET_RE.match(lines[end]):
        end += 1
    return end
