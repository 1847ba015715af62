"""
data_model/inlines.py — spany inline wewnątrz bloku tekstu.

Każdy wariant przechowuje wyłącznie treść bez ograniczników; pole
`source` odtwarza dokładny fragment wejścia, który span pokrywa
(treść + ograniczniki). Spany się nie zagnieżdżają.

  Text    — zwykły tekst
  Code    — `kod`
  Bold    — **pogrubienie**
  Italic  — *kursywa*
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Text:
    text: str

    kind: ClassVar[str] = "text"
    delimiter: ClassVar[str] = ""

    @property
    def source(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Code:
    text: str

    kind: ClassVar[str] = "code"
    delimiter: ClassVar[str] = "`"

    @property
    def source(self) -> str:
        return f"`{self.text}`"


@dataclass(frozen=True, slots=True)
class Bold:
    text: str

    kind: ClassVar[str] = "bold"
    delimiter: ClassVar[str] = "**"

    @property
    def source(self) -> str:
        return f"**{self.text}**"


@dataclass(frozen=True, slots=True)
class Italic:
    text: str

    kind: ClassVar[str] = "italic"
    delimiter: ClassVar[str] = "*"

    @property
    def source(self) -> str:
        return f"*{self.text}*"


type Inline = Text | Code | Bold | Italic

# Sekwencja spanów pokrywająca tekst bloku w całości.
type InlineSeq = tuple[Inline, ...]
