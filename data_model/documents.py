"""
data_model/documents.py — model dokumentu: bloki i Document.

Blok odpowiada jednej jednostce strukturalnej tekstu (nagłówek, akapit,
blok kodu, lista punktowana). Pola `line_start`/`line_end` to zakres linii
wejścia (0-based, koniec wyłączny) zużytych przez blok, łącznie z liniami
płotka ```; nie biorą udziału w porównaniach.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator

from data_model.inlines import InlineSeq


@dataclass(frozen=True, slots=True)
class Heading:
    level: int                # 1..3
    content: InlineSeq
    line_start: int = field(default=0, compare=False)
    line_end: int = field(default=0, compare=False)

    kind: ClassVar[str] = "heading"


@dataclass(frozen=True, slots=True)
class Paragraph:
    content: InlineSeq
    line_start: int = field(default=0, compare=False)
    line_end: int = field(default=0, compare=False)

    kind: ClassVar[str] = "paragraph"


@dataclass(frozen=True, slots=True)
class CodeBlock:
    language: str             # może być pusty
    lines: tuple[str, ...]    # dosłownie, bez parsowania inline
    line_start: int = field(default=0, compare=False)
    line_end: int = field(default=0, compare=False)

    kind: ClassVar[str] = "code_block"


@dataclass(frozen=True, slots=True)
class BulletList:
    items: tuple[InlineSeq, ...]
    line_start: int = field(default=0, compare=False)
    line_end: int = field(default=0, compare=False)

    kind: ClassVar[str] = "bullet_list"


type Block = Heading | Paragraph | CodeBlock | BulletList


@dataclass(frozen=True, slots=True)
class Document:
    """Uporządkowana, niemutowalna sekwencja bloków."""
    blocks: tuple[Block, ...] = ()

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def __getitem__(self, index: int) -> Block:
        return self.blocks[index]
