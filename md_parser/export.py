"""
md_parser/export.py — mapowanie Document na formaty wyjściowe.

  to_dict(document)        -> list[dict]   (gotowe do json.dumps)
  to_json(document)        -> str
  to_plain_text(document)  -> str          (bez znaczników markdown)

Dyskryminator `type` w każdym słowniku:
  bloki:  heading | paragraph | code_block | bullet_list
  spany:  text | code | bold | italic
"""

from __future__ import annotations

import json
from typing import Any

from data_model.documents import Block, BulletList, CodeBlock, Document, Heading, Paragraph
from data_model.inlines import InlineSeq


def to_dict(document: Document) -> list[dict[str, Any]]:
    return [_block_to_dict(b) for b in document]


def to_json(document: Document, indent: int | None = 2) -> str:
    return json.dumps(to_dict(document), ensure_ascii=False, indent=indent)


def to_plain_text(document: Document) -> str:
    """
    Tekst bez znaczników: treść spanów sklejona, punkty listy z "- ",
    linie kodu dosłownie; bloki rozdzielone pustą linią.
    """
    parts: list[str] = []
    for block in document:
        match block:
            case Heading(content=content) | Paragraph(content=content):
                parts.append(_plain(content))
            case CodeBlock(lines=lines):
                parts.append("\n".join(lines))
            case BulletList(items=items):
                parts.append("\n".join(f"- {_plain(item)}" for item in items))
    return "\n\n".join(parts)


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _spans_to_dict(spans: InlineSeq) -> list[dict[str, str]]:
    return [{"type": s.kind, "text": s.text} for s in spans]


def _plain(spans: InlineSeq) -> str:
    return "".join(s.text for s in spans)


def _block_to_dict(block: Block) -> dict[str, Any]:
    data: dict[str, Any] = {"type": block.kind}
    match block:
        case Heading(level=level, content=content):
            data["level"] = level
            data["content"] = _spans_to_dict(content)
        case Paragraph(content=content):
            data["content"] = _spans_to_dict(content)
        case CodeBlock(language=language, lines=lines):
            data["language"] = language
            data["lines"] = list(lines)
        case BulletList(items=items):
            data["items"] = [_spans_to_dict(item) for item in items]
    data["line_start"] = block.line_start
    data["line_end"] = block.line_end
    return data
