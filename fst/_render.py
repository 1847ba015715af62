"""Mapowanie Document na renderowalne obiekty rich (terminal)."""

from __future__ import annotations

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from data_model.documents import Block, BulletList, CodeBlock, Document, Heading, Paragraph
from data_model.inlines import InlineSeq

INLINE_STYLE: dict[str, str | None] = {
    "text":   None,
    "bold":   "bold",
    "italic": "italic",
    "code":   "bold cyan",
}

HEADING_STYLE: dict[int, str] = {
    1: "bold underline magenta",
    2: "bold magenta",
    3: "bold",
}

_BULLET = "• "


def inline_text(spans: InlineSeq) -> Text:
    text = Text()
    for span in spans:
        text.append(span.text, style=INLINE_STYLE.get(span.kind))
    return text


def render_block(block: Block) -> RenderableType:
    match block:
        case Heading(level=level, content=content):
            text = inline_text(content)
            text.stylize(HEADING_STYLE.get(level, "bold"))
            return text
        case Paragraph(content=content):
            return inline_text(content)
        case CodeBlock(language=language, lines=lines):
            syntax = Syntax("\n".join(lines), language or "text", word_wrap=True)
            return Panel(syntax, title=language or None, title_align="left", box=box.SQUARE, expand=False)
        case BulletList(items=items):
            return Text("\n").join(Text(_BULLET) + inline_text(item) for item in items)
    raise TypeError(f"Nieznany typ bloku: {type(block).__name__}")


def render_document(document: Document) -> Group:
    """Bloki rozdzielone pustą linią."""
    renderables: list[RenderableType] = []
    for i, block in enumerate(document):
        if i:
            renderables.append(Text(""))
        renderables.append(render_block(block))
    return Group(*renderables)
