"""md_parser/parser.py — parsowanie odpowiedzi modelu do Document (z fallbackiem)."""

from __future__ import annotations

from data_model.documents import Document, Paragraph
from data_model.inlines import Text
from md_parser.segmenter import segment


def parse_answer(text: str) -> Document:
    """
    Parsuje tekst odpowiedzi do Document.

    Gdy segmentacja nie da żadnego bloku (pusty lub biały tekst), zwraca
    jeden akapit z surowym tekstem jako dosłowny Text — bez parsowania inline.
    """
    document = segment(text)
    if document.blocks:
        return document
    content = (Text(text),) if text else ()
    return Document((Paragraph(content=content, line_start=0, line_end=text.count("\n") + 1),))
