"""
data_model — struktury danych dokumentu markdown.

Użycie:
  from data_model import Document, Heading, Paragraph, Text, Bold, ...

Moduły:
  documents — Document, Heading, Paragraph, CodeBlock, BulletList, Block
  inlines   — Text, Code, Bold, Italic, Inline, InlineSeq

Węzły są niemutowalne (frozen dataclasses), niosą wyłącznie treść
semantyczną; renderowanie należy do wywołującego.
"""

from .documents import (
    Block,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    Paragraph,
)
from .inlines import (
    Bold,
    Code,
    Inline,
    InlineSeq,
    Italic,
    Text,
)

__all__ = [
    # documents
    "Block",
    "BulletList",
    "CodeBlock",
    "Document",
    "Heading",
    "Paragraph",
    # inlines
    "Bold",
    "Code",
    "Inline",
    "InlineSeq",
    "Italic",
    "Text",
]
