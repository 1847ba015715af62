"""
md_parser — parser podzbioru markdown: segmentacja bloków + spany inline.

Publiczne API:
  segment(text)          -> Document     (czysta funkcja, bez fallbacku)
  resolve(text)          -> InlineSeq
  parse_answer(text)     -> Document     (fallback: surowy tekst jako akapit)
  source_of(spans)       -> str
  to_dict(document)      -> list[dict]
  to_json(document)      -> str
  to_plain_text(document)-> str
"""

from .export import to_dict, to_json, to_plain_text
from .inline import resolve, source_of
from .parser import parse_answer
from .segmenter import segment

__all__ = [
    "segment",
    "resolve",
    "parse_answer",
    "source_of",
    "to_dict",
    "to_json",
    "to_plain_text",
]
