"""
file_search/ask.py — pytanie do modelu z narzędziem File Search.

Przepływ ask():
  walidacja wejścia → generate_content(tools=[FileSearch(store)])
  → tekst odpowiedzi (response.text, fallback: sklejone parts[].text)
  → cytaty z grounding_metadata.grounding_chunks
  → Answer (tekst + cytaty + Document z md_parser.parse_answer)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from google import genai
from google.genai import types

from data_model.documents import Document
from file_search.gemini import get_client, resolve_api_key, resolve_model, with_retries
from md_parser.parser import parse_answer

STORE_PREFIX = "fileSearchStores/"

# Numer strony zakodowany w nazwie wyświetlanej, np. "raport-page-12.pdf"
_PAGE_RE = re.compile(r"page-(\d+)")

_PREVIEW_CHARS = 500


@dataclass(slots=True)
class Citation:
    uri: str | None = None
    title: str | None = None
    page_number: int | None = None
    text: str | None = None


@dataclass(slots=True)
class Answer:
    text: str
    citations: list[Citation] = field(default_factory=list)
    document: Document = field(default_factory=Document)


def normalize_store_name(store_name: str) -> str:
    """Dokleja prefiks fileSearchStores/ gdy podano samą nazwę."""
    if store_name.startswith(STORE_PREFIX):
        return store_name
    return STORE_PREFIX + store_name


def ask(
    question: str,
    store_name: str,
    model: str | None = None,
    client: genai.Client | None = None,
    api_key: str | None = None,
) -> Answer:
    """
    Zadaje pytanie modelowi z dostępem do podanego File Search Store.

    Raises:
        ValueError:    puste pytanie lub nazwa store, brak klucza API.
        RuntimeError:  model nie zwrócił tekstu (komunikat zawiera podgląd
                       treści znalezionej przez File Search, jeśli była).
    """
    if not store_name or not store_name.strip():
        raise ValueError("Nazwa store jest wymagana.")
    if not question or not question.strip():
        raise ValueError("Pytanie nie może być puste.")

    model = resolve_model(model)
    gc = client if client is not None else get_client(resolve_api_key(api_key))

    config = types.GenerateContentConfig(
        tools=[
            types.Tool(
                file_search=types.FileSearch(
                    file_search_store_names=[normalize_store_name(store_name.strip())],
                )
            )
        ],
    )
    response = with_retries(
        lambda: gc.models.generate_content(model=model, contents=question, config=config),
        model=model,
    )

    text = extract_text(response)
    if not text:
        raise RuntimeError(_empty_answer_message(response))

    return Answer(
        text=text,
        citations=extract_citations(response),
        document=parse_answer(text),
    )


# ---------------------------------------------------------------------------
# Kształtowanie odpowiedzi
# ---------------------------------------------------------------------------

def _first_candidate(response: Any) -> Any:
    candidates = getattr(response, "candidates", None) or []
    return candidates[0] if candidates else None


def extract_text(response: Any) -> str:
    """response.text, a gdy pusty: sklejone teksty z content.parts."""
    text = getattr(response, "text", None)
    if text:
        return text
    candidate = _first_candidate(response)
    content = getattr(candidate, "content", None)
    parts = getattr(content, "parts", None) or []
    return "".join(p.text for p in parts if getattr(p, "text", None))


def extract_citations(response: Any) -> list[Citation]:
    candidate = _first_candidate(response)
    metadata = getattr(candidate, "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    citations: list[Citation] = []
    for chunk in chunks:
        ctx = getattr(chunk, "retrieved_context", None)
        if ctx is None:
            continue
        title = getattr(ctx, "title", None)
        page = None
        if title:
            m = _PAGE_RE.search(title)
            if m:
                page = int(m.group(1))
        citations.append(Citation(
            uri=getattr(ctx, "uri", None),
            title=title,
            page_number=page,
            text=getattr(ctx, "text", None),
        ))
    return citations


def _empty_answer_message(response: Any) -> str:
    citations = extract_citations(response)
    retrieved = next((c.text for c in citations if c.text), None)
    if retrieved:
        preview = retrieved[:_PREVIEW_CHARS]
        return (
            "Model nie wygenerował tekstu, ale File Search znalazł powiązaną treść:\n"
            f"{preview}…"
        )
    return (
        "Model nie zwrócił odpowiedzi tekstowej. "
        "Sprawdź konfigurację modelu i File Search Store."
    )
