"""Testy pytania z File Search (file_search.ask) na sztucznym kliencie."""

import importlib
from types import SimpleNamespace

import pytest

from data_model import Bold, Document, Heading, Paragraph, Text
from file_search.ask import Citation, ask, normalize_store_name

ask_mod = importlib.import_module("file_search.ask")


def _response(text=None, parts=None, chunks=None):
    candidate = SimpleNamespace(
        content=SimpleNamespace(parts=[SimpleNamespace(text=t) for t in (parts or [])]),
        grounding_metadata=SimpleNamespace(grounding_chunks=chunks or []),
    )
    return SimpleNamespace(text=text, candidates=[candidate])


def _chunk(title=None, uri=None, text=None):
    return SimpleNamespace(retrieved_context=SimpleNamespace(title=title, uri=uri, text=text))


class FakeModels:

    def __init__(self, response):
        self.response = response
        self.calls: list[dict] = []

    def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        return self.response


def _client(response):
    return SimpleNamespace(models=FakeModels(response))


# =============================================================================
# Walidacja i nazwa store
# =============================================================================

class TestInputs:

    @pytest.mark.parametrize("name,expected", [
        ("abc", "fileSearchStores/abc"),
        ("fileSearchStores/abc", "fileSearchStores/abc"),
    ])
    def test_normalize_store_name(self, name, expected):
        assert normalize_store_name(name) == expected

    @pytest.mark.parametrize("question,store", [
        ("", "abc"),
        ("   ", "abc"),
        ("Pytanie?", ""),
        ("Pytanie?", "  "),
    ])
    def test_invalid_inputs(self, question, store):
        client = _client(_response(text="x"))
        with pytest.raises(ValueError):
            ask(question, store, client=client)
        assert client.models.calls == []


# =============================================================================
# Odpowiedź
# =============================================================================

class TestAsk:

    def test_request_uses_file_search_tool(self, monkeypatch):
        monkeypatch.delenv("GEMINI_MODEL_NAME", raising=False)
        client = _client(_response(text="ok"))
        ask("O czym jest plik?", "abc", client=client)

        (call,) = client.models.calls
        assert call["model"] == "gemini-2.5-flash"
        assert call["contents"] == "O czym jest plik?"
        (tool,) = call["config"].tools
        assert tool.file_search.file_search_store_names == ["fileSearchStores/abc"]

    def test_explicit_model(self):
        client = _client(_response(text="ok"))
        ask("q", "abc", model="gemini-2.5-pro", client=client)
        assert client.models.calls[0]["model"] == "gemini-2.5-pro"

    def test_answer_document_is_parsed(self):
        client = _client(_response(text="# Wynik\nTo jest **ważne**."))
        answer = ask("q", "abc", client=client)
        assert answer.document == Document((
            Heading(level=1, content=(Text("Wynik"),)),
            Paragraph(content=(Text("To jest "), Bold("ważne"), Text("."))),
        ))

    def test_text_falls_back_to_parts(self):
        client = _client(_response(text=None, parts=["Część ", "druga", None]))
        answer = ask("q", "abc", client=client)
        assert answer.text == "Część druga"

    def test_citations(self):
        chunks = [
            _chunk(title="raport-page-12.pdf", uri="gs://x/raport", text="fragment 1"),
            _chunk(title="notatki.md", text="fragment 2"),
            SimpleNamespace(retrieved_context=None),
        ]
        answer = ask("q", "abc", client=_client(_response(text="ok", chunks=chunks)))
        assert answer.citations == [
            Citation(uri="gs://x/raport", title="raport-page-12.pdf", page_number=12, text="fragment 1"),
            Citation(uri=None, title="notatki.md", page_number=None, text="fragment 2"),
        ]

    def test_empty_answer_with_retrieved_content(self):
        response = _response(text=None, chunks=[_chunk(text="x" * 600)])
        with pytest.raises(RuntimeError, match="znalazł powiązaną treść") as exc_info:
            ask("q", "abc", client=_client(response))
        assert "x" * 500 + "…" in str(exc_info.value)
        assert "x" * 501 not in str(exc_info.value)

    def test_empty_answer_without_content(self):
        with pytest.raises(RuntimeError, match="nie zwrócił odpowiedzi"):
            ask("q", "abc", client=_client(_response(text=None)))

    def test_no_candidates(self):
        response = SimpleNamespace(text=None, candidates=None)
        with pytest.raises(RuntimeError):
            ask("q", "abc", client=_client(response))
        assert ask_mod.extract_citations(response) == []
