"""
file_search/store.py — tworzenie File Search Store i indeksowanie pliku.

Przepływ ingest_file():
  walidacja typu pliku → create_store() → upload_file()
  → wait_until_indexed() (polling co 3 s, maks. 60 prób ≈ 3 min)
  → StoreResult

Publiczne API:
  ALLOWED_MIME_TYPES
  guess_mime_type(path)                          -> str | None
  validate_upload(path)                          -> str (mime)
  create_store(display_name, client)             -> str (nazwa store)
  upload_file(path, store_name, mime, client)    -> operacja uploadu
  wait_until_indexed(store_name, client, ...)    -> int (liczba dokumentów)
  ingest_file(path, ...)                         -> StoreResult
"""

from __future__ import annotations

import mimetypes
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from google import genai

from file_search.gemini import get_client, resolve_api_key, with_retries

ALLOWED_MIME_TYPES: tuple[str, ...] = (
    "application/pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",  # DOCX
    "application/msword",  # DOC (stary format)
    "application/json",
    "text/markdown",
    "text/plain",
    "text/x-markdown",
)

# mimetypes nie zna markdown na każdej platformie
_SUFFIX_MIME: dict[str, str] = {
    ".md": "text/markdown",
    ".markdown": "text/markdown",
    ".txt": "text/plain",
    ".json": "application/json",
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

POLL_INTERVAL_S   = 3.0
MAX_POLL_ATTEMPTS = 60


class IndexingTimeout(RuntimeError):
    """Indeksowanie nie zakończyło się w limicie prób; store istnieje i można ponowić."""

    def __init__(self, store_name: str, attempts: int) -> None:
        super().__init__(
            f"Indeksowanie nie zakończyło się po {attempts} próbach. "
            f"Spróbuj później (store: {store_name})."
        )
        self.store_name = store_name
        self.attempts = attempts


@dataclass(slots=True)
class StoreResult:
    store_name: str
    file_name: str
    mime_type: str
    active_documents: int | None = None   # None = nie czekano na indeks


# ---------------------------------------------------------------------------
# Walidacja pliku
# ---------------------------------------------------------------------------

def guess_mime_type(path: str | Path) -> str | None:
    path = Path(path)
    mime = _SUFFIX_MIME.get(path.suffix.lower())
    if mime:
        return mime
    mime, _ = mimetypes.guess_type(path.name)
    return mime


def validate_upload(path: str | Path) -> str:
    """
    Sprawdza istnienie pliku i typ MIME; zwraca MIME.

    Raises:
        FileNotFoundError: plik nie istnieje.
        ValueError:        niedozwolony typ pliku.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Plik nie istnieje: {path}")
    mime = guess_mime_type(path)
    if mime not in ALLOWED_MIME_TYPES:
        raise ValueError(
            f"Niedozwolony typ pliku ({mime or 'nieznany'}). "
            f"Dozwolone: {', '.join(ALLOWED_MIME_TYPES)}"
        )
    return mime


# ---------------------------------------------------------------------------
# Operacje na store
# ---------------------------------------------------------------------------

def _client(client: genai.Client | None, api_key: str | None) -> genai.Client:
    return client if client is not None else get_client(resolve_api_key(api_key))


def create_store(
    display_name: str | None = None,
    client: genai.Client | None = None,
    api_key: str | None = None,
) -> str:
    """Tworzy pusty File Search Store i zwraca jego pełną nazwę zasobu."""
    gc = _client(client, api_key)
    name = display_name or f"store-{int(time.time() * 1000)}"
    store = with_retries(
        lambda: gc.file_search_stores.create(config={"display_name": name})
    )
    if not store.name:
        raise RuntimeError("Gemini nie zwrócił nazwy utworzonego store.")
    return store.name


def upload_file(
    path: str | Path,
    store_name: str,
    mime_type: str | None = None,
    client: genai.Client | None = None,
    api_key: str | None = None,
) -> Any:
    """Wysyła plik do store; zwraca operację uploadu z API."""
    path = Path(path)
    gc = _client(client, api_key)
    mime = mime_type or validate_upload(path)
    return with_retries(
        lambda: gc.file_search_stores.upload_to_file_search_store(
            file=str(path),
            file_search_store_name=store_name,
            config={"mime_type": mime, "display_name": path.name},
        )
    )


def wait_until_indexed(
    store_name: str,
    client: genai.Client | None = None,
    api_key: str | None = None,
    poll_interval: float = POLL_INTERVAL_S,
    max_attempts: int = MAX_POLL_ATTEMPTS,
) -> int:
    """
    Czeka aż store ma co najmniej jeden aktywny dokument.

    Zwraca active_documents_count. Po max_attempts rzuca IndexingTimeout.
    """
    gc = _client(client, api_key)
    for attempt in range(1, max_attempts + 1):
        time.sleep(poll_interval)
        info = with_retries(lambda: gc.file_search_stores.get(name=store_name))
        count = getattr(info, "active_documents_count", None)
        if isinstance(count, int) and count > 0:
            return count
        print(f"[info] indeksowanie… ({attempt}/{max_attempts})", file=sys.stderr)
    raise IndexingTimeout(store_name, max_attempts)


def ingest_file(
    path: str | Path,
    display_name: str | None = None,
    wait: bool = True,
    client: genai.Client | None = None,
    api_key: str | None = None,
    poll_interval: float = POLL_INTERVAL_S,
    max_attempts: int = MAX_POLL_ATTEMPTS,
) -> StoreResult:
    """Pełny przepływ: walidacja → store → upload → (opcjonalnie) czekanie na indeks."""
    path = Path(path)
    mime = validate_upload(path)
    gc = _client(client, api_key)

    store_name = create_store(display_name, client=gc)
    upload_file(path, store_name, mime_type=mime, client=gc)

    result = StoreResult(store_name=store_name, file_name=path.name, mime_type=mime)
    if wait:
        result.active_documents = wait_until_indexed(
            store_name,
            client=gc,
            poll_interval=poll_interval,
            max_attempts=max_attempts,
        )
    return result
