"""
file_search/gemini.py — klient Gemini API i obsługa błędów wywołań.

Zmienne środowiskowe:
  GEMINI_API_KEY      klucz API (wymagany)
  GEMINI_MODEL_NAME   model (domyślnie gemini-2.5-flash; File Search działa
                      tylko z modelami Gemini 2.5)

Opcjonalnie plik .env w katalogu głównym projektu:
  GEMINI_API_KEY=AIza...

Publiczne API:
  get_client(api_key)                      -> genai.Client
  resolve_api_key(api_key)                 -> str
  resolve_model(model)                     -> str
  with_retries(call, model, max_retries)   -> T
"""

from __future__ import annotations

import functools
import os
import pathlib
import re
import sys
import time
from typing import Callable, TypeVar

from dotenv import load_dotenv
from google import genai
from google.genai import errors as genai_errors

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env", override=True)


DEFAULT_MODEL   = "gemini-2.5-flash"
DEFAULT_RETRIES = 3
_ENV_KEY        = "GEMINI_API_KEY"
_ENV_MODEL      = "GEMINI_MODEL_NAME"

T = TypeVar("T")


@functools.lru_cache(maxsize=4)
def get_client(api_key: str) -> genai.Client:
    """Zwraca (i cache'uje) klienta Gemini dla danego klucza API.

    Klient trzyma wewnętrzną pulę HTTP, więc jest współdzielony między
    wywołaniami zamiast tworzony za każdym razem.
    """
    return genai.Client(api_key=api_key)


# Liczba sekund z komunikatu API (np. "Please retry in 18.8s")
_RETRY_DELAY_RE = re.compile(r"retry[^\d]*(\d+(?:\.\d+)?)\s*s", re.IGNORECASE)


def resolve_api_key(api_key: str | None = None) -> str:
    """Klucz z argumentu lub z GEMINI_API_KEY; ValueError gdy brak."""
    key = api_key or os.getenv(_ENV_KEY)
    if not key:
        raise ValueError(
            f"Brak klucza Gemini API. "
            f"Ustaw zmienną środowiskową {_ENV_KEY} lub przekaż api_key."
        )
    return key


def resolve_model(model: str | None = None) -> str:
    return model or os.getenv(_ENV_MODEL) or DEFAULT_MODEL


def _parse_retry_delay(error: Exception) -> float | None:
    """Wyciąga sugerowany czas oczekiwania z błędu 429, jeśli jest dostępny."""
    m = _RETRY_DELAY_RE.search(str(error))
    if m:
        return float(m.group(1))
    # google-genai może udostępniać retry_delay bezpośrednio na obiekcie błędu
    delay = getattr(error, "retry_delay", None)
    if delay is not None:
        return float(delay)
    return None


def _is_daily_quota(error: Exception) -> bool:
    """Zwraca True gdy to wyczerpany dzienny limit (retry nie pomoże)."""
    return "PerDay" in str(error)


def with_retries(
    call: Callable[[], T],
    model: str = DEFAULT_MODEL,
    max_retries: int = DEFAULT_RETRIES,
) -> T:
    """
    Wykonuje `call()` i ponawia przy błędzie 429 (rate-limit).

    Przy 429 czeka sugerowany przez API czas (albo 5·2^n s) i ponawia,
    do max_retries razy. Dzienny limit quota nie jest ponawiany.
    404 oznacza nieznany model.

    Raises:
        RuntimeError:                  limit dzienny, rate-limit po wszystkich
                                       próbach, nieznany model.
        google.genai.errors.APIError:  pozostałe błędy API.
    """
    attempt = 0

    while True:
        try:
            return call()

        except genai_errors.ClientError as exc:
            if exc.code == 404:
                raise RuntimeError(
                    f"Model {model} nie został znaleziony. File Search działa tylko "
                    f"z modelami Gemini 2.5 — ustaw {_ENV_MODEL} na "
                    f"gemini-2.5-flash lub gemini-2.5-pro.\n"
                    f"Szczegóły API: {exc}"
                ) from exc

            if exc.code != 429:
                raise

            if _is_daily_quota(exc):
                raise RuntimeError(
                    f"Dzienny limit zapytań dla modelu {model} wyczerpany. "
                    f"Sprawdź plan i billing: https://ai.dev/rate-limit\n"
                    f"Szczegóły API: {exc}"
                ) from exc

            attempt += 1
            if attempt > max_retries:
                raise RuntimeError(
                    f"Rate-limit po {max_retries} próbach. Spróbuj później."
                ) from exc

            delay = _parse_retry_delay(exc) or (2 ** attempt * 5)
            print(
                f"[warn] 429 rate-limit — czekam {delay:.0f}s "
                f"(próba {attempt}/{max_retries})...",
                file=sys.stderr,
            )
            time.sleep(delay)
