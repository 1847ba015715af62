"""
file_search — integracja z Gemini File Search (store, upload, pytania).

Publiczne API:
  ingest_file(path, display_name, wait)     -> StoreResult
  create_store(display_name)                -> str
  upload_file(path, store_name)             -> operacja
  wait_until_indexed(store_name)            -> int
  ask(question, store_name, model)          -> Answer
  normalize_store_name(name)                -> str
  DEFAULT_MODEL, ALLOWED_MIME_TYPES
"""

from .ask import Answer, Citation, ask, normalize_store_name
from .gemini import DEFAULT_MODEL, get_client, resolve_model, with_retries
from .store import (
    ALLOWED_MIME_TYPES,
    IndexingTimeout,
    StoreResult,
    create_store,
    ingest_file,
    upload_file,
    validate_upload,
    wait_until_indexed,
)

__all__ = [
    "Answer",
    "Citation",
    "ask",
    "normalize_store_name",
    "DEFAULT_MODEL",
    "get_client",
    "resolve_model",
    "with_retries",
    "ALLOWED_MIME_TYPES",
    "IndexingTimeout",
    "StoreResult",
    "create_store",
    "ingest_file",
    "upload_file",
    "validate_upload",
    "wait_until_indexed",
]
