"""Whole-document JSON storage for the offer and payout files.

Each document is read and written in one piece; there is no streaming and no
partial-write protection.
"""

from __future__ import annotations

import asyncio
import json
import math
from pathlib import Path
from typing import Any

import structlog

from offer_editor.exceptions import DocumentNotFoundError, DocumentParseError, StorageError

logger = structlog.get_logger()

Document = Any


def _json_safe(value: Any) -> Any:
    """Replace non-finite floats with None; JSON has no literal for them."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


def dumps_document(document: Document) -> str:
    """Serialize a document with 2-space indentation."""
    return json.dumps(_json_safe(document), indent=2, ensure_ascii=False)


def load_document(path: Path | str) -> Document:
    """Read and parse a whole JSON file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as exc:
        raise DocumentNotFoundError(f"File not found: {path}", path) from exc
    except OSError as exc:
        raise StorageError(f"Cannot read {path}: {exc.strerror or exc}", path) from exc

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentParseError(f"Invalid JSON in {path}: {exc}", path) from exc

    logger.info(
        "Loaded document",
        path=str(path),
        records=len(document) if isinstance(document, list) else None,
    )
    return document


def save_document(path: Path | str, document: Document) -> None:
    """Serialize a document and overwrite the file with it."""
    path = Path(path)
    text = dumps_document(document)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as exc:
        raise StorageError(f"Cannot write {path}: {exc.strerror or exc}", path) from exc

    logger.info(
        "Saved document",
        path=str(path),
        records=len(document) if isinstance(document, list) else None,
    )


async def load_documents(*paths: Path | str) -> list[Document]:
    """Load several documents concurrently. The first failure propagates."""
    return list(await asyncio.gather(*(asyncio.to_thread(load_document, p) for p in paths)))


async def save_documents(*items: tuple[Path | str, Document]) -> None:
    """Save several ``(path, document)`` pairs concurrently."""
    await asyncio.gather(*(asyncio.to_thread(save_document, p, doc) for p, doc in items))
