"""Errors raised while editing offers."""

from __future__ import annotations

from pathlib import Path


class OfferEditorError(Exception):
    """Base error for the offer editor."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StorageError(OfferEditorError):
    """A data file could not be read or written."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class DocumentNotFoundError(StorageError):
    """The data file does not exist."""


class DocumentParseError(StorageError):
    """The data file does not contain valid JSON."""


class PromptClosedError(OfferEditorError):
    """The operator input stream ended before a question was answered."""


class InvalidAmountError(OfferEditorError):
    """An amount answer was not numeric (strict mode only)."""

    def __init__(self, answer: str):
        super().__init__(f"Invalid amount: {answer!r}")
        self.answer = answer
