"""Offer schemas."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Offer(BaseModel):
    """Offer record as stored in the offer catalog."""

    model_config = ConfigDict(extra="allow")

    id: str
    # Stored values are shown as-is; the editor never rejects them
    title: Any = ""
    description: Any = ""
    categories: Any = []


class OfferUpdate(BaseModel):
    """Operator-supplied changes to an offer. ``None`` keeps the stored value."""

    title: Optional[str] = None
    description: Optional[str] = None
    categories: Optional[list[str]] = None

    @classmethod
    def from_answers(cls, title: str, description: str, categories: str) -> "OfferUpdate":
        """Build an update from raw prompt answers.

        Empty answers mean "keep existing". Categories are comma separated and
        each segment is stripped.
        """
        return cls(
            title=title or None,
            description=description or None,
            categories=[c.strip() for c in categories.split(",")] if categories else None,
        )

    def apply(self, record: dict[str, Any]) -> dict[str, Any]:
        """Write the changed fields into ``record`` in place and return it."""
        for key, value in self.model_dump(exclude_none=True).items():
            record[key] = value
        return record
