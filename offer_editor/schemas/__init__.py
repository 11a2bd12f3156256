"""Pydantic schemas for offer and payout records."""

from offer_editor.schemas.offer import Offer, OfferUpdate
from offer_editor.schemas.payout import Payout, PayoutType

__all__ = [
    "Offer",
    "OfferUpdate",
    "Payout",
    "PayoutType",
]
