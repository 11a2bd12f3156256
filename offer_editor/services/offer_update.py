"""Offer update session: locate, prompt, merge, persist."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import structlog

from offer_editor.schemas.offer import Offer, OfferUpdate
from offer_editor.schemas.payout import Payout
from offer_editor.services.payout_form import collect_payout
from offer_editor.services.prompt import Prompt
from offer_editor.services.storage import load_documents, save_documents

logger = structlog.get_logger()


class UpdateStatus(str, Enum):
    UPDATED = "updated"
    NOT_FOUND = "not_found"


@dataclass
class UpdateResult:
    """Outcome of one update session."""

    status: UpdateStatus
    offer_id: str
    offer: Optional[Offer] = None
    payout: Optional[Payout] = None
    payout_created: bool = False


def _display(value: Any) -> str:
    """Render a stored value inside a prompt's default brackets."""
    if value is None:
        return "null"
    if isinstance(value, list):
        return ", ".join("" if item is None else str(item) for item in value)
    return str(value)


def find_index(records: list[dict[str, Any]], key: str, value: str) -> int:
    """Return the index of the first record with ``record[key] == value``, or -1."""
    for i, record in enumerate(records):
        if isinstance(record, dict) and record.get(key) == value:
            return i
    return -1


async def prompt_offer_update(prompt: Prompt, offer: Offer) -> OfferUpdate:
    """Ask for new title, description and categories."""
    title = await prompt.ask(f"Enter new title [{_display(offer.title)}]: ")
    description = await prompt.ask(f"Enter new description [{_display(offer.description)}]: ")
    categories = await prompt.ask(
        f"Enter new categories comma separated [{_display(offer.categories)}]: "
    )
    return OfferUpdate.from_answers(title, description, categories)


async def update_offer(
    prompt: Prompt,
    *,
    offers_path: Path | str,
    payouts_path: Path | str,
    strict_numbers: bool = False,
) -> UpdateResult:
    """Run one interactive update of an offer and its payout.

    Nothing is written when the offer id is unknown. When the offer has no
    payout yet, the new payout is appended to the schedule.
    """
    offer_id = await prompt.ask("Enter the Offer ID to update: ")

    offers, payouts = await load_documents(offers_path, payouts_path)

    offer_index = find_index(offers, "id", offer_id)
    if offer_index == -1:
        logger.info("Offer not found", offer_id=offer_id)
        prompt.say("Offer not found!")
        return UpdateResult(status=UpdateStatus.NOT_FOUND, offer_id=offer_id)

    offer_record = offers[offer_index]
    payout_index = find_index(payouts, "offerId", offer_id)
    existing_payout = payouts[payout_index] if payout_index != -1 else {}

    changes = await prompt_offer_update(prompt, Offer.model_validate(offer_record))
    changes.apply(offer_record)

    payout = await collect_payout(prompt, existing_payout, strict_numbers=strict_numbers)
    payout.offer_id = offer_id
    payout_record = payout.to_document()

    payout_created = payout_index == -1
    if payout_created:
        # TODO: confirm with product whether a missing payout should be created or rejected
        logger.warning("No payout found for offer, appending a new one", offer_id=offer_id)
        payouts.append(payout_record)
    else:
        payouts[payout_index] = payout_record

    await save_documents((offers_path, offers), (payouts_path, payouts))

    logger.info(
        "Offer updated",
        offer_id=offer_id,
        changed=sorted(changes.model_dump(exclude_none=True)),
        payout_type=payout.type,
        payout_created=payout_created,
    )
    prompt.say("Offer updated successfully!")
    return UpdateResult(
        status=UpdateStatus.UPDATED,
        offer_id=offer_id,
        offer=Offer.model_validate(offer_record),
        payout=payout,
        payout_created=payout_created,
    )
