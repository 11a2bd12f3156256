"""Tests for offer and payout schemas."""

import pytest
from pydantic import ValidationError

from offer_editor.schemas import OfferUpdate, Payout, PayoutType


def test_offer_update_from_answers_treats_empty_as_keep():
    update = OfferUpdate.from_answers("", "", "x, y ,z")
    record = {"id": "o1", "title": "Old", "description": "D", "categories": ["a"]}

    update.apply(record)

    assert record == {"id": "o1", "title": "Old", "description": "D", "categories": ["x", "y", "z"]}


def test_payout_type_parse_and_components():
    assert PayoutType.parse("CPA_AND_FIXED") is PayoutType.CPA_AND_FIXED
    assert PayoutType.parse("cpa") is None
    assert PayoutType.CPA.includes_cpa and not PayoutType.CPA.includes_fixed
    assert PayoutType.CPA_AND_FIXED.includes_fixed


def test_payout_requires_amounts_for_its_type():
    with pytest.raises(ValidationError):
        Payout.model_validate({"type": "CPA_AND_FIXED", "cpaAmount": 1})
    with pytest.raises(ValidationError):
        Payout.model_validate({"type": "FIXED"})


def test_payout_uppercases_override_keys_and_keeps_key_order():
    payout = Payout.model_validate(
        {"type": "CPA", "cpaAmount": 1, "cpaCountryOverrides": {"us": 2}}
    )
    payout.offer_id = "o9"

    document = payout.to_document()

    assert list(document) == ["offerId", "type", "cpaAmount", "cpaCountryOverrides"]
    assert document["cpaCountryOverrides"] == {"US": 2}
