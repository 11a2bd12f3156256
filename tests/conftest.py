"""Pytest fixtures for offer editor tests."""

import json

import pytest


OFFERS = [
    {
        "id": "o1",
        "title": "Old",
        "description": "D",
        "categories": ["a", "b"],
    },
    {
        "id": "o2",
        "title": "Second",
        "description": "Another offer",
        "categories": ["games"],
        "network": "affiliate-x",
    },
    {
        "id": "o3",
        "title": "No payout yet",
        "description": "Fresh",
        "categories": [],
    },
]

PAYOUTS = [
    {"offerId": "o1", "type": "FIXED", "fixedAmount": 10},
    {
        "offerId": "o2",
        "type": "CPA_AND_FIXED",
        "cpaAmount": 4.5,
        "cpaCountryOverrides": {"DE": 6, "FR": 5.5},
        "fixedAmount": 2,
    },
]


def write_json(path, data):
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def read_json(path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def offers_path(tmp_path):
    path = tmp_path / "offers.json"
    write_json(path, OFFERS)
    return path


@pytest.fixture
def payouts_path(tmp_path):
    path = tmp_path / "offerPayouts.json"
    write_json(path, PAYOUTS)
    return path
