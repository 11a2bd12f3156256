"""Interactive payout form.

Collects a payout structure (fixed, CPA, or both) from the operator, using the
existing payout for defaults. An empty answer keeps the existing value.
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Mapping, Optional

import structlog

from offer_editor.exceptions import InvalidAmountError
from offer_editor.schemas.payout import Amount, Payout, PayoutType
from offer_editor.services.prompt import Prompt

logger = structlog.get_logger()

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity")
_RADIX_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")

# Below this, whole numbers are written out in full digits rather than exponent form
_EXPONENT_THRESHOLD = 1e21


def coerce_number(answer: str) -> Amount:
    """Convert operator text to a number, NaN when it is not numeric.

    Surrounding whitespace is ignored and blank text is 0. Whole numbers come
    back as ``int``.
    """
    text = answer.strip()
    if not text:
        return 0
    if _RADIX_RE.fullmatch(text):
        return int(text, 0)
    if not _DECIMAL_RE.fullmatch(text):
        return math.nan

    value = float(text.replace("Infinity", "inf"))
    if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return int(value)
    return value


def strict_coerce_number(answer: str) -> Amount:
    """Like ``coerce_number`` but raise on non-numeric text."""
    value = coerce_number(answer)
    if isinstance(value, float) and math.isnan(value):
        raise InvalidAmountError(answer)
    return value


def _show(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)


async def _ask_amount(
    prompt: Prompt,
    question: str,
    default: Amount,
    to_number: Callable[[str], Amount],
) -> Amount:
    answer = await prompt.ask(f"{question} [{_show(default)}]: ")
    return to_number(answer) if answer else default


async def collect_country_overrides(
    prompt: Prompt,
    to_number: Callable[[str], Amount] = coerce_number,
) -> dict[str, Amount]:
    """Ask for country/amount pairs until the operator enters an empty code."""
    overrides: dict[str, Amount] = {}
    while True:
        country = await prompt.ask("Enter country code (or press Enter to finish): ")
        if not country:
            break
        amount = to_number(await prompt.ask(f"Enter CPA for {country}: "))
        overrides[country.upper()] = amount
    return overrides


async def collect_payout(
    prompt: Prompt,
    existing: Optional[Mapping[str, Any]] = None,
    *,
    strict_numbers: bool = False,
) -> Payout:
    """Run the payout form and return the new payout (without ``offerId``).

    Fields that do not apply to the chosen type are left out. Free-form type
    text is accepted verbatim and yields a payout with no amounts.
    """
    existing = existing or {}
    to_number = strict_coerce_number if strict_numbers else coerce_number

    current_type = existing.get("type")
    answer = await prompt.ask(
        f"Enter payout type (CPA/FIXED/CPA_AND_FIXED) [{_show(current_type)}]: "
    )
    payout_type = answer or current_type
    kind = PayoutType.parse(payout_type)

    fields: dict[str, Any] = {"type": payout_type}

    if kind is not None and kind.includes_cpa:
        fields["cpaAmount"] = await _ask_amount(
            prompt, "Enter base CPA amount", existing.get("cpaAmount") or 0, to_number
        )
        edit = await prompt.ask("Do you want to edit country-specific CPA overrides? (yes/no): ")
        if edit.lower() == "yes":
            fields["cpaCountryOverrides"] = await collect_country_overrides(prompt, to_number)
        elif existing.get("cpaCountryOverrides") is not None:
            fields["cpaCountryOverrides"] = existing["cpaCountryOverrides"]

    if kind is not None and kind.includes_fixed:
        fields["fixedAmount"] = await _ask_amount(
            prompt, "Enter fixed amount", existing.get("fixedAmount") or 0, to_number
        )

    if payout_type is not None and kind is None:
        logger.warning("Unrecognised payout type stored verbatim", type=payout_type)

    payout = Payout.model_validate(fields)
    logger.info(
        "Collected payout",
        type=payout.type,
        overrides=len(payout.cpa_country_overrides or {}),
    )
    return payout
