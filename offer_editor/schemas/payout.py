"""Payout schemas."""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Amounts keep the int/float distinction so whole numbers are written as ``5``
Amount = Union[int, float]


class PayoutType(str, Enum):
    """Known payout structures."""

    CPA = "CPA"
    FIXED = "FIXED"
    CPA_AND_FIXED = "CPA_AND_FIXED"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["PayoutType"]:
        """Return the matching member, or None for free-form types."""
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def includes_cpa(self) -> bool:
        return self in (PayoutType.CPA, PayoutType.CPA_AND_FIXED)

    @property
    def includes_fixed(self) -> bool:
        return self in (PayoutType.FIXED, PayoutType.CPA_AND_FIXED)


class Payout(BaseModel):
    """Payout schedule entry for one offer.

    ``type`` is kept as a plain string: anything the operator types that is not
    a ``PayoutType`` is stored verbatim and carries no amounts.
    """

    model_config = ConfigDict(populate_by_name=True)

    offer_id: Optional[str] = Field(default=None, alias="offerId")
    type: Optional[str] = None
    cpa_amount: Optional[Amount] = Field(default=None, alias="cpaAmount")
    # Carried-forward maps may hold null where an earlier session stored NaN
    cpa_country_overrides: Optional[dict[str, Optional[Amount]]] = Field(
        default=None, alias="cpaCountryOverrides"
    )
    fixed_amount: Optional[Amount] = Field(default=None, alias="fixedAmount")

    @field_validator("cpa_country_overrides", mode="after")
    @classmethod
    def _upper_country_codes(
        cls, v: Optional[dict[str, Optional[Amount]]]
    ) -> Optional[dict[str, Optional[Amount]]]:
        if v is None:
            return None
        return {code.upper(): amount for code, amount in v.items()}

    @model_validator(mode="after")
    def _amounts_match_type(self) -> "Payout":
        kind = self.kind
        if kind is None:
            return self
        if kind.includes_cpa and self.cpa_amount is None:
            raise ValueError(f"{kind.value} payout requires cpaAmount")
        if kind.includes_fixed and self.fixed_amount is None:
            raise ValueError(f"{kind.value} payout requires fixedAmount")
        return self

    @property
    def kind(self) -> Optional[PayoutType]:
        return PayoutType.parse(self.type)

    def to_document(self) -> dict:
        """Serialize with on-disk (camelCase) keys, omitting unset fields."""
        document = self.model_dump(by_alias=True)
        return {key: value for key, value in document.items() if value is not None}
