"""Shared types for Vipps user info."""

import datetime
import json
import uuid

from pydantic import BaseModel, ConfigDict, field_validator


class VippsAddress(BaseModel):
    """An address decoded from an `address` or `other_addresses` claim.

    Sub-fields not declared here are kept as extra attributes so that
    additions to the provider's address schema survive decoding. Numeric
    values of declared fields (e.g. ``"postal_code": 150``) become strings.
    """

    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)

    address_type: str
    is_preferred: bool = False
    street_address: str | None = None
    postal_code: str | None = None
    region: str | None = None
    country: str | None = None
    formatted: str | None = None

    @field_validator("address_type")
    @classmethod
    def address_type_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("address_type must not be blank")
        return value

    def to_claim_value(self) -> str:
        """Re-encode the carried-through sub-fields as a JSON claim value."""
        return json.dumps(
            self.model_dump(exclude={"is_preferred"}, exclude_unset=True),
            ensure_ascii=False,
        )


class VippsUserInfo(BaseModel):
    """User profile extracted from the claims of a Vipps Login identity.

    Only `sub` is required; every other field degrades to its empty value
    when the matching claim is missing or malformed.
    """

    model_config = ConfigDict(frozen=True)

    sub: uuid.UUID
    birth_date: datetime.date | None = None
    email: str | None = None
    email_verified: bool = False
    family_name: str | None = None
    given_name: str | None = None
    name: str | None = None
    phone_number: str | None = None
    nnin: str | None = None
    addresses: tuple[VippsAddress, ...] = ()
