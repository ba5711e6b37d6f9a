"""Extract a Vipps user profile from the claims of an authenticated identity."""

import json

import structlog
from pydantic import ValidationError

from . import claims as ct
from .claims import ClaimSet
from .coercion import parse_bool, parse_date, parse_string, parse_subject
from .config import vipps_authority
from .types import VippsAddress, VippsUserInfo

VIPPS_TEST_API = "https://apitest.vipps.no/"
VIPPS_PROD_API = "https://api.vipps.no/"

logger = structlog.get_logger(__name__)

# Claim names tried for each profile field, first present claim wins.
SUBJECT_CLAIMS = (ct.SUBJECT, ct.LEGACY_NAME_IDENTIFIER)

user_info_claims = {
    "birth_date": (ct.BIRTH_DATE, ct.LEGACY_DATE_OF_BIRTH),
    "email": (ct.EMAIL, ct.LEGACY_EMAIL),
    "email_verified": (ct.EMAIL_VERIFIED,),
    "family_name": (ct.FAMILY_NAME, ct.LEGACY_SURNAME),
    "given_name": (ct.GIVEN_NAME, ct.LEGACY_GIVEN_NAME),
    "name": (ct.NAME, ct.LEGACY_NAME),
    "phone_number": (
        ct.PHONE_NUMBER,
        ct.LEGACY_HOME_PHONE,
        ct.LEGACY_MOBILE_PHONE,
        ct.LEGACY_OTHER_PHONE,
    ),
    "nnin": (ct.NNIN,),
}

_parsers = {
    "birth_date": parse_date,
    "email_verified": parse_bool,
}


def valid_issuers() -> list[str]:
    """Return the issuer prefixes accepted as Vipps Login.

    The configured authority, when set, is appended after the test and
    production API base URLs.
    """
    issuers = [VIPPS_TEST_API, VIPPS_PROD_API]
    authority = vipps_authority()
    if authority.strip():
        issuers.append(authority)
    return issuers


def is_vipps_identity(claims: ClaimSet | None) -> bool:
    """Return True if the claims were issued by a trusted Vipps issuer."""
    if claims is None:
        return False
    issuer = claims.first(ct.ISSUER)
    if issuer is None:
        return False
    return any(issuer.startswith(valid) for valid in valid_issuers())


def get_vipps_user_info(claims: ClaimSet | None) -> VippsUserInfo | None:
    """Convert the claims of a Vipps identity into a VippsUserInfo object.

    Returns None when the claims are not from a trusted issuer or when the
    subject is missing or not a UUID. All other fields are best effort.
    """
    if not is_vipps_identity(claims):
        return None

    subject = parse_subject(claims.find_first(*SUBJECT_CLAIMS))
    if subject is None:
        logger.info("vipps_subject_invalid")
        return None

    fields = {
        field: _parsers.get(field, parse_string)(claims.find_first(*names))
        for field, names in user_info_claims.items()
    }
    return VippsUserInfo(
        sub=subject,
        addresses=get_vipps_addresses(claims),
        **fields,
    )


def get_vipps_addresses(claims: ClaimSet) -> tuple[VippsAddress, ...]:
    """Decode the preferred and other addresses, dropping duplicates.

    Addresses from the `address` claim come first and are preferred;
    addresses from `other_addresses` follow and are not.
    """
    decoded = [
        deserialize_address(value, is_preferred=True)
        for value in claims.find_all(ct.ADDRESS)
    ] + [
        deserialize_address(value)
        for value in claims.find_all(ct.OTHER_ADDRESSES)
    ]
    addresses: list[VippsAddress] = []
    seen: list[dict] = []
    for address in decoded:
        if address is None:
            continue
        # Compared on set fields: an explicit null is not a missing key
        fields = address.model_dump(exclude_unset=True)
        if fields not in seen:
            seen.append(fields)
            addresses.append(address)
    return tuple(addresses)


def deserialize_address(
    value: str | None, is_preferred: bool = False
) -> VippsAddress | None:
    """Decode one JSON address claim value.

    Returns None if the value is blank, is not a JSON object, or has a
    missing or blank `address_type`. Malformed values are logged and
    dropped rather than failing the whole profile. Numeric values of the
    declared address fields are kept as strings.
    """
    if value is None or not value.strip():
        return None

    try:
        data = json.loads(value)
    except json.JSONDecodeError as e:
        logger.warning("vipps_address_malformed", error=str(e))
        return None
    if not isinstance(data, dict):
        logger.warning("vipps_address_malformed", error="not a JSON object")
        return None

    # Ignore if address type is empty
    address_type = data.get("address_type")
    if address_type is None or (
        isinstance(address_type, str) and not address_type.strip()
    ):
        return None

    try:
        return VippsAddress.model_validate({**data, "is_preferred": is_preferred})
    except ValidationError as e:
        logger.warning(
            "vipps_address_invalid",
            address_type=address_type,
            errors=e.error_count(),
        )
        return None
