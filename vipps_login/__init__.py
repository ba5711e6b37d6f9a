"""Public package exports for vipps_login."""

from .claims import ClaimSet
from .config import require_vipps_authority, vipps_authority
from .oidc import (
    UserInfoProtocolError,
    claims_from_userinfo,
    get_userinfo_claims,
    vipps_issuer_endpoint,
)
from .service import (
    VIPPS_PROD_API,
    VIPPS_TEST_API,
    deserialize_address,
    get_vipps_addresses,
    get_vipps_user_info,
    is_vipps_identity,
    valid_issuers,
)
from .types import VippsAddress, VippsUserInfo

__all__ = [
    "VIPPS_PROD_API",
    "VIPPS_TEST_API",
    "ClaimSet",
    "UserInfoProtocolError",
    "VippsAddress",
    "VippsUserInfo",
    "claims_from_userinfo",
    "deserialize_address",
    "get_userinfo_claims",
    "get_vipps_addresses",
    "get_vipps_user_info",
    "is_vipps_identity",
    "require_vipps_authority",
    "valid_issuers",
    "vipps_authority",
    "vipps_issuer_endpoint",
]
