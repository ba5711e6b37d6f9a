"""OIDC helpers: discovery metadata and the userinfo endpoint."""

import json
from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from .claims import ClaimSet
from .config import require_vipps_authority

logger = structlog.get_logger(__name__)

# Simple cached OIDC metadata loader
_OIDC_CACHE: dict[str, dict] = {}


class UserInfoProtocolError(RuntimeError):
    """The userinfo endpoint did not return a usable claim document."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


async def _fetch_oidc_metadata(authority: str) -> dict:
    key = f"metadata:{authority}"
    if key in _OIDC_CACHE:
        return _OIDC_CACHE[key]
    url = authority.rstrip("/") + "/.well-known/openid-configuration"
    async with httpx.AsyncClient() as client:
        resp = await client.get(url, timeout=10)
        resp.raise_for_status()
        md = resp.json()
        _OIDC_CACHE[key] = md
        return md


async def vipps_issuer_endpoint(service: str) -> str:
    """Fetch an endpoint URL (authorization/token/userinfo/etc) from OIDC metadata."""
    return (await _fetch_oidc_metadata(require_vipps_authority()))[service]


def _claim_values(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, bool):
        return ["true" if value else "false"]
    if isinstance(value, str):
        return [value]
    if isinstance(value, (int, float)):
        return [str(value)]
    if isinstance(value, list):
        return [item for element in value for item in _claim_values(element)]
    return [json.dumps(value, ensure_ascii=False)]


def claims_from_userinfo(document: Mapping[str, Any]) -> ClaimSet:
    """Flatten a userinfo JSON document into a claim set.

    Strings pass through, booleans become ``"true"``/``"false"``, objects
    are re-encoded as JSON, arrays become repeated claims and nulls are
    dropped.
    """
    return ClaimSet(
        (name, item)
        for name, value in document.items()
        for item in _claim_values(value)
    )


async def get_userinfo_claims(
    userinfo_endpoint: str | None, access_token: str
) -> ClaimSet:
    """Fetch the claims of `access_token` from the userinfo endpoint.

    When `userinfo_endpoint` is empty it is read from the discovery document
    of the configured authority.

    Raises:
        UserInfoProtocolError: If the request fails, the endpoint answers
            with a non-success status, or the body is not a JSON object.
        RuntimeError: If no endpoint is given and VIPPS_AUTHORITY is not set.
    """
    try:
        if not userinfo_endpoint:
            userinfo_endpoint = await vipps_issuer_endpoint("userinfo_endpoint")
        async with httpx.AsyncClient() as client:
            resp = await client.get(
                userinfo_endpoint,
                headers={"Authorization": f"Bearer {access_token}"},
                timeout=10,
            )
            resp.raise_for_status()
            document = resp.json()
    except httpx.HTTPStatusError as e:
        logger.warning(
            "vipps_userinfo_failed",
            endpoint=userinfo_endpoint,
            status_code=e.response.status_code,
        )
        raise UserInfoProtocolError(
            f"Userinfo request failed: {e.response.status_code}",
            status_code=e.response.status_code,
        ) from e
    except httpx.HTTPError as e:
        logger.warning("vipps_userinfo_failed", endpoint=userinfo_endpoint, error=str(e))
        raise UserInfoProtocolError(f"Userinfo request failed: {e}") from e
    except ValueError as e:
        logger.warning("vipps_userinfo_failed", endpoint=userinfo_endpoint, error=str(e))
        raise UserInfoProtocolError("Userinfo response is not valid JSON") from e

    if not isinstance(document, dict):
        logger.warning(
            "vipps_userinfo_failed",
            endpoint=userinfo_endpoint,
            error="not a JSON object",
        )
        raise UserInfoProtocolError("Userinfo response is not a JSON object")
    return claims_from_userinfo(document)
