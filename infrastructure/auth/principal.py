"""
Caller Identity from the App Service Authentication Header.

The identity provider sits in front of the Function App and forwards the
signed-in caller as X-MS-CLIENT-PRINCIPAL: base64-encoded JSON. Two shapes
are accepted:

    App Service:      {"auth_typ", "name_typ", "role_typ",
                       "claims": [{"typ": ..., "val": ...}, ...]}
    Static Web Apps:  {"userId", "userDetails", "userRoles": [...]}

A missing, undecodable or malformed header yields no identity.

Exports:
    CallerIdentity: Parsed caller
    parse_client_principal: Header value -> Optional[CallerIdentity]
    encode_client_principal: Build a header value (console, tests)
"""

import base64
import binascii
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)

OBJECT_ID_CLAIMS = (
    "http://schemas.microsoft.com/identity/claims/objectidentifier",
    "oid",
    "sub",
)
DEFAULT_NAME_CLAIM = "name"


@dataclass(frozen=True)
class CallerIdentity:
    """Signed-in caller as seen by the authorization gate."""

    user_id: Optional[str]
    name: Optional[str]
    roles: Tuple[str, ...] = ()

    def has_role(self, role: str) -> bool:
        """Exact, case-sensitive role membership."""
        return role in self.roles


def _decode(header_value: str) -> Optional[Dict[str, Any]]:
    text = header_value.strip()
    padded = text + "=" * (-len(text) % 4)
    try:
        payload = json.loads(base64.b64decode(padded, validate=True).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        logger.warning(f"Undecodable client principal header: {type(e).__name__}")
        return None
    if not isinstance(payload, dict):
        logger.warning("Client principal is not a JSON object")
        return None
    return payload


def _claim_values(claims: Iterable[Any], claim_type: str):
    for claim in claims:
        if isinstance(claim, dict) and claim.get("typ") == claim_type and isinstance(claim.get("val"), str):
            yield claim["val"]


def parse_client_principal(
    header_value: Optional[str],
    role_claim_type: str = "roles"
) -> Optional[CallerIdentity]:
    """
    Parse an X-MS-CLIENT-PRINCIPAL header value.

    Args:
        header_value: Raw header value (None or blank means anonymous)
        role_claim_type: Claim type for roles when the principal has no role_typ

    Returns:
        CallerIdentity, or None for anonymous / malformed input
    """
    if not header_value or not header_value.strip():
        return None

    payload = _decode(header_value)
    if payload is None:
        return None

    if "userRoles" in payload or "userId" in payload:
        roles = payload.get("userRoles") or []
        return CallerIdentity(
            user_id=payload.get("userId"),
            name=payload.get("userDetails"),
            roles=tuple(r for r in roles if isinstance(r, str)),
        )

    claims = payload.get("claims")
    if not isinstance(claims, list):
        logger.warning("Client principal has no claims list")
        return None

    role_typ = payload.get("role_typ") or role_claim_type
    name_typ = payload.get("name_typ") or DEFAULT_NAME_CLAIM

    user_id = None
    for claim_type in OBJECT_ID_CLAIMS:
        user_id = next(_claim_values(claims, claim_type), None)
        if user_id:
            break

    return CallerIdentity(
        user_id=user_id,
        name=next(_claim_values(claims, name_typ), None),
        roles=tuple(_claim_values(claims, role_typ)),
    )


def encode_client_principal(
    user_id: str,
    name: Optional[str] = None,
    roles: Iterable[str] = ()
) -> str:
    """Build an App Service style principal header value."""
    claims = [{"typ": "oid", "val": user_id}]
    if name:
        claims.append({"typ": DEFAULT_NAME_CLAIM, "val": name})
    claims.extend({"typ": "roles", "val": role} for role in roles)
    payload = {
        "auth_typ": "aad",
        "name_typ": DEFAULT_NAME_CLAIM,
        "role_typ": "roles",
        "claims": claims,
    }
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")
