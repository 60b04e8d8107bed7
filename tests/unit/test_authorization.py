"""
Authorization gate and client principal parsing tests.
"""

import base64
import json

import pytest

from exceptions import UnauthorizedError
from infrastructure.auth.principal import (
    CallerIdentity,
    encode_client_principal,
    parse_client_principal,
)
from services.authorization import AuthorizationGate, authorize, require_admin


def _b64(payload) -> str:
    return base64.b64encode(json.dumps(payload).encode()).decode()


# ============================================================================
# Client principal
# ============================================================================

class TestParseClientPrincipal:

    def test_round_trip_app_service_format(self):
        header = encode_client_principal("u-1", "Abebe", ["ADMIN", "Reader"])
        identity = parse_client_principal(header)
        assert identity == CallerIdentity("u-1", "Abebe", ("ADMIN", "Reader"))

    def test_static_web_apps_format(self):
        header = _b64({"userId": "u-2", "userDetails": "sara@example.org", "userRoles": ["anonymous", "ADMIN"]})
        identity = parse_client_principal(header)
        assert identity.user_id == "u-2"
        assert identity.has_role("ADMIN")

    def test_custom_role_claim_type(self):
        header = _b64({"claims": [
            {"typ": "oid", "val": "u-3"},
            {"typ": "groups", "val": "ADMIN"},
        ]})
        assert parse_client_principal(header).roles == ()
        assert parse_client_principal(header, role_claim_type="groups").roles == ("ADMIN",)

    def test_missing_padding_accepted(self):
        header = encode_client_principal("u-4", roles=["ADMIN"]).rstrip("=")
        assert parse_client_principal(header).has_role("ADMIN")

    @pytest.mark.parametrize("header", [None, "", "   "])
    def test_anonymous(self, header):
        assert parse_client_principal(header) is None

    @pytest.mark.parametrize("header", [
        "not base64!!",
        base64.b64encode(b"not json").decode(),
        _b64(["a", "list"]),
        _b64({"auth_typ": "aad"}),
    ])
    def test_malformed(self, header):
        assert parse_client_principal(header) is None


# ============================================================================
# Authorization gate
# ============================================================================

class TestAuthorizationGate:

    def test_admin_allowed(self, admin_identity):
        decision = AuthorizationGate().authorize(admin_identity)
        assert decision.allowed is True

    def test_no_session(self):
        decision = AuthorizationGate().authorize(None)
        assert decision.allowed is False
        assert decision.reason == "no session"

    def test_missing_role(self, viewer_identity):
        decision = AuthorizationGate().authorize(viewer_identity)
        assert decision.allowed is False
        assert "ADMIN" in decision.reason

    def test_role_match_is_exact(self):
        identity = CallerIdentity("u", "n", ("admin", "ADMINS"))
        assert AuthorizationGate().authorize(identity).allowed is False

    def test_custom_admin_role(self):
        identity = CallerIdentity("u", "n", ("GridOperator",))
        assert AuthorizationGate("GridOperator").authorize(identity).allowed is True

    def test_require_admin_returns_identity(self, admin_identity):
        assert AuthorizationGate().require_admin(admin_identity) is admin_identity

    @pytest.mark.parametrize("identity", [None, CallerIdentity("u", "n", ())])
    def test_require_admin_raises_uniform_error(self, identity):
        with pytest.raises(UnauthorizedError) as exc_info:
            AuthorizationGate().require_admin(identity)
        assert str(exc_info.value) == "Unauthorized"

    def test_module_level_helpers(self, admin_identity, viewer_identity):
        assert authorize(admin_identity).allowed
        with pytest.raises(UnauthorizedError):
            require_admin(viewer_identity)
