"""
Authorization Gate.

Decides whether a caller may use the grid asset API. Only callers whose
role list contains the administrative role (exact, case-sensitive match)
are admitted; a missing identity is denied. Denial has no side effect
other than a log line.

Exports:
    AuthorizationDecision: Outcome of one check
    AuthorizationGate: Configurable gate
    authorize, require_admin: Module-level helpers using AuthConfig defaults
"""

from dataclasses import dataclass
from typing import Optional

from config.defaults import AuthDefaults
from exceptions import UnauthorizedError
from infrastructure.auth.principal import CallerIdentity
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.SERVICE, "AuthorizationGate")


@dataclass(frozen=True)
class AuthorizationDecision:
    allowed: bool
    reason: str


class AuthorizationGate:
    """
    Role check in front of every Lifecycle API operation.

    Usage:
        gate = AuthorizationGate(admin_role=config.auth.admin_role)
        gate.require_admin(identity)  # raises UnauthorizedError
    """

    def __init__(self, admin_role: str = AuthDefaults.ADMIN_ROLE):
        self.admin_role = admin_role

    def authorize(self, identity: Optional[CallerIdentity]) -> AuthorizationDecision:
        if identity is None:
            return AuthorizationDecision(False, "no session")
        if not identity.has_role(self.admin_role):
            return AuthorizationDecision(False, f"missing role {self.admin_role}")
        return AuthorizationDecision(True, "admin")

    def require_admin(self, identity: Optional[CallerIdentity]) -> CallerIdentity:
        """
        Admit an administrator or raise.

        Returns:
            The admitted identity

        Raises:
            UnauthorizedError: Caller is anonymous or not an administrator
        """
        decision = self.authorize(identity)
        if not decision.allowed:
            user = identity.user_id if identity else None
            logger.warning(f"🚫 Access denied ({decision.reason}) user={user}")
            raise UnauthorizedError()
        return identity


_default_gate = AuthorizationGate()


def authorize(identity: Optional[CallerIdentity]) -> AuthorizationDecision:
    return _default_gate.authorize(identity)


def require_admin(identity: Optional[CallerIdentity]) -> CallerIdentity:
    return _default_gate.require_admin(identity)
