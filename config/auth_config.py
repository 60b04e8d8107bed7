"""
Authorization Configuration.

Settings for the authorization gate that guards every Lifecycle API call.

Exports:
    AuthConfig: Admin role and principal header settings
"""

import os
from pydantic import BaseModel, Field

from .defaults import AuthDefaults


class AuthConfig(BaseModel):
    """
    Who counts as an administrator, and where the caller identity comes from.

    The role comparison is exact (case-sensitive).
    """

    admin_role: str = Field(
        default=AuthDefaults.ADMIN_ROLE,
        min_length=1,
        description="Role name granting access to the grid asset API (ADMIN_ROLE)"
    )

    principal_header: str = Field(
        default=AuthDefaults.PRINCIPAL_HEADER,
        description="Request header carrying the base64 JSON client principal (PRINCIPAL_HEADER)"
    )

    role_claim_type: str = Field(
        default=AuthDefaults.ROLE_CLAIM_TYPE,
        description="Claim type holding roles when the principal omits role_typ (ROLE_CLAIM_TYPE)"
    )

    def debug_dict(self) -> dict:
        return {
            "admin_role": self.admin_role,
            "principal_header": self.principal_header,
            "role_claim_type": self.role_claim_type,
        }

    @classmethod
    def from_environment(cls) -> "AuthConfig":
        return cls(
            admin_role=os.environ.get("ADMIN_ROLE", AuthDefaults.ADMIN_ROLE),
            principal_header=os.environ.get("PRINCIPAL_HEADER", AuthDefaults.PRINCIPAL_HEADER),
            role_claim_type=os.environ.get("ROLE_CLAIM_TYPE", AuthDefaults.ROLE_CLAIM_TYPE),
        )
