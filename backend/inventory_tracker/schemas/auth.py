"""
Pydantic schemas for signup and login
"""

from pydantic import Field
from typing import Optional

from inventory_tracker.schemas.base import CamelModel

class LoginRequest(CamelModel):
    """Credential pair; presence is checked by the identity service"""

    email: Optional[str] = Field(
        None,
        max_length=255,
        description="Login email",
        examples=["owner@acme.test"]
    )

    password: Optional[str] = Field(
        None,
        description="Plaintext password, hashed before storage"
    )

class SignupRequest(LoginRequest):
    """Credentials plus the name of the organization to create"""

    organization_name: Optional[str] = Field(
        None,
        max_length=255,
        description="Display name of the new organization",
        examples=["Acme Supplies"]
    )

class TokenResponse(CamelModel):
    """Signed bearer token"""

    token: str = Field(..., description="JWT to send as 'Authorization: Bearer <token>'")
