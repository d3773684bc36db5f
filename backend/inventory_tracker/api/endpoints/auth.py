"""
Signup and login endpoints
"""

from fastapi import APIRouter, Depends

from inventory_tracker.api.deps import get_identity_service
from inventory_tracker.schemas.auth import LoginRequest, SignupRequest, TokenResponse
from inventory_tracker.services.identity import IdentityService

router = APIRouter()

@router.post("/signup", response_model=TokenResponse)
def signup(payload: SignupRequest, identity: IdentityService = Depends(get_identity_service)):
    """
    Create an organization and its first user

    Expected payload:
    {
        "email": "owner@acme.test",
        "password": "...",
        "organizationName": "Acme Supplies"
    }
    """
    token = identity.signup(payload.email, payload.password, payload.organization_name)
    return TokenResponse(token=token)

@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, identity: IdentityService = Depends(get_identity_service)):
    """Exchange email and password for a bearer token"""
    token = identity.login(payload.email, payload.password)
    return TokenResponse(token=token)
