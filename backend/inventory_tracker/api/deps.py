"""
Request dependencies for authentication and service construction
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from typing import Optional
import logging

from inventory_tracker.core.database import get_db
from inventory_tracker.core.errors import AuthenticationError
from inventory_tracker.core.security import PasswordHasher, Principal, TokenService
from inventory_tracker.services.catalog import CatalogService
from inventory_tracker.services.identity import IdentityService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

def get_token_service(request: Request) -> TokenService:
    """Token service built at application startup"""
    return request.app.state.token_service

def get_password_hasher(request: Request) -> PasswordHasher:
    """Password hasher built at application startup"""
    return request.app.state.password_hasher

def get_identity_service(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> IdentityService:
    return IdentityService(db, hasher, tokens)

def get_current_principal(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> Principal:
    """
    Resolve the caller from 'Authorization: Bearer <token>'
    The organization id on the returned principal scopes the rest of the request
    """
    if credentials is None:
        if request.headers.get("Authorization"):
            logger.warning("Rejected request with malformed Authorization header")
            raise AuthenticationError("Invalid token")
        raise AuthenticationError("No token")

    try:
        principal = tokens.verify(credentials.credentials)
    except AuthenticationError as e:
        logger.warning(f"Rejected bearer token: {e.message}")
        raise

    request.state.principal = principal
    return principal

def get_catalog_service(
    request: Request,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> CatalogService:
    return CatalogService(
        db,
        principal.organization_id,
        default_threshold=request.app.state.low_stock_default_threshold,
    )
