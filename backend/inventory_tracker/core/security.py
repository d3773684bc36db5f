"""
Password hashing and signed token utilities
Uses bcrypt through passlib and HS256 JWTs through python-jose
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import jwt, ExpiredSignatureError, JWTError
from passlib.context import CryptContext

from inventory_tracker.core.errors import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Principal:
    """Identity resolved from a verified token"""

    user_id: int
    organization_id: int


class PasswordHasher:
    """
    One-way password hashing with a per-hash random salt
    """

    def __init__(self, rounds: int = 12):
        """Initialize bcrypt context with the given cost factor"""
        if rounds < 10:
            raise ValueError("bcrypt cost factor must be at least 10 rounds")
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, raw_password: str) -> str:
        """
        Hash a plaintext password

        Args:
            raw_password: Password as submitted by the user

        Returns:
            bcrypt hash string, salt included
        """
        return self._context.hash(raw_password)

    def verify(self, raw_password: str, hashed_password: str) -> bool:
        """
        Check a plaintext password against a stored hash

        Args:
            raw_password: Password as submitted by the user
            hashed_password: Stored bcrypt hash

        Returns:
            True if the password matches
        """
        try:
            return self._context.verify(raw_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.warning(f"Unreadable password hash: {e}")
            return False

    def dummy_verify(self) -> None:
        """Spend the same time as a real verification"""
        self._context.dummy_verify()


class TokenService:
    """
    Issues and verifies signed, expiring tokens binding a user to an organization
    The signing secret is supplied by the caller, typically from settings
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 1440):
        """Initialize token service with signing parameters"""
        if not secret_key:
            raise ValueError("Token signing secret is not configured")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires_in = timedelta(minutes=expire_minutes)

    def __repr__(self) -> str:
        return f"<TokenService(algorithm={self._algorithm}, expires_in={self._expires_in})>"

    def issue(self, user_id: int, organization_id: int) -> str:
        """
        Create a signed token for a user/organization binding

        Args:
            user_id: Authenticated user id
            organization_id: Organization the user belongs to

        Returns:
            Encoded JWT string
        """
        issued_at = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "userId": user_id,
            "organizationId": organization_id,
            "iat": issued_at,
            "exp": issued_at + self._expires_in,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> Principal:
        """
        Decode and validate a token

        Args:
            token: Encoded JWT string

        Returns:
            Principal carried by the token

        Raises:
            AuthenticationError: If the token is malformed, tampered with or expired
        """
        if not token:
            raise AuthenticationError("No token")

        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise AuthenticationError("Token expired")
        except JWTError:
            raise AuthenticationError("Invalid token")

        user_id = payload.get("userId")
        organization_id = payload.get("organizationId")
        if not isinstance(user_id, int) or not isinstance(organization_id, int):
            raise AuthenticationError("Invalid token")

        return Principal(user_id=user_id, organization_id=organization_id)
