"""
Identity and tenant binding: signup, login and token verification
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_tracker.core.errors import (
    ConflictError,
    InvalidCredentialsError,
    StoreError,
    ValidationError,
)
from inventory_tracker.core.security import PasswordHasher, Principal, TokenService
from inventory_tracker.models.organization import Organization
from inventory_tracker.models.user import User

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class IdentityService:
    """
    Authenticates credential pairs and issues tokens bound to one organization
    """

    def __init__(self, db: Session, hasher: PasswordHasher, tokens: TokenService):
        self.db = db
        self.hasher = hasher
        self.tokens = tokens

    def signup(self, email: Optional[str], password: Optional[str], organization_name: Optional[str]) -> str:
        """
        Create a new organization with its first user and issue a token

        Args:
            email: Login email, unique across all organizations
            password: Plaintext password
            organization_name: Display name of the new organization

        Returns:
            Signed token for the new user

        Raises:
            ValidationError: If any field is missing or empty
            ConflictError: If the email is already registered
        """
        if _is_blank(email) or not password or _is_blank(organization_name):
            raise ValidationError("Missing fields")

        email = email.strip()
        if self.db.query(User.id).filter(User.email == email).first() is not None:
            raise ConflictError("Email already used")

        try:
            organization = Organization(name=organization_name.strip())
            user = User(
                email=email,
                password_hash=self.hasher.hash(password),
                organization=organization,
            )
            self.db.add_all([organization, user])
            self.db.commit()
        except IntegrityError:
            # Concurrent signup with the same email won the race
            self.db.rollback()
            raise ConflictError("Email already used")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Signup failed: {e}", exc_info=True)
            raise StoreError("Signup failed")

        logger.info(f"Created organization {organization.id} with user {user.id}")
        return self.tokens.issue(user.id, organization.id)

    def login(self, email: Optional[str], password: Optional[str]) -> str:
        """
        Exchange a credential pair for a token

        Unknown emails and wrong passwords produce the same error.
        """
        if _is_blank(email) or not password:
            raise ValidationError("Missing fields")

        try:
            user = self.db.query(User).filter(User.email == email.strip()).first()
        except SQLAlchemyError as e:
            logger.error(f"Login lookup failed: {e}", exc_info=True)
            raise StoreError("Login failed")

        if user is None:
            self.hasher.dummy_verify()
            logger.warning("Login rejected: invalid credentials")
            raise InvalidCredentialsError()

        if not self.hasher.verify(password, user.password_hash):
            logger.warning(f"Login rejected for user {user.id}: invalid credentials")
            raise InvalidCredentialsError()

        logger.info(f"User {user.id} logged in")
        return self.tokens.issue(user.id, user.organization_id)

    def verify(self, token: str) -> Principal:
        """Resolve a bearer token to its user/organization binding"""
        return self.tokens.verify(token)
