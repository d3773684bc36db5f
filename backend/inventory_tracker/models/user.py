"""
User model for credential holders bound to one organization
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from inventory_tracker.models.base import BaseModel

class User(BaseModel):
    """
    User credentials; the password is stored only as a bcrypt hash
    """
    __tablename__ = "users"

    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Login email, unique across all organizations"
    )

    password_hash = Column(
        Text,
        nullable=False,
        comment="bcrypt hash of the password"
    )

    organization_id = Column(
        Integer,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Organization this user belongs to"
    )

    # Relationships
    organization = relationship("Organization", back_populates="users")

    __table_args__ = (
        {"comment": "Users authenticating on behalf of an organization"}
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, organization_id={self.organization_id})>"
