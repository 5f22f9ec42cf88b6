"""
RefreshToken model: stores issued refresh tokens so they can be rotated and revoked.
Fields:
- token (unique opaque hex string, 40 random bytes)
- admin_id (String(36)) - FK to admins.id
- expires_at (naive UTC)

A row is deleted on logout, rotation, revoke-all, when found expired during
verification, or by the purge sweep. There is no "revoked" soft state.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from models.base_model import BaseModel, Base


class RefreshToken(BaseModel, Base):
    __tablename__ = "refresh_tokens"

    token = Column(String(128), nullable=False, unique=True, index=True)
    admin_id = Column(String(36), ForeignKey("admins.id", ondelete="CASCADE"), nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False, index=True)

    admin = relationship("Admin", passive_deletes=True)

    def __repr__(self):
        return f"<RefreshToken admin={self.admin_id} expires_at={self.expires_at}>"
