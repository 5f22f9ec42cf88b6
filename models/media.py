from sqlalchemy import Column, String, Integer, Boolean, JSON, ForeignKey

from models.base_model import BaseModel, Base


class Media(BaseModel, Base):
    """An uploaded file. `path` is the location on disk and is never serialized."""
    __tablename__ = "media"

    filename = Column(String(255), nullable=False)
    original_name = Column(String(255), nullable=False)
    path = Column(String(1024), nullable=False)
    url = Column(String(1024), nullable=False)
    mime_type = Column(String(100), nullable=False, index=True)
    size = Column(Integer, nullable=False)
    width = Column(Integer, nullable=True)
    height = Column(Integer, nullable=True)
    alt = Column(String(255), nullable=True)
    caption = Column(String(500), nullable=True)
    uploaded_by = Column(String(36), ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)
    folder = Column(String(100), nullable=False, default="general", index=True)
    tags = Column(JSON, nullable=False, default=list)
    is_public = Column(Boolean, nullable=False, default=True)
