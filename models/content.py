"""
Content model: one row per page of the marketing site.

`sections` maps a section name to any JSON value (object, list of objects or
scalar). There is no schema per section; the only shape metadata lives in
models/content_defaults.py. `seo` holds metaTitle / metaDescription /
keywords / ogImage / canonicalUrl.
"""
from sqlalchemy import Column, String, JSON, ForeignKey
from sqlalchemy.orm import relationship

from models.base_model import BaseModel, Base


class Content(BaseModel, Base):
    __tablename__ = "contents"

    page = Column(String(100), nullable=False, unique=True, index=True)  # lowercased
    sections = Column(JSON, nullable=False, default=dict)
    seo = Column(JSON, nullable=False, default=dict)
    updated_by = Column(String(36), ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)

    editor = relationship("Admin")

    def __repr__(self):
        return f"<Content page={self.page} sections={len(self.sections or {})}>"
