from enum import Enum

from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, JSON, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.types import Enum as SAEnum

from models.base_model import BaseModel, Base, utcnow
from utils.text import calculate_read_time


class BlogStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


BLOG_CATEGORIES = ("Strategy", "Automation", "Performance", "Technology", "Growth", "General")


class Blog(BaseModel, Base):
    __tablename__ = "blogs"

    title = Column(String(200), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    featured_image = Column(String(512), nullable=True)
    excerpt = Column(String(300), nullable=True)
    content = Column(Text, nullable=False)
    category = Column(String(50), nullable=False, default="General")
    tags = Column(JSON, nullable=False, default=list)  # lowercased strings
    author_id = Column(String(36), ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)
    status = Column(
        SAEnum(BlogStatus, name="blog_status", native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=BlogStatus.DRAFT,
    )
    publish_date = Column(DateTime, nullable=True)
    read_time = Column(Integer, nullable=False, default=1)  # minutes
    featured = Column(Boolean, nullable=False, default=False)
    seo = Column(JSON, nullable=False, default=dict)
    view_count = Column(Integer, nullable=False, default=0)

    author = relationship("Admin")

    __table_args__ = (
        Index("ix_blogs_status_publish_date", "status", "publish_date"),
        Index("ix_blogs_category", "category"),
    )

    def __repr__(self):
        return f"<Blog {self.slug} status={self.status}>"

    def apply_publishing_rules(self):
        """Recompute read_time; stamp publish_date the first time the post is published."""
        self.read_time = calculate_read_time(self.content)
        if self.status == BlogStatus.PUBLISHED and self.publish_date is None:
            self.publish_date = utcnow()
