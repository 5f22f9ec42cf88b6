from enum import Enum

from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, JSON, Index
from sqlalchemy.types import Enum as SAEnum

from models.base_model import BaseModel, Base, utcnow


class CaseStudyStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


INDUSTRIES = (
    "SaaS",
    "E-commerce",
    "Healthcare",
    "Finance",
    "Education",
    "Manufacturing",
    "Real Estate",
    "Technology",
    "Other",
)


class CaseStudy(BaseModel, Base):
    __tablename__ = "case_studies"

    title = Column(String(200), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    industry = Column(String(50), nullable=False)
    client_name = Column(String(200), nullable=False)
    client_logo = Column(String(512), nullable=True)
    featured_image = Column(String(512), nullable=True)
    challenge = Column(Text, nullable=False)
    solution = Column(Text, nullable=False)
    results = Column(JSON, nullable=False, default=list)  # [{metric, value, description}]
    timeline = Column(String(100), nullable=True)
    technologies = Column(JSON, nullable=False, default=list)
    testimonial = Column(JSON, nullable=True)  # {quote, author, designation, avatar}
    featured = Column(Boolean, nullable=False, default=False)
    status = Column(
        SAEnum(CaseStudyStatus, name="case_study_status", native_enum=False,
               values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=CaseStudyStatus.PUBLISHED,
    )
    publish_date = Column(DateTime, nullable=False, default=utcnow)
    seo = Column(JSON, nullable=False, default=dict)
    view_count = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index("ix_case_studies_status_featured", "status", "featured"),
        Index("ix_case_studies_industry", "industry"),
    )
